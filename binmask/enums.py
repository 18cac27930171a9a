from enum import Enum


class bitWidths(Enum):
    NATIVE = 32
    SAFE_INTEGER = 52
