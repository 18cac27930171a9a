#!/usr/bin/env python3

import logging
from dataclasses import dataclass
from typing import Optional

from .enums import bitWidths
from .helpers import bit_length, ones, shift_left, to_int32

logger = logging.getLogger(__name__)

# Mask semantics:
#
# Every transformation works on a 32-bit two's-complement view of the value
# and returns a new Mask wrapped to a signed 32-bit integer. The constructor
# stores the value untouched.
#
#  31                             0
# +-+-----------------------------+
# |S|          value              |
# +-+-----------------------------+


# --- Mask --- #
@dataclass(frozen=True)
class Mask:
    """Immutable binary mask. Defaults to all 1's."""

    value: int = ~0

    def lsb(self, count: int) -> "Mask":
        """Apply mask to the `count` least significant bits."""
        if count < 0:
            logger.debug("lsb count %s is negative, mask is empty", count)
        elif count > bitWidths.NATIVE.value:
            logger.debug("lsb count %s exceeds native width", count)
        return Mask(to_int32(to_int32(self.value) & ones(count)))

    def msb(self, count: int, length: Optional[int] = None) -> "Mask":
        """
        Apply mask to at most `count` most significant bits of a field `length` bits wide.

        `length` defaults to the position of the most significant 1-bit of
        this mask. If `length` is greater than `count`, the result has at most
        `count` 1-bits.

        Args:
            count: Number of high bits to keep.
            length: Width of the field the high bits are counted in.

        Returns:
            A new Mask.
        """
        if length is None:
            length = bit_length(self.value)
        high = shift_left(Mask().lsb(count).value, max(0, length - count))
        return Mask(to_int32(to_int32(self.value) & high))

    def inverse(self) -> "Mask":
        """Inverses the mask."""
        return Mask(to_int32(~to_int32(self.value)))

    def combine(self, other) -> "Mask":
        """Combines with another Mask or a raw number into a single mask."""
        return Mask(to_int32(to_int32(self.value) | to_int32(other)))

    # --- Numeric Coercion --- #
    def __int__(self) -> int:
        return int(self.value)

    def __index__(self) -> int:
        return int(self.value)

    def __and__(self, other) -> int:
        return to_int32(to_int32(self.value) & to_int32(other))

    __rand__ = __and__

    def __or__(self, other) -> int:
        return to_int32(to_int32(self.value) | to_int32(other))

    __ror__ = __or__

    def __invert__(self) -> int:
        return self.inverse().value


def mask(num: Optional[int] = None) -> Mask:
    """Creates a mask object."""
    if num is None:
        return Mask()
    return Mask(num)
