#!/usr/bin/env python3

import math

from .enums import bitWidths

# --- Width Constants --- #
NATIVE_BITS = bitWidths.NATIVE.value
NATIVE_MASK = (1 << NATIVE_BITS) - 1
SIGN_BIT = 1 << (NATIVE_BITS - 1)
# Past this, 2**count - 1 rounds up to 2**count in a double
DOUBLE_MANTISSA_BITS = bitWidths.SAFE_INTEGER.value + 1


# --- Bit Helpers --- #
def to_int32(value) -> int:
    """Wraps a value to a signed 32-bit two's-complement integer."""
    field = int(value) & NATIVE_MASK
    if field & SIGN_BIT:
        return field - (1 << NATIVE_BITS)
    return field


def shift_left(value, count: int) -> int:
    """Shifts left the way a 32-bit shift instruction does: count mod 32, result wrapped."""
    return to_int32(to_int32(value) << (int(count) & (NATIVE_BITS - 1)))


def ones(count: int) -> int:
    """
    All-ones pattern for the `count` low bits, wrapped to 32 bits.

    Follows double arithmetic: negative counts truncate to 0, counts of 32 to
    53 give all 32 bits, and from 54 up the pattern rounds to a power of two
    whose low 32 bits are 0.
    """
    if count <= 0 or count > DOUBLE_MANTISSA_BITS:
        return 0
    return to_int32((1 << count) - 1)


def bit_length(num) -> int:
    """
    Position of the highest set bit of `num` (1-based), ignoring sign.

    Computed as floor(log2(num)) + 1 in double precision, so values from
    2**49 - 1 up may report one bit more than `int.bit_length()`.
    Negative values report `bitWidths.SAFE_INTEGER` (52) regardless of
    magnitude, the widest integer a double holds without precision loss.
    """
    if num < 0:
        return bitWidths.SAFE_INTEGER.value
    if num == 0:
        return 0
    return max(0, math.floor(math.log2(num))) + 1
