"""
binmask
=======

Immutable binary masks with 32-bit bitwise semantics.

Example Usage:
-------------
from binmask import mask

low_nibble = mask().lsb(4)                  # 0b1111
top_three = mask(0b11111111).msb(3, 8)      # 0b11100000
both = low_nibble.combine(top_three)        # 0b11101111
flags = 0b11111111 & both.inverse()         # 0b00010000

"""

# --- Mask value object ---
from .mask import Mask, mask

# --- Bit helpers ---
from .helpers import bit_length, to_int32

# --- Enums ---
from .enums import bitWidths

# --- Expose a version number ---
__version__ = "1.0.0"
