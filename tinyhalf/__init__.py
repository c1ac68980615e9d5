"""Half-precision (IEEE-754 binary16) floats as raw 16-bit patterns.

Conversion to and from binary32, classification, IEEE predicates and a total
order, min/max, rounding to integral values and hexadecimal rendering. Half
values are plain ints, only their low 16 bits are looked at.
"""
from .common import zext, xfmt, RM_RNE, RM_RTZ, RM_RDN, RM_RUP, RM_RMM
from .formats import (f16, f32, SIZE, MAX_EXPONENT, MIN_EXPONENT, POSITIVE_ZERO, NEGATIVE_ZERO, NaN,
                      POSITIVE_INFINITY, NEGATIVE_INFINITY, MAX_VALUE, MIN_VALUE, MIN_NORMAL, LOWEST_VALUE, EPSILON)
from .codec import to_half, to_half_raw, to_float, to_float_raw
from .classify import (is_nan, is_infinite, is_normalized, is_zero, is_subnormal, category,
                       get_sign, get_exponent, get_significand, abs_bits)
from .compare import equals, less, less_equals, greater, greater_equals, compare, total_order_key, min, max
from .rounding import to_integral, ceil, floor, trunc, rint, round_half_away
from .hexfmt import to_hex_string
