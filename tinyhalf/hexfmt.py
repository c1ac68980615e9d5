import re
from .formats import f16

def to_hex_string(h):
    """Renders binary16 bits as a C99-style hexadecimal literal.

    >>> to_hex_string(0x7bff)
    '0x1.3ffp15'
    >>> to_hex_string(0x0001)
    '0x0.1p-14'

    The mantissa is printed as a hex integer with any run of two or more
    trailing zeros dropped.
    """
    h = f16(h)
    if h.is_nan: return 'NaN'
    sign = '-' if h.is_neg else ''
    if h.is_inf: return sign + 'Infinity'
    if h.is_zero: return sign + '0x0.0p0'
    m = re.sub('0{2,}$', '', f'{h.m:x}')
    if h.is_subnormal: return f'{sign}0x0.{m}p{1-f16.EXP_BIAS}'
    return f'{sign}0x1.{m}p{h.exp-f16.EXP_BIAS}'
