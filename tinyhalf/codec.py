"""Conversion between binary16 bit patterns and binary32 values."""
from .common import f32_raw, f32_float
from .formats import f16, f32

def to_half_raw(raw):
    """Converts binary32 bits to binary16 bits, rounding to nearest even."""
    f = f32(raw)
    if f.is_nan: return f16.QNAN
    if f.is_inf: return f16.EXP_MASK | (f16.SIGN_BIT*f.is_neg)
    return f16.normalized(f.s, f.e, f.is_neg)

def to_half(f):
    """Converts a float to binary16 bits.

    The float is rounded to binary32 first; finite values outside of the
    binary32 range become signed infinity.
    """
    return to_half_raw(f32_raw(f))

def to_float_raw(h):  # exact: every binary16 value is a binary32 normal or zero
    h = f16(h)
    if h.is_nan: return f32.QNAN
    if h.is_inf: return f32.EXP_MASK | (f32.SIGN_BIT*h.is_neg)
    return f32.normalized(h.s, h.e, h.is_neg)

def to_float(h): return f32_float(to_float_raw(h))
