"""Category predicates and field accessors for binary16 bit patterns.

All functions accept any int and look only at its low 16 bits.
"""
from .common import zext
from .formats import f16

def is_nan(h): return zext(16, h)&f16.ABS_MASK > f16.EXP_MASK
def is_infinite(h): return zext(16, h)&f16.ABS_MASK == f16.EXP_MASK
def is_zero(h): return zext(16, h)&f16.ABS_MASK == 0
def is_subnormal(h): return 0 < zext(16, h)&f16.ABS_MASK < f16.SIG_ONE
def is_normalized(h): return f16.SIG_ONE <= zext(16, h)&f16.ABS_MASK < f16.EXP_MASK

def category(h):
    if is_nan(h): return 'nan'
    if is_infinite(h): return 'inf'
    if is_zero(h): return 'zero'
    return 'subnormal' if is_subnormal(h) else 'normal'

def get_sign(h): return -1 if zext(16, h)&f16.SIGN_BIT else 1
def get_exponent(h): return ((zext(16, h)&f16.EXP_MASK)>>f16.TLEN) - f16.EXP_BIAS  # unbiased, -15 for zeros and subnormals
def get_significand(h): return zext(16, h)&f16.TSIG_MASK
def abs_bits(h): return zext(16, h)&f16.ABS_MASK
