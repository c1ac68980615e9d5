"""Rounding of binary16 values to integral binary16 values."""
from .common import *
from .formats import f16

def to_integral(h, rm=RM_RNE):
    h = f16(h)
    if h.is_nan or h.is_inf or h.is_zero: return h.raw
    frac_bits = h.s.bit_length()-1-h.e  # significand bits below the binary point
    if frac_bits <= 0: return h.raw  # already integral
    s_s, _ = shift_right_and_round(h.s, h.is_neg, frac_bits, rm)
    return f16.normalized(s_s, s_s.bit_length()-1, h.is_neg)  # zero keeps the sign of h

def ceil(h): return to_integral(h, RM_RUP)
def floor(h): return to_integral(h, RM_RDN)
def trunc(h): return to_integral(h, RM_RTZ)
def rint(h): return to_integral(h, RM_RNE)
def round_half_away(h): return to_integral(h, RM_RMM)
