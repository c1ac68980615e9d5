import math
import pytest
from tinyhalf import (to_half, to_float, ceil, floor, trunc, rint, round_half_away, is_nan, is_infinite,
                      POSITIVE_ZERO, NEGATIVE_ZERO, NaN, POSITIVE_INFINITY, NEGATIVE_INFINITY, MAX_VALUE,
                      MIN_VALUE, MIN_NORMAL, LOWEST_VALUE)

ops = [ceil, floor, trunc, rint, round_half_away]

@pytest.mark.parametrize('op', ops)
def test_specials_unchanged(op):
    for h in (POSITIVE_INFINITY, NEGATIVE_INFINITY, POSITIVE_ZERO, NEGATIVE_ZERO, NaN, 0xfc98, LOWEST_VALUE, MAX_VALUE):
        assert op(h) == h, hex(h)

def test_ceil():
    assert to_float(ceil(MIN_NORMAL)) == 1.0
    assert to_float(ceil(0x3ff)) == 1.0
    assert to_float(ceil(to_half(0.2))) == 1.0
    assert ceil(to_half(-0.2)) == NEGATIVE_ZERO
    assert to_float(ceil(to_half(0.7))) == 1.0
    assert ceil(to_half(-0.7)) == NEGATIVE_ZERO
    assert to_float(ceil(to_half(124.7))) == 125.0 and to_float(ceil(to_half(-124.7))) == -124.0
    assert to_float(ceil(to_half(124.2))) == 125.0 and to_float(ceil(to_half(-124.2))) == -124.0

def test_floor():
    assert floor(MIN_NORMAL) == POSITIVE_ZERO
    assert floor(0x3ff) == POSITIVE_ZERO
    assert floor(to_half(0.2)) == POSITIVE_ZERO
    assert to_float(floor(to_half(-0.2))) == -1.0
    assert to_float(floor(to_half(-0.7))) == -1.0
    assert floor(to_half(0.7)) == POSITIVE_ZERO
    assert to_float(floor(to_half(124.7))) == 124.0 and to_float(floor(to_half(-124.7))) == -125.0
    assert to_float(floor(to_half(124.2))) == 124.0 and to_float(floor(to_half(-124.2))) == -125.0

def test_trunc():
    assert trunc(to_half(0.2)) == POSITIVE_ZERO and trunc(to_half(-0.2)) == NEGATIVE_ZERO
    assert trunc(to_half(0.7)) == POSITIVE_ZERO and trunc(to_half(-0.7)) == NEGATIVE_ZERO
    assert to_float(trunc(to_half(124.7))) == 124.0 and to_float(trunc(to_half(-124.7))) == -124.0
    assert to_float(trunc(to_half(124.2))) == 124.0 and to_float(trunc(to_half(-124.2))) == -124.0

def test_rint():
    assert rint(MIN_VALUE) == POSITIVE_ZERO
    assert rint(0x200) == POSITIVE_ZERO
    assert rint(0x3ff) == POSITIVE_ZERO
    assert rint(to_half(0.2)) == POSITIVE_ZERO and rint(to_half(-0.2)) == NEGATIVE_ZERO
    assert to_float(rint(to_half(0.7))) == 1.0 and to_float(rint(to_half(-0.7))) == -1.0
    assert to_float(rint(to_half(124.7))) == 125.0 and to_float(rint(to_half(-124.7))) == -125.0
    assert to_float(rint(to_half(124.2))) == 124.0 and to_float(rint(to_half(-124.2))) == -124.0

def test_rint_ties_to_even():
    assert rint(to_half(0.5)) == POSITIVE_ZERO
    assert rint(to_half(-0.5)) == NEGATIVE_ZERO
    assert to_float(rint(to_half(1.5))) == 2.0
    assert to_float(rint(to_half(2.5))) == 2.0
    assert to_float(rint(to_half(-2.5))) == -2.0
    assert to_float(rint(to_half(1023.5))) == 1024.0

def test_round_half_away():
    assert to_float(round_half_away(to_half(0.5))) == 1.0
    assert to_float(round_half_away(to_half(-0.5))) == -1.0
    assert to_float(round_half_away(to_half(2.5))) == 3.0
    assert round_half_away(to_half(0.4)) == POSITIVE_ZERO

def test_against_math_for_all_halves():
    for h in range(1<<16):
        f = to_float(h)
        if is_nan(h) or is_infinite(h): continue
        assert to_float(ceil(h)) == math.ceil(f), hex(h)
        assert to_float(floor(h)) == math.floor(f), hex(h)
        assert to_float(trunc(h)) == math.trunc(f), hex(h)
        assert to_float(rint(h)) == round(f), hex(h)  # python rounds half to even
        assert math.copysign(1, to_float(trunc(h))) == math.copysign(1, f), hex(h)
