"""IEEE comparison predicates, a total order, and min/max over binary16 bits.

The predicates (equals, less, ...) follow IEEE semantics: any NaN operand makes
them false and -0 equals +0. compare() and total_order_key() implement a total
order for sorting instead: NaN ranks above +inf and -0 ranks below +0.
"""
import builtins
from .common import zext
from .formats import f16
from .classify import is_nan, is_zero

def _ordered(h):  # sign-magnitude to two's complement, -0 and +0 both map to 0
    h = zext(16, h)
    return -(h&f16.ABS_MASK) if h&f16.SIGN_BIT else h

def equals(a, b): return not (is_nan(a) or is_nan(b)) and _ordered(a) == _ordered(b)
def less(a, b): return not (is_nan(a) or is_nan(b)) and _ordered(a) < _ordered(b)
def less_equals(a, b): return not (is_nan(a) or is_nan(b)) and _ordered(a) <= _ordered(b)
def greater(a, b): return not (is_nan(a) or is_nan(b)) and _ordered(a) > _ordered(b)
def greater_equals(a, b): return not (is_nan(a) or is_nan(b)) and _ordered(a) >= _ordered(b)

def total_order_key(h):
    if is_nan(h): return f16.SIGN_BIT  # above +inf, all NaNs equal
    h = zext(16, h)
    return -(h&f16.ABS_MASK)-1 if h&f16.SIGN_BIT else h  # -0 sorts just below +0

def compare(a, b):
    ka, kb = total_order_key(a), total_order_key(b)
    return (ka > kb) - (ka < kb)

def min(a, b):
    if is_nan(a) or is_nan(b): return f16.QNAN
    if is_zero(a) and is_zero(b): return zext(16, a|b)  # -0 wins
    return zext(16, builtins.min(a, b, key=_ordered))

def max(a, b):
    if is_nan(a) or is_nan(b): return f16.QNAN
    if is_zero(a) and is_zero(b): return zext(16, a&b)  # +0 wins
    return zext(16, builtins.max(a, b, key=_ordered))
