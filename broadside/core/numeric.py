"""
broadside Numeric Helpers

IEEE-754 style arithmetic for the empirical formulas. Degenerate designs
(zero beam, negative hull weight, ...) evaluate to inf or nan instead of
raising, so every metric can still be reported next to its design-failure
flag.
"""

import math


def fdiv(num: float, den: float) -> float:
    """Divide, returning ±inf or nan on a zero denominator."""
    if den == 0:
        if num == 0 or math.isnan(num):
            return math.nan
        return math.copysign(math.inf, num) * math.copysign(1.0, den)
    return num / den


def powf(base: float, exp: float) -> float:
    """Raise to a power without ever producing a complex result."""
    if math.isnan(base) or math.isnan(exp):
        return math.nan
    if base == 0:
        if exp < 0:
            return math.inf
        return 0.0 if exp > 0 else 1.0
    if base < 0 and not float(exp).is_integer():
        return math.nan
    try:
        return math.pow(base, exp)
    except OverflowError:
        return math.inf


def sqrt(value: float) -> float:
    """Square root, nan for negative input."""
    if math.isnan(value) or value < 0:
        return math.nan
    return math.sqrt(value)


def fmin(a: float, b: float) -> float:
    """Minimum that ignores a single nan operand."""
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a < b else b


def fmax(a: float, b: float) -> float:
    """Maximum that ignores a single nan operand."""
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a > b else b


def to_u32(value: float) -> int:
    """Truncate toward zero, saturating nan and negatives to 0."""
    if math.isnan(value) or value <= 0:
        return 0
    if math.isinf(value):
        return 2 ** 32 - 1
    return min(int(value), 2 ** 32 - 1)
