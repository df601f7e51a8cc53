"""Fixed-precision decimal arithmetic for money and rate math.

Values enter as ``int``, ``float``, ``str`` or ``Decimal`` and leave as native
``float``. Floats are converted through ``str`` so that ``0.1`` is the decimal
0.1 rather than its binary approximation; repeated compounding therefore does
not accumulate floating-point error.
"""

from decimal import (
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    Overflow,
    ROUND_HALF_UP,
)
from typing import Optional, Union

PRECISION = 28
ROUNDING = ROUND_HALF_UP

Numeric = Union[int, float, str, Decimal]

_CONTEXT = Context(prec=PRECISION, rounding=ROUNDING)


def to_decimal(value: Numeric) -> Decimal:
    """Convert a decimal-like value to a Decimal in the money context."""
    if isinstance(value, Decimal):
        return _CONTEXT.plus(value)
    if isinstance(value, float):
        return _CONTEXT.create_decimal(str(value))
    return _CONTEXT.create_decimal(value)


def add(a: Numeric, b: Numeric) -> float:
    """Return a + b."""
    return float(_CONTEXT.add(to_decimal(a), to_decimal(b)))


def subtract(a: Numeric, b: Numeric) -> float:
    """Return a - b."""
    return float(_CONTEXT.subtract(to_decimal(a), to_decimal(b)))


def multiply(a: Numeric, b: Numeric) -> float:
    """Return a * b."""
    return float(_CONTEXT.multiply(to_decimal(a), to_decimal(b)))


def divide(a: Numeric, b: Numeric) -> Optional[float]:
    """Return a / b, or None when b is zero."""
    divisor = to_decimal(b)
    if divisor.is_zero():
        return None
    return float(_CONTEXT.divide(to_decimal(a), divisor))


def power(base: Numeric, exponent: Numeric) -> Optional[float]:
    """Return base ** exponent, or None when the result is undefined.

    Undefined covers a negative base raised to a fractional exponent and zero
    raised to a negative exponent.
    """
    try:
        result = _CONTEXT.power(to_decimal(base), to_decimal(exponent))
    except (InvalidOperation, DivisionByZero, Overflow):
        return None
    if not result.is_finite():
        return None
    return float(result)


def total(values) -> float:
    """Sum an iterable of decimal-like values."""
    result = Decimal(0)
    for value in values:
        result = _CONTEXT.add(result, to_decimal(value))
    return float(result)


def percent_change(current: Numeric, base: Numeric) -> Optional[float]:
    """Return (current - base) / |base| * 100, or None when base is zero."""
    base_dec = to_decimal(base)
    if base_dec.is_zero():
        return None
    delta = _CONTEXT.subtract(to_decimal(current), base_dec)
    ratio = _CONTEXT.divide(delta, _CONTEXT.abs(base_dec))
    return float(_CONTEXT.multiply(ratio, Decimal(100)))


def percent_of(part: Numeric, whole: Numeric) -> Optional[float]:
    """Return part / whole * 100, or None when whole is zero."""
    whole_dec = to_decimal(whole)
    if whole_dec.is_zero():
        return None
    ratio = _CONTEXT.divide(to_decimal(part), whole_dec)
    return float(_CONTEXT.multiply(ratio, Decimal(100)))
