"""Number helpers modelled on the JavaScript ``Number`` API.

Where JavaScript answers NaN for "not a number" results (``parseInt("x")``),
these helpers return ``None``.
"""

import re
from decimal import ROUND_HALF_UP, Context, Decimal
import typing as tp

import annotated_types as at
import numpy as np
from pydantic import validate_call

__all__ = [
    "MAX_SAFE_INTEGER",
    "EPSILON",
    "to_fixed",
    "is_finite",
    "is_integer",
    "is_safe_integer",
    "parse_int",
    "parse_float",
]

MAX_SAFE_INTEGER = 2**53 - 1
EPSILON = float(np.finfo(float).eps)

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_FLOAT_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _is_number(value: tp.Any) -> bool:
    return isinstance(value, (int, float, np.number)) and not isinstance(value, bool)


@validate_call
def to_fixed(
    value: float, digits: tp.Annotated[int, at.Interval(ge=0, le=100)] = 2
) -> str:
    """Format ``value`` with exactly ``digits`` digits after the decimal point.

    Args:
        value: Number to format.
        digits: Fraction digits, 0 to 100.

    Returns:
        The formatted string; non-finite values render as ``NaN``,
        ``Infinity`` or ``-Infinity``, and magnitudes of 1e21 or more keep
        their exponential form (``1e+21``).

    Raises:
        pydantic.ValidationError: If ``digits`` is outside 0..100.

    Example:
        >>> to_fixed(123.456, 1)
        '123.5'
    """
    if np.isnan(value):
        return "NaN"
    if np.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if abs(value) >= 1e21:
        return repr(float(value))
    # Exact binary value, ties away from zero
    quantum = Decimal(1).scaleb(-digits)
    fixed = Decimal(value).quantize(
        quantum, rounding=ROUND_HALF_UP, context=Context(prec=420)
    )
    if fixed == 0 and value >= 0:
        fixed = abs(fixed)  # drop the sign of -0.0
    return f"{fixed:f}"


def is_finite(value: tp.Any) -> bool:
    return _is_number(value) and bool(np.isfinite(value))


def is_integer(value: tp.Any) -> bool:
    """True for finite numbers without a fractional part (``5.0`` included)."""
    return is_finite(value) and float(value).is_integer()


def is_safe_integer(value: tp.Any) -> bool:
    return is_integer(value) and -MAX_SAFE_INTEGER <= value <= MAX_SAFE_INTEGER


def parse_int(text: str, radix: tp.Optional[int] = None) -> tp.Optional[int]:
    """Parse the leading integer of ``text`` in base ``radix``.

    Leading whitespace and a sign are accepted; parsing stops at the first
    character that is not a digit of the base. Without a radix, a ``0x``
    prefix selects base 16 and anything else base 10.

    Args:
        text: Text to parse.
        radix: Base between 2 and 36; None or 0 to infer it.

    Returns:
        The parsed integer, or None when no digits were found or the radix is
        invalid.
    """
    s = text.strip()
    sign = 1
    if s[:1] in ("+", "-"):
        sign = -1 if s[0] == "-" else 1
        s = s[1:]

    base = radix or 10
    if base < 2 or base > 36:
        return None
    if base == 16 or not radix:
        if s[:2].lower() == "0x":
            s = s[2:]
            base = 16

    valid = _DIGITS[:base]
    end = 0
    while end < len(s) and s[end].lower() in valid:
        end += 1
    if end == 0:
        return None
    return sign * int(s[:end], base)


def parse_float(text: str) -> tp.Optional[float]:
    """Parse the leading decimal number of ``text``; None when there is none."""
    match = _FLOAT_PREFIX.match(text.strip())
    if match is None:
        return None
    token = match.group(0)
    if token.lstrip("+-") == "Infinity":
        return float("-inf") if token.startswith("-") else float("inf")
    return float(token)
