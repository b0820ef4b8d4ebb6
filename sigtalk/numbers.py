"""Decimal conversions between text and numbers."""

from __future__ import annotations

import operator
from itertools import takewhile

_SPACES = " \t\n\r\v\f"
_DIGITS = "0123456789"


def _leading_digits(text: str) -> str:
    return "".join(takewhile(lambda ch: ch in _DIGITS, text))


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped and one optional sign is read; parsing
    stops at the first non-digit. Text without digits gives 0.
    """
    rest = text.lstrip(_SPACES)
    sign = 1
    if rest[:1] in ("+", "-"):
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]
    digits = _leading_digits(rest)
    return sign * int(digits) if digits else 0


def _fraction(text: str) -> float:
    fraction = 0.0
    power = 1.0
    for ch in _leading_digits(text):
        fraction = fraction * 10.0 + int(ch)
        power *= 10.0
    return fraction / power


def atof(text: str) -> float:
    """Parse a decimal number with an optional fractional part.

    A leading sign is taken first; the integer part is then read as by
    :func:`atoi`. The fraction is read after the first ``.`` anywhere in
    the rest of the text and is added to the integer part before the sign
    is applied.
    """
    sign = 1.0
    rest = text
    if rest[:1] == "-":
        sign = -1.0
    if rest[:1] in ("+", "-"):
        rest = rest[1:]
    result = float(atoi(rest))
    _, dot, after = rest.partition(".")
    if dot:
        result += _fraction(after)
    return result * sign


def itoa(n: int) -> str:
    """Render an integer in decimal, with a leading ``-`` when negative."""
    value = operator.index(n)
    digits = str(abs(value))
    return "-" + digits if value < 0 else digits


def nbrlen(n: int) -> int:
    """Number of characters in the decimal form of ``n``, sign included."""
    return len(itoa(n))