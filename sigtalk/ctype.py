"""ASCII character classification and case conversion.

Each function accepts either an integer character code or a one-character
string. Only the ASCII ranges count: any other code is neither a letter,
a digit nor printable, and case conversion leaves it unchanged.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

_UPPER = range(ord("A"), ord("Z") + 1)
_LOWER = range(ord("a"), ord("z") + 1)
_DIGITS = range(ord("0"), ord("9") + 1)
_PRINTABLE = range(32, 127)
_ASCII = range(0, 128)
_CASE_OFFSET = ord("a") - ord("A")


def _code(c: CharLike) -> int:
    """Return the integer code of ``c``."""
    if isinstance(c, str):
        return ord(c)
    return int(c)


def is_alpha(c: CharLike) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return code in _UPPER or code in _LOWER


def is_digit(c: CharLike) -> bool:
    """True for an ASCII decimal digit."""
    return _code(c) in _DIGITS


def is_alnum(c: CharLike) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for a code in the range 0 to 127."""
    return _code(c) in _ASCII


def is_print(c: CharLike) -> bool:
    """True for a printable ASCII character, space included."""
    return _code(c) in _PRINTABLE


def _convert(c: CharLike, source: range, offset: int) -> CharLike:
    code = _code(c)
    if code in source:
        code += offset
    return chr(code) if isinstance(c, str) else code


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII letter; return anything else unchanged.

    The result has the same type as the argument.
    """
    return _convert(c, _LOWER, -_CASE_OFFSET)


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII letter; return anything else unchanged.

    The result has the same type as the argument.
    """
    return _convert(c, _UPPER, _CASE_OFFSET)