"""A small printf with the conversions ``%c %s %p %d %i %u %x %X %%``.

Integer arguments are taken the way a C variadic call would read them.
``%d`` and ``%i`` read a 32-bit signed int, ``%u``, ``%x`` and ``%X`` a
32-bit unsigned int, and ``%p`` a 64-bit address. Values outside those
ranges wrap around. An unknown conversion character prints nothing and
takes no argument. A lone ``%`` at the end of the format prints nothing.
"""

from __future__ import annotations

import operator
import sys
from typing import Any, Iterator, Optional, TextIO, Union

from sigtalk.numbers import itoa

_LOWER_HEX = "0123456789abcdef"
_UPPER_HEX = "0123456789ABCDEF"
_NULL_STRING = "(null)"
_NULL_POINTER = "(nil)"


def _wrap(value: int, bits: int, signed: bool) -> int:
    """Reduce ``value`` to an integer of the given width."""
    mask = (1 << bits) - 1
    wrapped = operator.index(value) & mask
    if signed and wrapped >> (bits - 1):
        wrapped -= 1 << bits
    return wrapped


def _digits(value: int, alphabet: str) -> str:
    """Render a non-negative integer in the base given by ``alphabet``."""
    base = len(alphabet)
    out = [alphabet[value % base]]
    value //= base
    while value:
        out.append(alphabet[value % base])
        value //= base
    return "".join(reversed(out))


def format_int(n: int) -> str:
    """Decimal form of ``n`` read as a 32-bit signed integer."""
    return itoa(_wrap(n, 32, signed=True))


def format_unsigned(n: int) -> str:
    """Decimal form of ``n`` read as a 32-bit unsigned integer."""
    return _digits(_wrap(n, 32, signed=False), "0123456789")


def format_hex(num: int, uppercase: bool) -> str:
    """Hexadecimal form of ``num`` read as a 32-bit unsigned integer."""
    alphabet = _UPPER_HEX if uppercase else _LOWER_HEX
    return _digits(_wrap(num, 32, signed=False), alphabet)


def format_pointer(address: Optional[int]) -> str:
    """``0x`` and the lower-case hex address, or ``(nil)`` for a null one."""
    if address is None:
        return _NULL_POINTER
    value = _wrap(address, 64, signed=False)
    if value == 0:
        return _NULL_POINTER
    return "0x" + _digits(value, _LOWER_HEX)


def format_string(value: Optional[str]) -> str:
    """The text up to its first NUL, or ``(null)`` for ``None``."""
    if value is None:
        return _NULL_STRING
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string or None, got {type(value).__name__}")
    return value.split("\0", 1)[0]


def _format_char(value: Union[int, str]) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(operator.index(value) & 0xFF)


_CONVERSIONS = {
    "c": _format_char,
    "s": format_string,
    "p": format_pointer,
    "d": format_int,
    "i": format_int,
    "u": format_unsigned,
    "x": lambda value: format_hex(value, False),
    "X": lambda value: format_hex(value, True),
}


def _render(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    pending = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, "")
        if spec == "%":
            yield "%"
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            continue
        try:
            value = next(pending)
        except StopIteration:
            raise TypeError(
                f"not enough arguments for format string {fmt!r}"
            ) from None
        yield convert(value)


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted ``args``."""
    return "".join(_render(fmt, args))


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` (standard output by default).

    Returns the number of characters written.
    """
    text = sprintf(fmt, *args)
    out = sys.stdout if stream is None else stream
    out.write(text)
    out.flush()
    return len(text)