"""String and byte-buffer helpers with C library semantics.

Searches return an index into the text, or ``None`` when nothing is found.
Bounded copies return the resulting text together with the length that
was attempted, so a caller can detect truncation.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, NamedTuple, Optional, Union

CharLike = Union[int, str]


class BoundedCopy(NamedTuple):
    """Outcome of a size-limited copy or concatenation."""

    text: str
    wanted: int


def _non_negative(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def _target(c: CharLike) -> str:
    """The character to search for; integer codes are cut to one byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c & 0xFF)


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [piece for piece in s.split(sep) if piece]


def strtrim(s: str, charset: str) -> str:
    """Remove every leading and trailing character found in ``charset``."""
    return s.strip(charset) if charset else s


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from ``start``.

    A start past the end of ``s`` gives an empty string.
    """
    _non_negative("start", start)
    _non_negative("length", length)
    if start > len(s):
        return ""
    return s[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` within the first ``length`` characters of ``haystack``.

    An empty needle is found at index 0. The whole needle must lie inside
    the searched range.
    """
    _non_negative("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return index if index >= 0 else None


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the first differing character codes, a
    missing character counting as 0, or 0 when the compared parts match.
    """
    _non_negative("n", n)
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
        if a == "\0":
            break
    return 0


def memcmp(b1: bytes, b2: bytes, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference of the first differing bytes, or 0.
    """
    _non_negative("n", n)
    first, second = memoryview(b1).cast("B"), memoryview(b2).cast("B")
    if n > len(first) or n > len(second):
        raise ValueError(f"cannot compare {n} bytes of shorter buffers")
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def memchr(data: bytes, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` (cut to one byte) in ``data[:n]``."""
    _non_negative("n", n)
    view = memoryview(data).cast("B")
    if n > len(view):
        raise ValueError(f"cannot search {n} bytes of a {len(view)}-byte buffer")
    index = bytes(view[:n]).find(c & 0xFF)
    return index if index >= 0 else None


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``.

    Searching for the terminating NUL gives ``len(s)``.
    """
    target = _target(c)
    index = s.find(target)
    if index >= 0:
        return index
    if target == "\0" and (isinstance(c, str) or c == 0):
        return len(s)
    return None


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``.

    Searching for the terminating NUL gives ``len(s)``.
    """
    target = _target(c)
    if target == "\0":
        return len(s)
    index = s.rfind(target)
    return index if index >= 0 else None


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return s1 + s2


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a string from ``f(index, char)`` applied to every character."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def strlcpy(dst: str, src: str, size: int) -> BoundedCopy:
    """Copy ``src`` into a buffer of ``size`` characters, NUL included.

    With a size of 0 the destination is left as it was. The wanted length
    is always ``len(src)``.
    """
    _non_negative("size", size)
    if size == 0:
        return BoundedCopy(dst, len(src))
    return BoundedCopy(src[:size - 1], len(src))


def strlcat(dst: str, src: str, size: int) -> BoundedCopy:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    When ``dst`` already fills the buffer it is left unchanged and the
    wanted length is ``size + len(src)``; otherwise it is
    ``len(dst) + len(src)``.
    """
    _non_negative("size", size)
    dst_len = min(len(dst), size)
    if dst_len == size:
        return BoundedCopy(dst, size + len(src))
    room = size - 1 - dst_len
    return BoundedCopy(dst + src[:room], dst_len + len(src))