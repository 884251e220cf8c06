"""String measuring, copying, searching and number conversion.

Strings are ordinary Python strings. Searches return indices instead of
pointers, and None where nothing is found. Looking for the NUL character
finds the position just past the end, where a terminator would sit.
"""

from __future__ import annotations

from typing import NamedTuple, Optional, Union

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_SPACES = frozenset(" \t\n\v\f\r")

CharLike = Union[str, int]


class Copied(NamedTuple):
    """Result of a bounded copy or concatenation.

    ``text`` is the destination's new content and ``length`` the length of
    the string the call tried to create.
    """

    text: Optional[str]
    length: int


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer, got {type(c).__name__}")
    return chr(c & 0xFF)


def _wrap_int32(value: int) -> int:
    return (value - INT_MIN) % 2**32 + INT_MIN


def strlen(s: str) -> int:
    """Return the number of characters in s."""
    return len(s)


def strlcpy(dst: Optional[str], src: str, size: int) -> Copied:
    """Copy src into a destination buffer of ``size`` characters.

    At most ``size - 1`` characters of src are kept. With a size of 0, or
    no destination, the destination is left as it was. The length is
    always ``len(src)``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if dst is None or size == 0:
        return Copied(dst, len(src))
    return Copied(src[: size - 1], len(src))


def strlcat(dst: Optional[str], src: str, size: int) -> Copied:
    """Append src to dst inside a buffer of ``size`` characters.

    When dst already fills the buffer nothing is appended and the length is
    ``len(src) + size``; otherwise as much of src as fits (leaving room for
    a terminator) is appended and the length is ``len(dst) + len(src)``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if dst is None:
        if size == 0:
            return Copied(None, len(src))
        raise TypeError("destination must not be None when size is not 0")
    if len(dst) >= size:
        return Copied(dst, len(src) + size)
    room = size - len(dst) - 1
    return Copied(dst + src[:room], len(src) + len(dst))


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first occurrence of c in s, or None."""
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last occurrence of c in s, or None."""
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters of s1 and s2.

    Returns 0 when they match, otherwise the difference of the codes of the
    first characters that differ; the end of a string counts as code 0.
    """
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Find little inside the first ``length`` characters of big.

    An empty little is found at index 0. Returns None when there is no
    match lying wholly within the limit.
    """
    if little == "":
        return 0
    if length <= 0:
        return None
    index = big.find(little, 0, min(length, len(big)))
    return None if index < 0 else index


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does.

    Leading whitespace is skipped, one optional sign is read, then digits
    up to the first non-digit. No digits gives 0. The result wraps to a
    32-bit signed integer.
    """
    chars = iter(text)
    current = next(chars, "")
    while current in _SPACES and current != "":
        current = next(chars, "")
    sign = 1
    if current in ("-", "+") and current != "":
        if current == "-":
            sign = -1
        current = next(chars, "")
    value = 0
    while current != "" and "0" <= current <= "9":
        value = value * 10 + (ord(current) - ord("0"))
        current = next(chars, "")
    return _wrap_int32(value * sign)


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)