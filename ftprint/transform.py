"""Building new strings from existing ones: copies, slices, joins, trims,
splits and per-character mappings."""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Union

CharLike = Union[str, int]


def _separator(sep: CharLike) -> str:
    if isinstance(sep, str):
        if len(sep) != 1:
            raise ValueError(f"expected a single character, got {sep!r}")
        return sep
    if isinstance(sep, bool) or not isinstance(sep, int):
        raise TypeError(f"expected a character or an integer, got {type(sep).__name__}")
    return chr(sep & 0xFF)


def strdup(s: str) -> str:
    """Return a copy of s."""
    if not isinstance(s, str):
        raise TypeError(f"expected a string, got {type(s).__name__}")
    return "".join(s)


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """Return at most ``length`` characters of s beginning at ``start``.

    A start at or past the end gives an empty string; None gives None.
    """
    if s is None:
        return None
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    length = min(length, len(s) - start)
    return s[start:start + length]


def strjoin(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """Return s1 followed by s2, or None if either is None."""
    if s1 is None or s2 is None:
        return None
    return s1 + s2


def strtrim(s: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Remove characters found in charset from both ends of s.

    A None charset gives a plain copy; a None s gives None.
    """
    if s is None:
        return None
    if not charset:
        return strdup(s)
    return s.strip(charset)


def split(s: Optional[str], sep: CharLike) -> Optional[List[str]]:
    """Split s on the separator character, dropping empty pieces."""
    if s is None:
        return None
    return [word for word in s.split(_separator(sep)) if word]


def strmapi(s: Optional[str], func: Optional[Callable[[int, str], str]]) -> Optional[str]:
    """Return a new string made of func(index, char) for each character.

    The result ends at the first NUL character func produces. Gives None
    when s or func is None.
    """
    if s is None or func is None:
        return None
    mapped = "".join(func(index, ch) for index, ch in enumerate(s))
    return mapped.split("\0", 1)[0]


def _is_nul(value: object) -> bool:
    return value == "\0" or value == 0


def striteri(
    buf: Optional[MutableSequence],
    func: Optional[Callable[[int, object], object]],
) -> None:
    """Replace each element of buf with func(index, element), in place.

    Processing stops at the first NUL element. Nothing happens when buf or
    func is None.
    """
    if buf is None or func is None:
        return
    for index, value in enumerate(buf):
        if _is_nul(value):
            break
        buf[index] = func(index, value)