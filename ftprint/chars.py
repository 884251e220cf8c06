"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer code.
Only the ASCII ranges count: anything outside them is never a letter or
digit, and case conversion leaves it unchanged.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer, got {type(c).__name__}")
    return c


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters A-Z and a-z."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII, space (32) through tilde (126)."""
    return 32 <= _code(c) <= 126


def _convert(c: CharLike, source_low: str, source_high: str, shift: int) -> CharLike:
    code = _code(c)
    if ord(source_low) <= code <= ord(source_high):
        code += shift
    return chr(code) if isinstance(c, str) else code


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII lower-case letter; return anything else unchanged.

    The result has the same type as the argument.
    """
    return _convert(c, "a", "z", ord("A") - ord("a"))


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII upper-case letter; return anything else unchanged.

    The result has the same type as the argument.
    """
    return _convert(c, "A", "Z", ord("a") - ord("A"))