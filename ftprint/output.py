"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: Union[str, int], stream: Optional[TextIO] = None) -> int:
    """Write one character (a one-character string or a byte value) and
    return the number of characters written."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        ch = c
    elif isinstance(c, int) and not isinstance(c, bool):
        ch = chr(c & 0xFF)
    else:
        raise TypeError(f"expected a character or an integer, got {type(c).__name__}")
    _target(stream).write(ch)
    return 1


def put_str(s: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write s; None writes nothing. Returns the number of characters written."""
    if s is None:
        return 0
    _target(stream).write(s)
    return len(s)


def put_endl(s: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write s followed by a newline. Returns the number of characters written."""
    return put_str(s, stream) + put_char("\n", stream)


def put_nbr(n: int, stream: Optional[TextIO] = None) -> int:
    """Write n in decimal. Returns the number of characters written."""
    return put_str(str(int(n)), stream)