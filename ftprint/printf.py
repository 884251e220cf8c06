"""A small printf supporting the conversions %c %s %d %i %u %x %X %p %%."""

from __future__ import annotations

import sys
from typing import Iterator, Optional, Union

from .strings import INT_MIN, itoa

_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF


def _int_arg(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    return value


def format_signed(value: int) -> str:
    """Decimal text of value taken as a 32-bit signed integer."""
    wrapped = (_int_arg(value) - INT_MIN) % 2**32 + INT_MIN
    return itoa(wrapped)


def format_unsigned(value: int) -> str:
    """Decimal text of value taken as a 32-bit unsigned integer."""
    return str(_int_arg(value) & _UINT_MASK)


def format_hex(value: int, spec: str) -> str:
    """Hexadecimal text of a 32-bit unsigned value; spec 'x' or 'X' picks the case."""
    if spec not in ("x", "X"):
        raise ValueError(f"hex spec must be 'x' or 'X', got {spec!r}")
    return format(_int_arg(value) & _UINT_MASK, spec)


def format_pointer(value: Optional[int]) -> str:
    """Address text: '(nil)' for a null pointer, else '0x' and lower-case hex."""
    address = 0 if value is None else _int_arg(value) & _ULONG_MASK
    if address == 0:
        return "(nil)"
    return "0x" + format(address, "x")


def format_string(value: Optional[str]) -> str:
    """The string itself, or '(null)' for None."""
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"expected a string, got {type(value).__name__}")
    return value


def _format_char(value: Union[str, int]) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    return chr(_int_arg(value) & 0xFF)


def _convert(spec: str, values: Iterator[object]) -> str:
    if spec == "%":
        return "%"
    if spec not in "csdiuxXp":
        return ""
    try:
        value = next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _format_char(value)
    if spec == "s":
        return format_string(value)
    if spec in "di":
        return format_signed(value)
    if spec == "u":
        return format_unsigned(value)
    if spec in "xX":
        return format_hex(value, spec)
    return format_pointer(value)


def _pieces(fmt: str, args: tuple) -> Iterator[str]:
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, "")
        if not spec:
            return
        yield _convert(spec, values)


def render(fmt: str, *args: object) -> str:
    """Return the text that printf would write for fmt and args.

    Unknown conversions produce nothing; extra arguments are ignored.
    """
    if not isinstance(fmt, str):
        raise TypeError("format must be a string")
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: object) -> int:
    """Write the formatted text to standard output and return its length."""
    text = render(fmt, *args)
    sys.stdout.write(text)
    return len(text)