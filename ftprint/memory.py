"""Byte-buffer helpers: filling, copying, searching and comparing."""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]

UINT_MAX = 0xFFFFFFFF


def _check_count(n: int, *buffers: Optional[BytesLike]) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if buf is not None and n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Set the first n bytes of buf to the low byte of value and return buf."""
    _check_count(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first n bytes of buf."""
    memset(buf, 0, n)


def memcpy(dest: Optional[bytearray], src: Optional[BytesLike], n: int) -> Optional[bytearray]:
    """Copy n bytes from src to the start of dest and return dest.

    If either buffer is None nothing is copied and dest is returned as is.
    """
    if dest is None or src is None:
        return dest
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move n bytes inside buf from offset src to offset dest.

    Overlapping regions are handled correctly. Returns buf.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n)
    if src + n > len(buf) or dest + n > len(buf):
        raise ValueError("region extends past the end of the buffer")
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def memchr(data: BytesLike, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to c's low byte within the
    first n bytes of data, or None if there is none."""
    _check_count(n, data)
    index = bytes(data[:n]).find(bytes([c & 0xFF]))
    return None if index < 0 else index


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first n bytes of a and b as unsigned bytes.

    Returns 0 when equal, otherwise the difference of the first pair of
    bytes that differ.
    """
    _check_count(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer of nmemb * size bytes.

    Raises MemoryError when either count is larger than UINT_MAX.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("counts must not be negative")
    if nmemb == 0 or size == 0:
        return bytearray()
    if nmemb > UINT_MAX or size > UINT_MAX:
        raise MemoryError(f"cannot allocate {nmemb} elements of {size} bytes")
    return bytearray(nmemb * size)