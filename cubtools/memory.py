"""Operations on byte buffers.

Buffers that are written to must be mutable (``bytearray`` or a writable
``memoryview``). A count larger than a buffer raises ValueError.
"""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
Readable = Union[bytes, bytearray, memoryview]


def _check(n: int, *buffers: Readable) -> None:
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"count {n} exceeds buffer of {len(buf)} bytes")


def bzero(buf: Buffer, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    _check(n, buf)
    buf[:n] = bytes(n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(buf: Readable, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` among the first ``n``, or None."""
    _check(n, buf)
    index = bytes(buf[:n]).find(c & 0xFF)
    return None if index == -1 else index


def memcmp(a: Readable, b: Readable, n: int) -> int:
    """Difference of the first differing bytes within ``n``, or 0."""
    _check(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def memcpy(dest: Buffer, src: Readable, n: int) -> Buffer:
    """Copy ``n`` bytes from ``src`` to the start of ``dest``."""
    _check(n, dest, src)
    dest[:n] = src[:n]
    return dest


def memmove(dest: Buffer, src: Readable, n: int) -> Buffer:
    """Copy ``n`` bytes, correct even when the two regions overlap."""
    _check(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memset(buf: Buffer, c: int, n: int) -> Buffer:
    """Fill the first ``n`` bytes of ``buf`` with ``c``; a count of 0 or less does nothing."""
    if n <= 0:
        return buf
    _check(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf