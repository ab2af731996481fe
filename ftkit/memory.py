"""Byte-buffer helpers working on bytes, bytearray and memoryview objects."""

from __future__ import annotations

from typing import Union

ReadableBuffer = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]


def _check_length(n: int, *buffers: ReadableBuffer) -> None:
    if n < 0:
        raise ValueError("length must not be negative")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"length {n} exceeds buffer of size {len(buf)}")


def bzero(buf: WritableBuffer, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    _check_length(n, buf)
    buf[:n] = bytes(n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(data: ReadableBuffer, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``c`` within ``n`` bytes, or None."""
    _check_length(n, data)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: ReadableBuffer, b: ReadableBuffer, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first unequal pair."""
    _check_length(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def memcpy(dest: WritableBuffer, src: ReadableBuffer, n: int) -> WritableBuffer:
    """Copy ``n`` bytes from ``src`` into the start of ``dest`` and return ``dest``."""
    _check_length(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(dest: WritableBuffer, src: ReadableBuffer, n: int) -> WritableBuffer:
    """Copy ``n`` bytes from ``src`` to ``dest``, safe for overlapping buffers."""
    _check_length(n, dest, src)
    if n:
        dest[:n] = bytes(src[:n])
    return dest


def memset(buf: WritableBuffer, c: int, n: int) -> WritableBuffer:
    """Fill the first ``n`` bytes of ``buf`` with the low byte of ``c``; return ``buf``."""
    _check_length(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf