"""Byte-buffer helpers working on ``bytearray`` and bytes-like objects."""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]


def _check_count(n: int, *buffers: BytesLike) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError("byte count exceeds the buffer length")


def bzero(buffer: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero in place."""
    _check_count(n, buffer)
    buffer[:n] = bytes(n)


def calloc(count: int, size: int) -> bytearray:
    """Return ``count * size`` zero bytes; a single byte when either is 0."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == 0 or size == 0:
        return bytearray(1)
    return bytearray(count * size)


def memchr(data: BytesLike, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` among the first ``n``, or None."""
    _check_count(n, data)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index == -1 else index


def memcmp(first: BytesLike, second: BytesLike, n: int) -> int:
    """Difference of the first differing bytes within ``n``; 0 if equal."""
    _check_count(n, first, second)
    for left, right in zip(bytes(first[:n]), bytes(second[:n])):
        if left != right:
            return left - right
    return 0


def memcpy(dst: bytearray, src: BytesLike, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` into ``dst``; return ``dst``."""
    _check_count(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buffer: bytearray, dest: int, src: int, length: int) -> bytearray:
    """Copy ``length`` bytes from offset ``src`` to ``dest`` within ``buffer``.

    Overlapping regions are handled correctly. Returns ``buffer``.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if length < 0:
        raise ValueError("byte count must not be negative")
    if dest + length > len(buffer) or src + length > len(buffer):
        raise ValueError("region exceeds the buffer length")
    if length:
        buffer[dest:dest + length] = bytes(buffer[src:src + length])
    return buffer


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes with ``value`` (modulo 256); return ``buffer``."""
    _check_count(length, buffer)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer