"""Byte-buffer operations: filling, copying, searching and comparing."""

from __future__ import annotations

from typing import Optional, Union

SIZE_MAX = 2**64 - 1

Buffer = Union[bytes, bytearray, memoryview]


def _check_length(n: int, *buffers: Buffer) -> None:
    if n < 0:
        raise ValueError(f"negative length: {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise IndexError(f"length {n} exceeds buffer of {len(buffer)} bytes")


def memset(buffer: bytearray, byte: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buffer`` to ``byte`` (taken modulo 256)."""
    _check_length(n, buffer)
    buffer[:n] = bytes([byte & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count`` elements of ``size`` bytes.

    Raises OverflowError when the total size would not fit in a size_t.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size != 0 and count > SIZE_MAX // size:
        raise OverflowError(f"{count} * {size} bytes is too large")
    return bytearray(count * size)


def memchr(data: Buffer, byte: int, n: int) -> Optional[int]:
    """Offset of the first ``byte`` within the first ``n`` bytes, or None."""
    _check_length(n, data)
    position = bytes(data[:n]).find(bytes([byte & 0xFF]))
    return None if position < 0 else position


def memcmp(first: Buffer, second: Buffer, n: int) -> int:
    """Difference of the first unequal bytes within ``n``, or 0 if none."""
    _check_length(n, first, second)
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def memcpy(dst: bytearray, src: Buffer, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` into the start of ``dst``."""
    _check_length(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buffer: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes from offset ``src`` to offset ``dst`` of ``buffer``.

    The regions may overlap; the result is as if the source were copied
    aside first.
    """
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_length(n)
    if max(dst, src) + n > len(buffer):
        raise IndexError("region runs past the end of the buffer")
    buffer[dst:dst + n] = bytes(buffer[src:src + n])
    return buffer