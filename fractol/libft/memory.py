"""Byte-buffer helpers with the semantics of classic C memory routines."""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]


def _check_length(length: int, *buffers: BytesLike) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    for buffer in buffers:
        if length > len(buffer):
            raise IndexError(f"length {length} exceeds buffer of {len(buffer)} bytes")


def fill(buffer: bytearray, value: int, length: int) -> bytearray:
    """Set the first *length* bytes of *buffer* to ``value & 0xFF``."""
    _check_length(length, buffer)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def zero(buffer: bytearray, length: int) -> bytearray:
    """Clear the first *length* bytes of *buffer*."""
    return fill(buffer, 0, length)


def copy(dst: bytearray, src: BytesLike, n: int) -> bytearray:
    """Copy the first *n* bytes of *src* to the start of *dst*."""
    _check_length(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def move(buffer: bytearray, dst: int, src: int, length: int) -> bytearray:
    """Copy *length* bytes inside *buffer* from offset *src* to offset *dst*.

    The regions may overlap; the result is as if the source were copied
    aside first.
    """
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if max(dst, src) + length > len(buffer):
        raise IndexError("move reaches past the end of the buffer")
    buffer[dst:dst + length] = bytes(buffer[src:src + length])
    return buffer


def find_byte(data: BytesLike, value: int, length: int) -> Optional[int]:
    """Index of the first byte equal to ``value & 0xFF`` in ``data[:length]``, or None."""
    _check_length(length, data)
    index = bytes(data[:length]).find(value & 0xFF)
    return index if index >= 0 else None


def compare(first: BytesLike, second: BytesLike, n: int) -> int:
    """Compare the first *n* bytes; return the difference of the first unequal pair."""
    _check_length(n, first, second)
    for a, b in zip(bytes(first[:n]), bytes(second[:n])):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)