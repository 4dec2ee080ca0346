"""Byte-buffer helpers working on bytearray and other buffer objects."""

from __future__ import annotations

from typing import Optional


def _check_count(count: int, *buffers) -> None:
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    for buffer in buffers:
        if count > len(buffer):
            raise ValueError(f"count {count} exceeds buffer length {len(buffer)}")


def memset(buffer: bytearray, value: int, count: int) -> bytearray:
    """Set the first *count* bytes of *buffer* to the low byte of *value*."""
    _check_count(count, buffer)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def bzero(buffer: bytearray, count: int) -> bytearray:
    """Zero the first *count* bytes of *buffer*."""
    return memset(buffer, 0, count)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of *count* elements of *size* bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(buffer, value: int, count: int) -> Optional[int]:
    """Index of the first byte equal to the low byte of *value* within *count* bytes, or None."""
    _check_count(count, buffer)
    index = bytes(memoryview(buffer)[:count]).find(bytes([value & 0xFF]))
    return None if index < 0 else index


def memcmp(first, second, count: int) -> int:
    """Compare *count* bytes; return the difference of the first unequal pair, or 0."""
    _check_count(count, first, second)
    left = memoryview(first).cast("B")[:count]
    right = memoryview(second).cast("B")[:count]
    for a, b in zip(left, right):
        if a != b:
            return a - b
    return 0


def memcpy(dest: bytearray, src, count: int) -> bytearray:
    """Copy *count* bytes from *src* into the start of *dest*."""
    _check_count(count, dest, src)
    dest[:count] = bytes(memoryview(src)[:count])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, count: int) -> bytearray:
    """Copy *count* bytes inside *buffer* from offset *src* to offset *dest*; overlap is safe."""
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_count(count, buffer[src:], buffer[dest:])
    buffer[dest:dest + count] = bytes(buffer[src:src + count])
    return buffer