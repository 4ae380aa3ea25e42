"""Operations on the leading bytes of mutable byte buffers."""

from __future__ import annotations

from typing import Union

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]

SIZE_MAX = 2**64 - 1


def _check_count(n: int, *buffers: ReadableBuffer) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def memset(buf: Buffer, value: int, n: int) -> Buffer:
    """Set the first *n* bytes of *buf* to the low byte of *value*; return *buf*."""
    _check_count(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: Buffer, n: int) -> None:
    """Set the first *n* bytes of *buf* to zero."""
    memset(buf, 0, n)


def memcpy(dest: Buffer, src: ReadableBuffer, n: int) -> Buffer:
    """Copy the first *n* bytes of *src* into *dest*; return *dest*."""
    _check_count(n, dest, src)
    if n and dest is not src:
        dest[:n] = bytes(src[:n])
    return dest


def memmove(dest: Buffer, src: ReadableBuffer, n: int) -> Buffer:
    """Copy *n* bytes from *src* to *dest*, correct even when they overlap."""
    _check_count(n, dest, src)
    # Taking a snapshot of the source makes overlapping views safe.
    dest[:n] = bytes(src[:n])
    return dest


def memchr(buf: ReadableBuffer, value: int, n: int) -> int | None:
    """Return the index of the first byte equal to *value* in the first *n*, or None."""
    _check_count(n, buf)
    index = bytes(buf[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: ReadableBuffer, b: ReadableBuffer, n: int) -> int:
    """Compare the first *n* bytes; return the difference at the first mismatch."""
    _check_count(n, a, b)
    for left, right in zip(bytes(a[:n]), bytes(b[:n])):
        if left != right:
            return left - right
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of *count* elements of *size* bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = count * size
    if total > SIZE_MAX:
        raise OverflowError(f"{count} * {size} bytes overflows the size range")
    return bytearray(total)