"""Byte-buffer helpers: fill, copy, search, compare and zeroed allocation."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence

_SIZE_MAX = 2**64 - 1


def _check_count(count: int, *buffers: Sequence[int]) -> None:
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    for buffer in buffers:
        if count > len(buffer):
            raise ValueError(
                f"count {count} exceeds buffer length {len(buffer)}"
            )


def memset(buffer: MutableSequence[int], value: int, count: int):
    """Set the first ``count`` bytes of ``buffer`` to ``value`` (truncated to a byte)."""
    _check_count(count, buffer)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def bzero(buffer: MutableSequence[int], count: int) -> None:
    """Zero the first ``count`` bytes of ``buffer``."""
    memset(buffer, 0, count)


def memcpy(dest: MutableSequence[int], src: Sequence[int], count: int):
    """Copy ``count`` bytes from ``src`` into the start of ``dest``."""
    _check_count(count, dest, src)
    dest[:count] = bytes(src[:count])
    return dest


def memmove(dest: MutableSequence[int], src: Sequence[int], count: int):
    """Copy ``count`` bytes like :func:`memcpy`, correct even when the buffers overlap."""
    _check_count(count, dest, src)
    if count == 0:
        return dest
    # Taking a snapshot of the source first makes overlapping views safe.
    snapshot = bytes(src[:count])
    dest[:count] = snapshot
    return dest


def memchr(data: Sequence[int], value: int, count: int) -> int | None:
    """Index of the first byte equal to ``value`` within ``count`` bytes, or None."""
    _check_count(count, data)
    target = value & 0xFF
    return next(
        (position for position, byte in enumerate(data[:count]) if byte == target),
        None,
    )


def memcmp(first: Sequence[int], second: Sequence[int], count: int) -> int:
    """Difference of the first unequal bytes within ``count`` bytes, or 0."""
    _check_count(count, first, second)
    for a, b in zip(first[:count], second[:count]):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size != 0 and count > _SIZE_MAX // size:
        raise MemoryError(f"cannot allocate {count} elements of {size} bytes")
    return bytearray(count * size)