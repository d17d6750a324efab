"""Byte-buffer operations on bytes, bytearray and memoryview objects."""

from __future__ import annotations

from typing import Union

ReadableBuffer = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]


def _check_length(buf: ReadableBuffer, n: int, name: str) -> None:
    if n < 0:
        raise ValueError(f"negative length for {name}: {n}")
    if n > len(buf):
        raise ValueError(f"{name} holds {len(buf)} bytes, {n} requested")


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer of nmemb * size bytes, at least one byte long."""
    if nmemb < 0 or size < 0:
        raise ValueError("calloc sizes must not be negative")
    if nmemb == 0 or size == 0:
        nmemb = size = 1
    return bytearray(nmemb * size)


def bzero(buf: WritableBuffer, n: int) -> None:
    """Set the first n bytes of buf to zero."""
    _check_length(buf, n, "buffer")
    buf[:n] = bytes(n)


def memset(buf: WritableBuffer, c: int, n: int) -> WritableBuffer:
    """Fill the first n bytes of buf with the low byte of c and return buf."""
    _check_length(buf, n, "buffer")
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def memcpy(dest: WritableBuffer, src: ReadableBuffer, n: int) -> WritableBuffer:
    """Copy n bytes from src into the start of dest and return dest."""
    if n == 0 or dest is src:
        return dest
    _check_length(src, n, "source")
    _check_length(dest, n, "destination")
    dest[:n] = bytes(src[:n])
    return dest


def memmove(dest: WritableBuffer, src: ReadableBuffer, n: int) -> WritableBuffer:
    """Copy n bytes from src into dest, correct even when the two overlap."""
    if n == 0 or dest is src:
        return dest
    _check_length(src, n, "source")
    _check_length(dest, n, "destination")
    data = bytes(src[:n])
    dest[:n] = data
    return dest


def memccpy(dest: WritableBuffer, src: ReadableBuffer, c: int, n: int) -> int | None:
    """Copy bytes from src to dest up to and including the first byte equal to c.

    At most n bytes are copied. Returns the index in dest just past the copied
    marker, or None when the marker was not found (or nothing was copied).
    """
    if n == 0 or dest is src:
        return None
    _check_length(src, n, "source")
    window = bytes(src[:n])
    marker = window.find(bytes([c & 0xFF]))
    count = n if marker < 0 else marker + 1
    _check_length(dest, count, "destination")
    dest[:count] = window[:count]
    return None if marker < 0 else count


def memchr(s: ReadableBuffer, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to c among the first n, or None."""
    _check_length(s, n, "buffer")
    index = bytes(s[:n]).find(bytes([c & 0xFF]))
    return None if index < 0 else index


def memcmp(s1: ReadableBuffer, s2: ReadableBuffer, n: int) -> int:
    """Compare the first n bytes as unsigned values; return the first difference."""
    if n == 0:
        return 0
    _check_length(s1, n, "first buffer")
    _check_length(s2, n, "second buffer")
    for a, b in zip(bytes(s1[:n]), bytes(s2[:n])):
        if a != b:
            return a - b
    return 0