"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def put_char_fd(c: str, fd: int) -> None:
    """Write the single character ``c`` to ``fd``."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _write_all(fd, c.encode())


def put_str_fd(s: str | None, fd: int) -> None:
    """Write ``s`` to ``fd``; None writes nothing."""
    if s is None:
        return
    _write_all(fd, s.encode())


def put_endl_fd(s: str | None, fd: int) -> None:
    """Write ``s`` followed by a newline to ``fd``; None writes nothing."""
    if s is None:
        return
    _write_all(fd, s.encode() + b"\n")


def put_nbr_fd(n: int, fd: int) -> None:
    """Write the decimal representation of ``n`` to ``fd``."""
    _write_all(fd, str(n).encode())