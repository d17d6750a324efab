"""String utilities: length, searching, comparison, copying, slicing and splitting."""

from __future__ import annotations

from collections.abc import Callable

_NUL = "\0"


def _char(c: int | str) -> str:
    """Return ``c`` as a one-character string; integer codes are reduced to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c % 256)


def _non_negative(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def strchr(s: str, c: int | str) -> int | None:
    """Return the index of the first occurrence of ``c`` in ``s``, or None.

    Searching for the NUL character finds the terminator at ``len(s)``.
    """
    ch = _char(c)
    index = s.find(ch)
    if index >= 0:
        return index
    return len(s) if ch == _NUL else None


def strrchr(s: str, c: int | str) -> int | None:
    """Return the index of the last occurrence of ``c`` in ``s``, or None.

    Searching for the NUL character finds the terminator at ``len(s)``.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return index if index >= 0 else None


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first mismatch.

    Comparison stops at the end of the shorter string, which counts as code 0.
    """
    _non_negative("n", n)
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` within the first ``length`` characters of ``haystack``.

    Returns the starting index, 0 for an empty needle, or None when absent.
    """
    _non_negative("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return index if index >= 0 else None


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the copied text and the full length of ``src``.
    """
    _non_negative("size", size)
    copied = src[: size - 1] if size >= 1 else ""
    return copied, len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have had.
    When ``dest`` already fills the buffer it is returned unchanged with
    ``len(src) + size``.
    """
    _non_negative("size", size)
    dlen = len(dest)
    slen = len(src)
    if dlen >= size:
        return dest, slen + size
    return dest + src[: size - dlen - 1], slen + dlen


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return "".join(s)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` starting at ``start``.

    A start beyond the end gives an empty string.
    """
    _non_negative("start", start)
    _non_negative("length", length)
    if start >= len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Strip every character found in ``charset`` from both ends of ``s``."""
    return s.strip(charset)


def split(s: str, sep: int | str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty fields."""
    return [word for word in s.split(_char(sep)) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` applied to each character of ``s``."""
    return "".join(f(i, ch) for i, ch in enumerate(s))