"""Character classification, case mapping and integer/string conversion."""

from __future__ import annotations

_INT_BITS = 32
_INT_MOD = 1 << _INT_BITS
_INT_SIGN = 1 << (_INT_BITS - 1)

_SPACE = frozenset("\t\n\v\f\r ")


def _code(c: int | str) -> int:
    """Return the character code of ``c``, given as an int or a one-character str."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def _wrap_int(value: int) -> int:
    """Wrap ``value`` to a signed 32-bit integer, as C int arithmetic does."""
    value %= _INT_MOD
    return value - _INT_MOD if value >= _INT_SIGN else value


def atoi(s: str) -> int:
    """Parse a leading decimal integer from ``s``.

    Leading whitespace and one optional sign are skipped; parsing stops at the
    first non-digit. Results are wrapped to a signed 32-bit integer.
    """
    rest = s.lstrip("".join(_SPACE))
    negative = False
    if rest[:1] in ("+", "-"):
        negative = rest[0] == "-"
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    if not digits:
        return 0
    value = int("".join(digits))
    return _wrap_int(-value if negative else value)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(n)


def isalpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def isdigit(c: int | str) -> bool:
    """True for ASCII decimal digits."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: int | str) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def isprint(c: int | str) -> bool:
    """True for printable ASCII characters, space through tilde."""
    return ord(" ") <= _code(c) <= ord("~")


def tolower(c: int | str) -> int | str:
    """Map an ASCII upper-case letter to lower case; other input is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += ord("a") - ord("A")
    return chr(code) if isinstance(c, str) else code


def toupper(c: int | str) -> int | str:
    """Map an ASCII lower-case letter to upper case; other input is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= ord("a") - ord("A")
    return chr(code) if isinstance(c, str) else code