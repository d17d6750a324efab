"""Built-in test suites for the string-to-integer and length functions."""

from __future__ import annotations

import sys
from typing import TextIO

from ftunit.chars import atoi
from ftunit.runner import BOLDGREEN, RESET, TestList
from ftunit.strings import strlen

BIG_STRING_LENGTH = 2**31 - 1

_INT_MAX = 2**31 - 1
_INT_MIN = -(2**31)
_LLONG_MAX = 2**63 - 1


def _check_atoi(s: str, expected: int) -> int:
    return 0 if atoi(s) == expected else -1


def _check_strlen(s: str) -> int:
    return 0 if strlen(s) == len(s) else -1


def basic_test_atoi() -> int:
    """Plain positive number."""
    return _check_atoi("42", 42)


def basic2_test_atoi() -> int:
    """Leading space and plus sign."""
    return _check_atoi(" +42", 42)


def minus_test_atoi() -> int:
    """Negative number."""
    return _check_atoi("-42", -42)


def intmin_test_atoi() -> int:
    """Smallest 32-bit integer."""
    return _check_atoi(str(_INT_MIN), _INT_MIN)


def intmax_test_atoi() -> int:
    """Largest 32-bit integer."""
    return _check_atoi(str(_INT_MAX), _INT_MAX)


def overint_test_atoi() -> int:
    """A 64-bit maximum truncates to a 32-bit -1."""
    return _check_atoi(str(_LLONG_MAX), -1)


def empty_test_atoi() -> int:
    """Empty input parses as zero."""
    return _check_atoi("", 0)


def zero_test_atoi() -> int:
    """A lone zero."""
    return _check_atoi("0", 0)


def zero2_test_atoi() -> int:
    """More than one sign stops parsing at zero."""
    return _check_atoi("  +--+++42", 0)


def basic_test_strlen() -> int:
    """Short word."""
    return _check_strlen("Hello")


def basic2_test_strlen() -> int:
    """Digits and punctuation."""
    return _check_strlen("1234567()*!!!######")


def bigger_str_test_strlen() -> int:
    """A string of BIG_STRING_LENGTH characters."""
    return _check_strlen("a" * BIG_STRING_LENGTH)


def nonprintable_test_strlen() -> int:
    """Only control characters."""
    return _check_strlen("\n\n\n\n\t\t\t\r\r\r\r\r\r\r\n\n\n\r\t\t\t\t\t")


def mix_test_strlen() -> int:
    """Letters mixed with control characters."""
    return _check_strlen(
        "\n\naaaa\n\na\t\t\t\r\r\r\ra\r\r\ar\n\n\n\r\ata\ata\ata\ata\at"
    )


def empty_test_strlen() -> int:
    """Empty string."""
    return _check_strlen("")


def atoi_launcher(out: TextIO | None = None) -> bool:
    """Run the atoi suite; True when every test passed."""
    stream = sys.stdout if out is None else out
    print("ATOI :", file=stream)
    tests = TestList()
    tests.load("Basic test", basic_test_atoi)
    tests.load("Basic2 test", basic2_test_atoi)
    tests.load("Minus test", minus_test_atoi)
    tests.load("INMIN test", intmin_test_atoi)
    tests.load("INTMAX test", intmax_test_atoi)
    tests.load("OVERINT test", overint_test_atoi)
    tests.load("Empty test", empty_test_atoi)
    tests.load("Zero test", zero_test_atoi)
    tests.load("Zero2 test", zero2_test_atoi)
    return tests.launch(stream)


def strlen_launcher(out: TextIO | None = None) -> bool:
    """Run the strlen suite; True when every test passed."""
    stream = sys.stdout if out is None else out
    print("STRLEN :", file=stream)
    tests = TestList()
    tests.load("Basic test", basic_test_strlen)
    tests.load("Basic2 test", basic2_test_strlen)
    tests.load("Bigger string test", bigger_str_test_strlen)
    tests.load("Non printable test", nonprintable_test_strlen)
    tests.load("Mix test", mix_test_strlen)
    tests.load("Empty test", empty_test_strlen)
    return tests.launch(stream)


def main(argv: list[str] | None = None) -> int:
    """Print the banner and run the strlen and atoi suites."""
    print(BOLDGREEN + "*********************************")
    print("**      42 - Unit Tests      ****")
    print("*********************************\n" + RESET, end="")
    strlen_launcher()
    atoi_launcher()
    return 0