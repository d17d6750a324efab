"""Run test callables in isolated child processes and report their outcomes."""

from __future__ import annotations

import enum
import os
import signal
import sys
import traceback
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TextIO

RESET = "\033[0m"
RED = "\033[31m"
BLUE = "\033[34m"
BOLDGREEN = "\033[1m\033[32m"

TestFunction = Callable[[], "int | None"]


class Outcome(enum.Enum):
    """How a test process ended."""

    OK = "ok"
    KO = "ko"
    SEGV = "segv"
    BUSE = "buse"
    FATAL = "fatal"


_LABELS = {
    Outcome.OK: BLUE + "[OK]  " + RESET,
    Outcome.KO: RED + "[KO]  " + RESET,
    Outcome.SEGV: RED + "[SEGV]" + RESET,
    Outcome.BUSE: RED + "[BUSE]" + RESET,
    Outcome.FATAL: RED + "[fatal]  " + RESET,
}


class InvalidArgumentError(ValueError):
    """A test was loaded or launched with a missing argument."""

    def __init__(self, message: str = "Invalid argument.") -> None:
        super().__init__(message)


class FatalSignalError(RuntimeError):
    """A test process was killed by a signal other than SIGSEGV or SIGBUS."""

    def __init__(self, test_message: str) -> None:
        self.test_message = test_message
        super().__init__(f"fatal signal while running test: {test_message}")


@dataclass(frozen=True)
class UnitTest:
    """A named test callable; it returns 0 (or None) when it passes."""

    message: str
    func: TestFunction


def _flush_standard_streams() -> None:
    for stream in (sys.stdout, sys.stderr):
        if stream is not None:
            stream.flush()


def _exit_code(result: object) -> int:
    if result is None:
        return 0
    return int(result) & 0xFF  # type: ignore[call-overload]


def _run_child(test: UnitTest) -> None:
    code = 1
    try:
        code = _exit_code(test.func())
    except SystemExit as exc:
        if exc.code is None:
            code = 0
        elif isinstance(exc.code, int):
            code = exc.code & 0xFF
        else:
            print(exc.code, file=sys.stderr)
            code = 1
    except BaseException:
        traceback.print_exc()
        code = 1
    finally:
        try:
            _flush_standard_streams()
        finally:
            os._exit(code)


def _outcome_from_status(status: int) -> Outcome:
    if os.WIFEXITED(status):
        return Outcome.OK if os.WEXITSTATUS(status) == 0 else Outcome.KO
    if os.WIFSIGNALED(status):
        number = os.WTERMSIG(status)
        if number == signal.SIGSEGV:
            return Outcome.SEGV
        if number == signal.SIGBUS:
            return Outcome.BUSE
    return Outcome.FATAL


def run_isolated(test: UnitTest) -> Outcome:
    """Run ``test`` in a forked child process and classify how it ended."""
    _flush_standard_streams()
    pid = os.fork()
    if pid == 0:
        _run_child(test)
    _, status = os.waitpid(pid, 0)
    return _outcome_from_status(status)


def format_status(outcome: Outcome, message: str) -> str:
    """Return the report line for one test, without a trailing newline."""
    return f"\t> {_LABELS[outcome]} : {message}"


class TestList:
    """An ordered collection of unit tests that are launched together."""

    __test__ = False

    def __init__(self) -> None:
        self._tests: list[UnitTest] = []

    def load(self, message: str, func: TestFunction) -> UnitTest:
        """Append a test; a missing message or callable raises InvalidArgumentError."""
        if message is None or func is None or not callable(func):
            raise InvalidArgumentError()
        test = UnitTest(message, func)
        self._tests.append(test)
        return test

    def launch(self, out: TextIO | None = None) -> bool:
        """Run every loaded test, report each to ``out`` and empty the list.

        Returns True when every test passed. Raises InvalidArgumentError on an
        empty list and FatalSignalError when a test dies of an unexpected signal.
        """
        stream = sys.stdout if out is None else out
        if not self._tests:
            raise InvalidArgumentError()
        ok_count = 0
        count = 0
        for test in self._tests:
            count += 1
            stream.flush()
            try:
                outcome = run_isolated(test)
            except OSError:
                print("fork error!", file=stream)
                continue
            print(format_status(outcome, test.message), file=stream)
            if outcome is Outcome.FATAL:
                stream.flush()
                raise FatalSignalError(test.message)
            if outcome is Outcome.OK:
                ok_count += 1
        print(f"\t{ok_count}/{count} tests checked\n\n", file=stream)
        self._tests.clear()
        return ok_count == count

    def __len__(self) -> int:
        return len(self._tests)

    def __iter__(self) -> Iterator[UnitTest]:
        return iter(self._tests)