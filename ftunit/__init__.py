"""Process-isolated unit-test runner with libc-style character, memory, string, list and output helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "strings", "lists", "output", "runner", "suites"]