# ftunit

`ftunit` is a small unit-test runner. Each test runs in a child process made with `os.fork`. A test that crashes, for example with a segmentation fault or a bus error, is reported for that test alone, and the rest of the run carries on. Because it relies on `fork`, it works on POSIX systems only.

The package also holds a toolkit of libc-style helpers:

- `ftunit.chars`: `atoi` (wraps to a signed 32-bit result), `itoa`, `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`, `tolower` and `toupper`. The character functions take either an integer code or a one-character string.
- `ftunit.memory`: `calloc`, `bzero`, `memset`, `memcpy`, `memmove`, `memccpy`, `memchr` and `memcmp`. They work on `bytes`, `bytearray` and `memoryview` objects. Where the C functions return pointers, `memchr` and `memccpy` return an index or `None`.
- `ftunit.strings`: `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`, `strlcpy`, `strlcat`, `strdup`, `substr`, `strjoin`, `strtrim`, `split` and `strmapi`. The search functions return an index or `None`. `strlcpy` and `strlcat` return a `(text, length)` pair.
- `ftunit.lists`: `LinkedList`, a singly linked list of `Node`s. It has `push_front`, `push_back`, `last`, `pop_front`, `for_each`, `map`, `clear`, `len()` and iteration.
- `ftunit.output`: `put_char_fd`, `put_str_fd`, `put_endl_fd` and `put_nbr_fd`. Each one writes to a file descriptor.

## Installing

```
pip install .
```

To run the package's own tests:

```
pip install .[test]
pytest
```

## Running the bundled suites

```
ftunit
```

This prints a banner and then runs the `STRLEN` suite followed by the `ATOI` suite. Each result appears on its own line, and a count follows at the end:

```
STRLEN :
	> [OK]   : Basic test
	...
	6/6 tests checked
```

The `Bigger string test` in the `STRLEN` suite builds a string of 2³¹−1 characters, so it needs several gigabytes of memory. The command takes no options.

A test can end in one of these ways (`Outcome`):

| Status    | Meaning                                                   |
|-----------|-----------------------------------------------------------|
| `[OK]`    | the test returned 0 or `None`                             |
| `[KO]`    | the test returned another value or raised an exception    |
| `[SEGV]`  | the test's process died of `SIGSEGV`                      |
| `[BUSE]`  | the test's process died of `SIGBUS`                       |
| `[fatal]` | the process died of any other signal; the run stops       |

## Writing your own suite

```python
import sys

from ftunit.runner import TestList
from ftunit.strings import strlen


def hello_length():
    return 0 if strlen("Hello") == 5 else -1


def always_fails():
    return -1


tests = TestList()
tests.load("Hello length", hello_length)
tests.load("KO test", always_fails)
all_passed = tests.launch(sys.stdout)  # False here: one test is KO
```

A test function takes no arguments. If it returns 0 or `None`, the test passes.

- `TestList.load(message, func)` adds a `UnitTest` and returns it. It raises `InvalidArgumentError` if the message or the callable is missing.
- `TestList.launch(out)` runs the tests in order and writes each status line to `out`, or to standard output if no stream is given. It then writes the count line, empties the list, and returns `True` only if every test passed.
  - If the list is empty, it raises `InvalidArgumentError`.
  - If a test dies of a signal other than `SIGSEGV` or `SIGBUS`, it raises `FatalSignalError`.
- `run_isolated(test)` runs a single `UnitTest` in a child process and returns its `Outcome`.
- `format_status(outcome, message)` returns the status line for that outcome.

The suites used by the `ftunit` command are in `ftunit.suites`. `atoi_launcher(out)` and `strlen_launcher(out)` each return `True` when their whole suite passed.

## What it does not do

`ftunit` does not discover tests. It has no command-line options and no way to choose which suites to run. The `ftunit` command always runs the two built-in suites. To run your own tests, build a `TestList` in Python as shown above.