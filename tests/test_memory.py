import pytest

from ftunit.memory import bzero, calloc, memccpy, memchr, memcmp, memcpy, memmove, memset


def test_calloc_zero_request_gives_one_byte():
    assert calloc(0, 0) == bytearray(1)
    assert calloc(0, 8) == bytearray(1)
    assert calloc(3, 0) == bytearray(1)


def test_calloc_is_zero_filled():
    buf = calloc(4, 3)
    assert len(buf) == 12
    assert not any(buf)


def test_calloc_rejects_negative():
    with pytest.raises(ValueError):
        calloc(-1, 2)


def test_bzero_clears_prefix_only():
    buf = bytearray(b"abcdef")
    bzero(buf, 3)
    assert buf == bytearray(b"\0\0\0def")


def test_bzero_rejects_too_long():
    with pytest.raises(ValueError):
        bzero(bytearray(2), 5)


def test_memset_fills_and_returns_same_buffer():
    buf = bytearray(b"hello")
    result = memset(buf, ord("x"), 3)
    assert result is buf
    assert buf == bytearray(b"xxxlo")


def test_memset_truncates_value_to_byte():
    buf = bytearray(2)
    memset(buf, 0x141, 2)
    assert buf == bytearray(b"AA")


def test_memcpy_copies_prefix():
    dest = bytearray(b"......")
    result = memcpy(dest, b"abc", 3)
    assert result is dest
    assert dest == bytearray(b"abc...")


def test_memcpy_zero_length_is_noop():
    dest = bytearray(b"keep")
    memcpy(dest, b"zzzz", 0)
    assert dest == bytearray(b"keep")


def test_memcpy_rejects_short_source():
    with pytest.raises(ValueError):
        memcpy(bytearray(10), b"ab", 5)


def test_memmove_overlap_forward():
    buf = bytearray(b"abcdef")
    view = memoryview(buf)
    target = view[2:]
    result = memmove(target, view, 4)
    assert result is target
    assert bytes(result) == b"abcd"
    assert buf == bytearray(b"ababcd")


def test_memmove_overlap_backward():
    buf = bytearray(b"abcdef")
    view = memoryview(buf)
    result = memmove(view, view[2:], 4)
    assert result is view
    assert bytes(result) == b"cdefef"
    assert buf == bytearray(b"cdefef")


def test_memccpy_stops_after_marker():
    dest = bytearray(8)
    end = memccpy(dest, b"hello world", ord("o"), 11)
    assert end == len(b"hello")
    assert bytes(dest[:end]) == b"hello"
    assert not any(dest[end:])


def test_memccpy_marker_absent_copies_n():
    dest = bytearray(5)
    assert memccpy(dest, b"abcde", ord("z"), 5) is None
    assert dest == bytearray(b"abcde")


def test_memccpy_zero_length_or_same_buffer():
    buf = bytearray(b"abc")
    assert memccpy(bytearray(3), b"abc", ord("a"), 0) is None
    assert memccpy(buf, buf, ord("a"), 3) is None


def test_memchr_finds_first_occurrence():
    data = b"banana"
    index = memchr(data, ord("n"), len(data))
    assert index == data.index(b"n")


def test_memchr_respects_limit():
    assert memchr(b"banana", ord("n"), 2) is None
    assert memchr(b"abc", ord("z"), 3) is None


def test_memchr_finds_zero_byte():
    assert memchr(b"ab\0cd", 0, 5) == 2


def test_memcmp_equal_and_ordering():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_zero_length():
    assert memcmp(b"x", b"y", 0) == 0


def test_memcmp_is_unsigned():
    assert memcmp(b"\xff", b"\x00", 1) == 255


def test_memcmp_antisymmetric():
    a, b = b"hello", b"help!"
    assert memcmp(a, b, 5) == -memcmp(b, a, 5)


def test_memcmp_ignores_bytes_past_limit():
    assert memcmp(b"abX", b"abY", 2) == 0