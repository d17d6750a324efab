import pytest

from ftunit.strings import (
    split,
    strchr,
    strdup,
    strjoin,
    strlcat,
    strlcpy,
    strlen,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Hello", 5),
        ("1234567()*!!!######", 19),
        ("\n\n\n\n\t\t\t\r\r\r\r\r\r\r\n\n\n\r\t\t\t\t\t", 23),
        ("\n\naaaa\n\na\t\t\t\r\r\r\ra\r\r\ar\n\n\n\r\ata\ata\ata\ata\at", 39),
        ("", 0),
    ],
)
def test_strlen_matches_known_lengths(text, expected):
    assert strlen(text) == expected
    assert strlen(text) == len(text)


@pytest.mark.parametrize("run", range(3))
def test_strlen_stress_repeated(run):
    assert strlen("Hello") == 5


def test_strchr_finds_first():
    assert strchr("banana", "a") == 1
    assert strchr("banana", ord("n")) == 2


def test_strchr_missing_and_terminator():
    assert strchr("banana", "z") is None
    assert strchr("banana", "\0") == 6
    assert strchr("", 0) == 0


def test_strchr_rejects_long_string():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strrchr_finds_last():
    assert strrchr("banana", "a") == 5
    assert strrchr("banana", "b") == 0
    assert strrchr("banana", "z") is None
    assert strrchr("banana", 0) == 6


def test_strncmp_values():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abc", "abd", 3) == -1
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("ab", "abc", 5) == -99
    assert strncmp("abc", "xyz", 0) == 0
    assert strncmp("b", "a", 1) == 1


def test_strncmp_negative_raises():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strnstr():
    assert strnstr("hello world", "world", 11) == 6
    assert strnstr("hello world", "world", 10) is None
    assert strnstr("hello", "", 0) == 0
    assert strnstr("hello", "xyz", 5) is None
    assert strnstr("aaab", "ab", 4) == 2


def test_strlcpy():
    assert strlcpy("hello", 3) == ("he", 5)
    assert strlcpy("hello", 0) == ("", 5)
    assert strlcpy("hi", 10) == ("hi", 2)
    assert strlcpy("", 1) == ("", 0)


def test_strlcat():
    assert strlcat("ab", "cdef", 5) == ("abcd", 6)
    assert strlcat("abc", "de", 2) == ("abc", 4)
    assert strlcat("ab", "cd", 10) == ("abcd", 4)
    assert strlcat("", "xyz", 1) == ("", 3)


def test_strlcat_negative_size_raises():
    with pytest.raises(ValueError):
        strlcat("a", "b", -3)


def test_strdup_equal_copy():
    assert strdup("copy me") == "copy me"
    assert strdup("") == ""


def test_substr():
    assert substr("hello world", 6, 5) == "world"
    assert substr("hello", 1, 100) == "ello"
    assert substr("hello", 5, 3) == ""
    assert substr("hello", 10, 3) == ""
    assert substr("hello", 0, 0) == ""


def test_substr_negative_start_raises():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strjoin():
    assert strjoin("foo", "bar") == "foobar"
    assert strjoin("", "") == ""


@pytest.mark.parametrize(
    ("text", "charset", "expected"),
    [
        ("  hello  ", " ", "hello"),
        ("xxhixyx", "xy", "hi"),
        ("aaaa", "a", ""),
        ("a", "a", ""),
        ("ba", "a", "b"),
        ("", "a", ""),
        (" keep ", "", " keep "),
    ],
)
def test_strtrim(text, charset, expected):
    assert strtrim(text, charset) == expected


def test_split_drops_empty_fields():
    assert split("  hello  world ", " ") == ["hello", "world"]
    assert split("a,b,,c", ",") == ["a", "b", "c"]
    assert split("", ",") == []
    assert split(",,,", ",") == []
    assert split("single", ord(",")) == ["single"]


def test_split_rejects_multichar_separator():
    with pytest.raises(ValueError):
        split("a--b", "--")


def test_strmapi_uses_index():
    assert strmapi("abc", lambda i, ch: chr(ord(ch) + i)) == "ace"
    assert strmapi("", lambda i, ch: ch) == ""
    assert strmapi("xyz", lambda i, ch: str(i)) == "012"