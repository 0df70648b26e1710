import pytest

from pushswap.libft.strings import (
    strchr,
    strdup,
    striteri,
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

SAMPLE = "42 Madrid"


def test_strlen_matches_length():
    assert strlen(SAMPLE) == len(SAMPLE)
    assert strlen("") == 0


@pytest.mark.parametrize("char", ["a", "d", "4", " "])
def test_strchr_finds_first(char):
    position = strchr(SAMPLE, char)
    assert SAMPLE[position] == char
    assert char not in SAMPLE[:position]


@pytest.mark.parametrize("char", ["a", "d", "4", " "])
def test_strrchr_finds_last(char):
    position = strrchr(SAMPLE, char)
    assert SAMPLE[position] == char
    assert char not in SAMPLE[position + 1:]


def test_search_missing_and_terminator():
    assert strchr(SAMPLE, "z") is None
    assert strrchr(SAMPLE, "z") is None
    assert strchr(SAMPLE, "\0") == len(SAMPLE)
    assert strrchr(SAMPLE, "\0") == len(SAMPLE)


def test_strnstr_within_limit():
    haystack = "Welcome to 42 Madrid"
    position = strnstr(haystack, "42", len(haystack))
    assert haystack[position:position + 2] == "42"
    assert strnstr(haystack, "42", position + 1) is None
    assert strnstr(haystack, "42", position + 2) == position


def test_strnstr_empty_needle_and_missing():
    assert strnstr("abc", "", 0) == 0
    assert strnstr("abc", "zz", 3) is None


def test_strdup_equal():
    assert strdup(SAMPLE) == SAMPLE
    assert strdup("") == ""


def test_striteri_modifies_in_place():
    chars = list("abc")
    seen = []

    def upper_even(index, buffer):
        seen.append(index)
        if index % 2 == 0:
            buffer[index] = buffer[index].upper()

    striteri(chars, upper_even)
    assert chars == ["A", "b", "C"]
    assert seen == [0, 1, 2]


def test_striteri_none_is_noop():
    chars = list("ab")
    striteri(chars, None)
    assert chars == ["a", "b"]


def test_strmapi_shift():
    shifted = strmapi("31L`cqhc", lambda _i, c: chr(ord(c) + 1))
    assert strmapi(shifted, lambda _i, c: chr(ord(c) - 1)) == "31L`cqhc"
    assert len(shifted) == 8


def test_strmapi_passes_index():
    assert strmapi("abc", lambda i, c: str(i)) == "012"
    assert strmapi(None, lambda i, c: c) is None


def test_strjoin():
    assert strjoin("42 ", "Madrid") == SAMPLE
    assert strjoin(None, "x") == "x"
    assert strjoin("x", None) == "x"
    assert strjoin(None, None) is None


@pytest.mark.parametrize("size", [0, 1, 3, 9, 10, 20])
def test_strlcpy_fits_buffer(size):
    copied, total = strlcpy(SAMPLE, size)
    assert total == len(SAMPLE)
    assert len(copied) <= max(size - 1, 0)
    assert SAMPLE.startswith(copied)


def test_strlcpy_full_copy():
    assert strlcpy(SAMPLE, 20) == (SAMPLE, len(SAMPLE))


def test_strlcat_full_append():
    result, total = strlcat("42 ", "Madrid", 49)
    assert result == SAMPLE
    assert total == len(SAMPLE)


@pytest.mark.parametrize("size", [4, 5, 6, 8])
def test_strlcat_truncates(size):
    result, total = strlcat("42 ", "Madrid", size)
    assert len(result) == size - 1
    assert SAMPLE.startswith(result)
    assert total == len(SAMPLE)


def test_strlcat_dst_fills_buffer():
    result, total = strlcat("42 ", "Madrid", 2)
    assert result == "42 "
    assert total == 2 + len("Madrid")


def test_strncmp():
    assert strncmp("42 Madrid", "42 Malaga", 4) == 0
    assert strncmp("42 Madrid", "42 Malaga", 8) == ord("d") - ord("l")
    assert strncmp("abc", "abc", 10) == 0
    assert strncmp("ab", "abc", 3) == -ord("c")
    assert strncmp("x", "y", 0) == 0


def test_strncmp_antisymmetric():
    assert strncmp("apple", "apply", 5) == -strncmp("apply", "apple", 5)


def test_strtrim():
    assert strtrim("xxcxx42 Madridxxcxx", "xc") == SAMPLE
    assert strtrim("xxxx", "x") == ""
    assert strtrim("", "x") == ""
    assert strtrim(SAMPLE, "") == SAMPLE
    assert strtrim(None, "x") is None
    assert strtrim("x", None) is None


def test_substr():
    assert substr("Madrid 42", 7, 2) == "42"
    assert substr("Madrid 42", 0, 100) == "Madrid 42"
    assert substr("Madrid 42", 50, 2) == ""
    assert substr(None, 0, 1) is None


@pytest.mark.parametrize("start", range(0, 10))
def test_substr_length_bound(start):
    part = substr(SAMPLE, start, 3)
    assert len(part) <= 3
    assert SAMPLE[start:].startswith(part)