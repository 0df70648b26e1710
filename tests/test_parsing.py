import pytest

from pushswap.parsing import (
    InputError,
    check_duplicates,
    check_numeric,
    count_words,
    is_only_spaces,
    join_arguments,
    loose_atoi,
    parse_int,
    parse_numbers,
    split_tokens,
    tokens_sorted,
)


@pytest.mark.parametrize(
    "text, expected",
    [("   ", True), ("", True), (" 1 ", False), ("\t", False)],
)
def test_is_only_spaces(text, expected):
    assert is_only_spaces(text) is expected


def test_join_arguments_then_split_gives_all_tokens():
    joined = join_arguments(["1 2", "3"])
    assert split_tokens(joined, " ") == ["1", "2", "3"]


@pytest.mark.parametrize("args", [["1", ""], ["   ", "2"]])
def test_join_arguments_rejects_blank(args):
    with pytest.raises(InputError):
        join_arguments(args)


@pytest.mark.parametrize("text", ["  1  2 ", "a", "", "   ", "x y z"])
def test_count_words_matches_split(text):
    assert count_words(text, " ") == len(split_tokens(text, " "))


def test_split_tokens_drops_empty_pieces():
    assert split_tokens("  1  2 ", " ") == ["1", "2"]


@pytest.mark.parametrize(
    "token, expected",
    [(" \t-42abc", -42), ("+7", 7), ("abc", 0), ("2147483647", 2147483647)],
)
def test_loose_atoi(token, expected):
    assert loose_atoi(token) == expected


def test_loose_atoi_wraps_to_32_bits():
    assert loose_atoi("2147483648") == -2147483648


@pytest.mark.parametrize(
    "token, expected",
    [("2147483647", 2147483647), ("-2147483648", -2147483648), ("  +15", 15)],
)
def test_parse_int_in_range(token, expected):
    assert parse_int(token) == expected


@pytest.mark.parametrize("token", ["2147483648", "-2147483649"])
def test_parse_int_out_of_range(token):
    with pytest.raises(InputError):
        parse_int(token)


@pytest.mark.parametrize("token", ["-5", "+5", "0", ""])
def test_check_numeric_accepts(token):
    assert check_numeric(token) is True


@pytest.mark.parametrize("token", ["5a", "-", "+", "--5", "1.5"])
def test_check_numeric_rejects(token):
    with pytest.raises(InputError):
        check_numeric(token)


@pytest.mark.parametrize("tokens", [["1", "+1"], ["01", "1"], ["3", "4", "3"]])
def test_check_duplicates_rejects(tokens):
    with pytest.raises(InputError):
        check_duplicates(tokens)


@pytest.mark.parametrize(
    "tokens, expected",
    [(["1", "2", "2"], True), (["3", "1"], False), (["5"], True)],
)
def test_tokens_sorted(tokens, expected):
    assert tokens_sorted(tokens) is expected


def test_parse_numbers_without_arguments():
    assert parse_numbers([]) == []


def test_parse_numbers_returns_values_in_order():
    assert parse_numbers(["3 1 2"]) == [3, 1, 2]
    assert parse_numbers(["-4", "+9", "0"]) == [-4, 9, 0]


def test_parse_numbers_sorted_input_means_nothing_to_do():
    assert parse_numbers(["1", "2", "3"]) is None
    assert parse_numbers(["42"]) is None


def test_sorted_check_comes_before_length_check():
    assert parse_numbers(["1", "000000000002"]) is None
    with pytest.raises(InputError):
        parse_numbers(["2", "000000000001"])


@pytest.mark.parametrize(
    "args",
    [
        ["2", "1", "x"],
        ["2", "1", "2"],
        ["", "1"],
        ["  "],
        ["2", "2147483648"],
        ["2", "1", "-"],
    ],
)
def test_parse_numbers_rejects_invalid(args):
    with pytest.raises(InputError):
        parse_numbers(args)