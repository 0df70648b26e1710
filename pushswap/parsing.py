"""Reading the numbers to sort from command-line arguments."""

from __future__ import annotations

from itertools import combinations, pairwise
from typing import Optional, Sequence

INT32_MIN = -2147483648
INT32_MAX = 2147483647
MAX_TOKEN_LENGTH = 11

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


class InputError(ValueError):
    """The arguments do not describe a valid list of distinct integers."""


def is_only_spaces(text: str) -> bool:
    """True when ``text`` holds nothing but the space character."""
    return all(char == " " for char in text)


def join_arguments(args: Sequence[str]) -> str:
    """Join arguments into one space-separated string.

    An empty argument, or one made only of spaces, is an error.
    """
    parts = []
    for arg in args:
        if not arg or is_only_spaces(arg):
            raise InputError(f"blank argument: {arg!r}")
        parts.append(" " + arg)
    return "".join(parts)


def count_words(text: str, sep: str) -> int:
    """Number of non-empty pieces of ``text`` between ``sep`` characters."""
    return sum(1 for piece in text.split(sep) if piece)


def split_tokens(text: str, sep: str) -> list[str]:
    """The non-empty pieces of ``text`` between ``sep`` characters."""
    return [piece for piece in text.split(sep) if piece]


def _leading_number(token: str) -> int:
    """Value of the optional sign and digits after leading whitespace."""
    i = 0
    while i < len(token) and token[i] in _WHITESPACE:
        i += 1
    sign = 1
    if i < len(token) and token[i] in "+-":
        if token[i] == "-":
            sign = -1
        i += 1
    result = 0
    while i < len(token) and token[i] in _DIGITS:
        result = result * 10 + int(token[i])
        i += 1
    return sign * result


def loose_atoi(token: str) -> int:
    """Lenient conversion that stops at the first non-digit.

    The result wraps around to a 32-bit signed integer.
    """
    value = _leading_number(token)
    return (value - INT32_MIN) % 2**32 + INT32_MIN


def parse_int(token: str) -> int:
    """Lenient conversion that rejects values outside 32-bit signed range."""
    value = _leading_number(token)
    if not INT32_MIN <= value <= INT32_MAX:
        raise InputError(f"out of range: {token!r}")
    return value


def check_numeric(token: str) -> bool:
    """Require an optional sign followed only by decimal digits."""
    body = token
    if len(token) > 1 and token[0] in "+-":
        body = token[1:]
    if any(char not in _DIGITS for char in body):
        raise InputError(f"not a number: {token!r}")
    return True


def check_duplicates(tokens: Sequence[str]) -> None:
    """Raise when two tokens convert to the same value."""
    for first, second in combinations(tokens, 2):
        if loose_atoi(first) == loose_atoi(second):
            raise InputError(f"duplicate value: {first!r} and {second!r}")


def tokens_sorted(tokens: Sequence[str]) -> bool:
    """True when the tokens' values never decrease."""
    return all(parse_int(a) <= parse_int(b) for a, b in pairwise(tokens))


def parse_numbers(args: Sequence[str]) -> Optional[list[int]]:
    """Validate the arguments and return the numbers they hold.

    Returns an empty list when there are no arguments and None when the
    numbers are already in order, so there is nothing to do.
    Raises InputError for any invalid input.
    """
    if not args:
        return []
    tokens = split_tokens(join_arguments(args), " ")
    for token in tokens:
        if is_only_spaces(token):
            raise InputError("blank token")
    check_duplicates(tokens)
    for token in tokens:
        check_numeric(token)
    if tokens_sorted(tokens):
        return None
    numbers = []
    for token in tokens:
        if len(token) > MAX_TOKEN_LENGTH:
            raise InputError(f"token too long: {token!r}")
        numbers.append(parse_int(token))
    return numbers