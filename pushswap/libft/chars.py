"""Classification and case conversion of ASCII character codes."""

from __future__ import annotations

_UPPER = range(ord("A"), ord("Z") + 1)
_LOWER = range(ord("a"), ord("z") + 1)
_DIGIT = range(ord("0"), ord("9") + 1)
_CASE_OFFSET = ord("a") - ord("A")


def is_alpha(code: int) -> bool:
    """True for an ASCII letter."""
    return code in _UPPER or code in _LOWER


def is_digit(code: int) -> bool:
    """True for an ASCII decimal digit."""
    return code in _DIGIT


def is_alnum(code: int) -> bool:
    """True for an ASCII letter or decimal digit."""
    return is_alpha(code) or is_digit(code)


def is_ascii(code: int) -> bool:
    """True for a code in the 7-bit ASCII range 0..127."""
    return 0 <= code <= 127


def is_print(code: int) -> bool:
    """True for a printable ASCII code, space through tilde."""
    return 32 <= code <= 126


def to_upper(code: int) -> int:
    """The upper-case code for a lower-case ASCII letter; others unchanged."""
    if code in _LOWER:
        return code - _CASE_OFFSET
    return code


def to_lower(code: int) -> int:
    """The lower-case code for an upper-case ASCII letter; others unchanged."""
    if code in _UPPER:
        return code + _CASE_OFFSET
    return code