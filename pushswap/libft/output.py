"""Writing characters, strings and numbers to text streams."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

INT32_MIN = -2147483648
INT32_MAX = 2147483647


def _writable(stream: Optional[TextIO]) -> Optional[TextIO]:
    """The stream to write to, or None when output goes to standard input."""
    target = sys.stdout if stream is None else stream
    if target is sys.stdin:
        return None
    return target


def put_char(char: str, stream: Optional[TextIO] = None) -> None:
    """Write one character; standard output when ``stream`` is None."""
    target = _writable(stream)
    if target is not None:
        target.write(char[:1])


def put_str(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text``; nothing when it is None."""
    if text is None:
        return
    target = sys.stdout if stream is None else stream
    target.write(text)


def put_endl(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline; nothing when it is None."""
    if text is None:
        return
    target = _writable(stream)
    if target is not None:
        target.write(text + "\n")


def put_nbr(number: int, stream: Optional[TextIO] = None) -> None:
    """Write a 32-bit signed integer in decimal.

    Raises OverflowError for values outside the 32-bit signed range.
    """
    if not INT32_MIN <= number <= INT32_MAX:
        raise OverflowError(f"{number} does not fit in 32 bits")
    target = _writable(stream)
    if target is not None:
        target.write(str(number))