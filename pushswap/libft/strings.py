"""Search, copy, compare and transform operations on text."""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional


def strlen(text: str) -> int:
    """Number of characters in ``text``."""
    return len(text)


def strchr(text: str, char: str) -> Optional[int]:
    """Offset of the first ``char`` in ``text``, or None.

    Searching for the terminator "\\0" gives the length of ``text``.
    """
    if char == "\0":
        return len(text)
    position = text.find(char)
    return None if position < 0 else position


def strrchr(text: str, char: str) -> Optional[int]:
    """Offset of the last ``char`` in ``text``, or None.

    Searching for the terminator "\\0" gives the length of ``text``.
    """
    if char == "\0":
        return len(text)
    position = text.rfind(char)
    return None if position < 0 else position


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Offset of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at offset 0; otherwise None when absent.
    """
    if not needle:
        return 0
    position = haystack[:max(length, 0)].find(needle)
    return None if position < 0 else position


def strdup(text: str) -> str:
    """A copy of ``text``."""
    return "".join(text)


def striteri(
    text: Optional[MutableSequence[str]],
    func: Optional[Callable[[int, MutableSequence[str]], object]],
) -> None:
    """Call ``func(index, text)`` for every position of the mutable ``text``.

    ``func`` may change ``text[index]`` in place. Nothing happens when
    either argument is None.
    """
    if text is None or func is None:
        return
    for index in range(len(text)):
        func(index, text)


def strmapi(
    text: Optional[str], func: Optional[Callable[[int, str], str]]
) -> Optional[str]:
    """A new string made of ``func(index, char)`` for each character.

    Returns None when either argument is None.
    """
    if text is None or func is None:
        return None
    return "".join(func(index, char) for index, char in enumerate(text))


def strjoin(first: Optional[str], second: Optional[str]) -> Optional[str]:
    """``first`` followed by ``second``; a missing part counts as empty.

    Returns None only when both are None.
    """
    if first is None and second is None:
        return None
    return (first or "") + (second or "")


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy of ``src`` fitting a buffer of ``size`` including the terminator.

    Returns the copied text and the full length of ``src``.
    """
    copied = src[:size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length it tried to create. When
    ``dst`` already fills the buffer it is left unchanged and the length
    reported is ``size`` plus the length of ``src``.
    """
    used = min(len(dst), max(size, 0))
    if used == size:
        return dst, size + len(src)
    room = size - used - 1
    return dst[:used] + src[:max(room, 0)], used + len(src)


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; the difference of the first mismatch.

    A string that ends early compares as if followed by code 0.
    """
    for position in range(n):
        a = ord(first[position]) if position < len(first) else 0
        b = ord(second[position]) if position < len(second) else 0
        if a == 0 and b == 0:
            break
        if a != b:
            return a - b
    return 0


def strtrim(text: Optional[str], charset: Optional[str]) -> Optional[str]:
    """``text`` without leading and trailing characters found in ``charset``.

    Returns None when either argument is None.
    """
    if text is None or charset is None:
        return None
    return text.strip(charset)


def substr(text: Optional[str], start: int, length: int) -> Optional[str]:
    """At most ``length`` characters of ``text`` from offset ``start``.

    A start past the end gives an empty string; a None text gives None.
    """
    if text is None:
        return None
    if start > len(text):
        return ""
    return text[start:start + max(length, 0)]