"""Searching and comparing NUL-terminated style strings.

A ``"\\0"`` in any argument ends the string at that point, as a string
terminator does. Positions are returned as indexes, or None when absent.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional, Union

Char = Union[int, str]


def _terminated(s: str) -> str:
    end = s.find("\0")
    return s if end == -1 else s[:end]


def _char(c: Char) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) & 0xFF)


def strlen(s: str) -> int:
    """Number of characters before the terminator."""
    return len(_terminated(s))


def strchr(s: str, c: Char) -> Optional[int]:
    """Index of the first ``c`` in ``s``.

    Searching for the terminator itself gives the length of the string.
    """
    text = _terminated(s)
    char = _char(c)
    if char == "\0":
        return len(text)
    index = text.find(char)
    return None if index == -1 else index


def strrchr(s: str, c: Char) -> Optional[int]:
    """Index of the last ``c`` in ``s``.

    Searching for the terminator itself gives the length of the string.
    """
    text = _terminated(s)
    char = _char(c)
    if char == "\0":
        return len(text)
    index = text.rfind(char)
    return None if index == -1 else index


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at 0 whatever the length.
    """
    text = _terminated(haystack)
    wanted = _terminated(needle)
    if not wanted:
        return 0
    if length <= 0:
        return None
    index = text.find(wanted, 0, length)
    return None if index == -1 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the first differing character codes, a string
    end counting as code 0, or 0 if the compared parts are equal.
    """
    if n <= 0:
        return 0
    first = _terminated(s1)[:n]
    second = _terminated(s2)[:n]
    for a, b in zip_longest(first, second, fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0