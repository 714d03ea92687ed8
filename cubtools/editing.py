"""Building, splitting and copying strings.

A ``"\\0"`` in a string argument ends the string at that point, as a string
terminator does. Functions that would fill a caller's buffer return the
resulting text instead.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any, Optional, Union

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


def split(s: str, sep: Char) -> list[str]:
    """Split ``s`` on ``sep``, dropping empty words."""
    text = _terminated(s)
    char = _char(sep)
    if char == "\0":
        return [text] if text else []
    return [word for word in text.split(char) if word]


def strtrim(s: str, chars: str) -> str:
    """Remove any of ``chars`` from both ends of ``s``."""
    return _terminated(s).strip(_terminated(chars))


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from index ``start``.

    A start beyond the end of the string gives an empty string.
    """
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    text = _terminated(s)
    if start > len(text):
        return ""
    return text[start:start + max(length, 0)]


def strjoin(a: str, b: str) -> str:
    """Concatenate two strings."""
    return _terminated(a) + _terminated(b)


def strdup(s: str) -> str:
    """Return a copy of ``s`` up to its terminator."""
    return _terminated(s)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters.

    Returns the text that fits (at most ``size - 1`` characters, leaving room
    for the terminator) and the full length of ``src``. With a size of 0
    nothing is copied.
    """
    text = _terminated(src)
    if size <= 0:
        return "", len(text)
    return text[:size - 1], len(text)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have
    had. When ``size`` is 0 or smaller than ``dst``, ``dst`` is left as it is
    and the returned length is that of ``src`` plus ``size``.
    """
    head = _terminated(dst)
    tail = _terminated(src)
    if size <= 0:
        return head, len(tail)
    if size < len(head):
        return head, len(tail) + size
    room = max(size - 1 - len(head), 0)
    return head + tail[:room], len(tail) + len(head)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a string from ``f(index, char)`` for each character of ``s``."""
    return "".join(f(index, char) for index, char in enumerate(_terminated(s)))


def striteri(s: MutableSequence[Any], f: Callable[[int, Any], Optional[Any]]) -> None:
    """Call ``f(index, item)`` for each item of ``s``, in place.

    A result other than None replaces the item. Iteration stops at a
    terminator item (``"\\0"`` or 0).
    """
    for index in range(len(s)):
        item = s[index]
        if item == "\0" or item == 0:
            break
        result = f(index, item)
        if result is not None:
            s[index] = result