"""Small text-scanning helpers used by the XPM reader."""

from __future__ import annotations

import re

_BLANKS = re.compile(r"[ \t]+")


def find(text: str, needle: str, limit: int) -> int:
    """Return the offset of the first occurrence of ``needle`` in ``text``.

    Returns -1 when ``needle`` is longer than ``limit`` or does not occur.
    """
    if len(needle) > limit:
        return -1
    return text.find(needle)


def find_unquoted(text: str, needle: str, limit: int) -> int:
    """Like :func:`find`, but skip matches inside double-quoted sections.

    Every ``"`` toggles the quoted state before the position it sits at is
    tested, so a match may not begin on an opening quote.
    """
    if len(needle) > limit:
        return -1
    quoted = False
    last_start = len(text) - len(needle)
    for pos, char in enumerate(text):
        if pos > last_start:
            break
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def split_words(text: str) -> list[str]:
    """Split ``text`` on runs of spaces and tabs, dropping empty words."""
    return [word for word in _BLANKS.split(text) if word]