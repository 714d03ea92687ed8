"""Reader for XPM pixmaps, producing 32-bit colour values per pixel."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from cubtools.colors import color_by_name
from cubtools.textscan import find, find_unquoted, split_words

TRANSPARENT = 0xFF000000
_NAME_BUFFER = 63

_HEX_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")
_DEC_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")


class XpmError(ValueError):
    """Raised when XPM data cannot be decoded."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded pixmap: ``rows[y][x]`` holds a 0xAARRGGBB value."""

    width: int
    height: int
    rows: tuple[tuple[int, ...], ...]


def _leading_int(pattern: re.Pattern[str], text: str, base: int) -> int:
    match = pattern.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits, base)
    return -value if sign == "-" else value


def text_to_rgb(name: str, end: str | None) -> int:
    """Resolve a colour specification to 0xRRGGBB.

    ``#hex`` is read as hexadecimal. Otherwise ``name`` (joined with ``end``
    by a space when given) is looked up among the named colours; unknown
    names give 0 and ``none`` gives -1.
    """
    if name.startswith("#"):
        return _leading_int(_HEX_NUMBER, name[1:], 16)
    if end is not None:
        name = f"{name} {end}"[:_NAME_BUFFER]
    try:
        return color_by_name(name)
    except KeyError:
        return 0


def color_key(chars: str) -> int:
    """Pack the characters naming a colour into one integer key."""
    result = 0
    for char in chars:
        result = (result << 8) + ord(char)
    return result


def _blank(text: str, start: int, count: int) -> str:
    stop = min(len(text), start + max(count, 0))
    return text[:start] + " " * (stop - start) + text[stop:]


def strip_comments(text: str) -> str:
    """Replace C comments outside string literals with spaces.

    The length of the text is preserved. A line comment is blanked together
    with the newline that ends it.
    """
    while (begin := find_unquoted(text, "/*", len(text))) != -1:
        end = find(text[begin + 2:], "*/", len(text) - begin - 2)
        text = _blank(text, begin, end + 4)
    while (begin := find_unquoted(text, "//", len(text))) != -1:
        end = find(text[begin + 2:], "\n", len(text) - begin - 2)
        text = _blank(text, begin, end + 3)
    return text


def extract_strings(text: str) -> Iterator[str]:
    """Yield the contents of successive double-quoted strings in ``text``."""
    pos = 0
    while True:
        opening = text.find('"', pos)
        if opening == -1:
            return
        closing = text.find('"', opening + 1)
        if closing == -1:
            return
        yield text[opening + 1:closing]
        pos = closing + 1


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def _parse_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"malformed header: {line!r}")
    values = tuple(_leading_int(_DEC_NUMBER, word, 10) for word in words[:4])
    labels = ("width", "height", "colour count", "characters per pixel")
    for label, value in zip(labels, values):
        if value <= 0:
            raise XpmError(f"invalid {label} in header: {line!r}")
    return values  # type: ignore[return-value]


def _parse_color(line: str, cpp: int) -> tuple[int, int]:
    words = split_words(line[cpp:])
    try:
        index = words.index("c") + 1
    except ValueError:
        raise XpmError(f"colour line without 'c' key: {line!r}") from None
    if index >= len(words):
        raise XpmError(f"colour line without a value: {line!r}")
    end = words[index + 1] if index + 1 < len(words) else None
    return color_key(line[:cpp]), text_to_rgb(words[index], end)


def parse_xpm_lines(lines: Iterable[str]) -> XpmImage:
    """Decode an XPM given as its sequence of string values.

    The first string is the header, followed by the colour definitions and
    one string per pixel row. Raises XpmError on malformed data.
    """
    source = iter(lines)
    width, height, ncolors, cpp = _parse_header(_next_line(source, "header"))

    palette: dict[int, int] = {}
    # Short keys use a direct table where later entries override earlier
    # ones; longer keys use a search in which the first entry wins.
    later_wins = cpp <= 2
    for _ in range(ncolors):
        key, rgb = _parse_color(_next_line(source, "colour definition"), cpp)
        if later_wins or key not in palette:
            palette[key] = rgb

    rows = []
    for _ in range(height):
        line = _next_line(source, "pixel row")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row too short: {line!r}")
        row = []
        for x in range(width):
            color = palette.get(color_key(line[x * cpp:(x + 1) * cpp]), 0)
            row.append(TRANSPARENT if color == -1 else color & 0xFFFFFFFF)
        rows.append(tuple(row))
    return XpmImage(width, height, tuple(rows))


def parse_xpm_text(text: str) -> XpmImage:
    """Decode the text of an XPM file."""
    return parse_xpm_lines(extract_strings(strip_comments(text)))


def load_xpm(path: str | os.PathLike[str]) -> XpmImage:
    """Read and decode an XPM file."""
    with open(path, encoding="latin-1") as handle:
        return parse_xpm_text(handle.read())