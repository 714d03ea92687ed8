"""Map measurements and validation of colour settings in a scene file."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from cubtools.editing import strtrim
from cubtools.numbers import atoi, itoa
from cubtools.search import strlen, strncmp

UNSET_COLOR = -1


class ConfigError(ValueError):
    """Raised when a scene setting is invalid."""


@dataclass(frozen=True)
class MapDimensions:
    """Size of a map grid: the longest row and the number of rows."""

    width: int
    height: int


def map_dimensions(rows: Iterable[str]) -> MapDimensions:
    """Measure a map given as its rows of text."""
    height = 0
    width = 0
    for row in rows:
        height += 1
        width = max(width, strlen(row))
    return MapDimensions(width, height)


def check_color(color: int) -> None:
    """Ensure a colour slot has not been set yet.

    A slot still holding -1 is accepted; any other value raises ConfigError.
    """
    if color != UNSET_COLOR:
        raise ConfigError("Texture path is not valid.")


def check_component(text: str) -> int:
    """Validate one decimal colour component and return its value.

    The text, with surrounding newlines removed, must read back exactly as
    the number it parses to; otherwise ConfigError is raised.
    """
    value = atoi(text)
    if strncmp(strtrim(text, "\n"), itoa(value), strlen(text)) != 0:
        raise ConfigError(f"Not RGB. (Color = {text})")
    return value


def check_rgb(red: str, green: str, blue: str) -> tuple[int, int, int]:
    """Validate the three colour components and return their values."""
    return check_component(red), check_component(green), check_component(blue)