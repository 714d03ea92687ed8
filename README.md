# cubtools

Helpers for raycasting maze games that use `.cub` scene files and XPM textures.

- `cubtools.xpm` decodes XPM pixmaps into rows of 32-bit pixel values.
- `cubtools.colors` looks up X11 colour names.
- `cubtools.mapinfo` measures map grids and validates colour components.
- `cubtools.charclass`, `cubtools.numbers`, `cubtools.search`, `cubtools.editing`, `cubtools.memory` and `cubtools.output` are C-style string, byte and output helpers. They keep the C edge cases, and a `"\0"` in a string argument ends the string at that point.

The package depends only on the standard library.

## Installation

```
pip install cubtools
```

To install the test dependencies as well:

```
pip install "cubtools[test]"
```

## Decoding XPM textures

```python
from cubtools.xpm import load_xpm, XpmError

try:
    image = load_xpm("textures/north.xpm")
except XpmError as exc:
    print("bad texture:", exc)
else:
    print(image.width, image.height)
    first_pixel = image.rows[0][0]
```

There are three entry points:

- `load_xpm(path)` reads a file from disk.
- `parse_xpm_text(text)` takes the contents of a file as a string. It blanks out comments with `strip_comments` and collects the quoted strings with `extract_strings`.
- `parse_xpm_lines(lines)` takes the quoted strings directly: the header first, then the colour definitions, then one string per pixel row.

`XpmImage` is a frozen dataclass with `width`, `height` and `rows`. The value `rows[y][x]` is a 32-bit integer.

How colours come out:

- A colour given as `#hex` is read as hexadecimal.
- Named colours are resolved with `text_to_rgb`. An unknown name gives 0.
- The name `None` marks a transparent pixel, which is stored as `0xFF000000`.

`XpmError`, a subclass of `ValueError`, is raised in these cases:

- the header is malformed or holds a zero value;
- a colour line has no `c` key;
- the data runs out;
- a pixel row is too short.

## Colour names

```python
from cubtools.colors import color_by_name

color_by_name("Navy Blue")   # 0x000080, ASCII case is ignored
color_by_name("gray50")      # 0x7F7F7F
color_by_name("none")        # -1
```

An unknown name raises `KeyError`.

## Checking a scene

```python
from cubtools.mapinfo import map_dimensions, check_rgb, check_color, ConfigError

dims = map_dimensions(["1111", "10N1", "111111"])
print(dims.width, dims.height)   # 6 3

ceiling = check_rgb("220", "100", "0\n")   # (220, 100, 0)
```

`check_component` and `check_rgb` accept a component only if, once newlines are trimmed from its ends, it reads back exactly as the integer it parses to. Otherwise they raise `ConfigError`, for example with `"12a"` or `"+5"`.

`check_color(color)` accepts only `-1`, meaning the colour has not been set yet. Any other value raises `ConfigError`.

## What is not included

`cubtools` does not read or validate a whole `.cub` file. It opens no window and does not raycast, render or handle input. It supplies only the pieces listed above, for use by a game that does those things.

## Running the tests

```
pytest
```