import pytest

from cubtools.xpm import (
    XpmError,
    XpmImage,
    color_key,
    extract_strings,
    load_xpm,
    parse_xpm_lines,
    parse_xpm_text,
    strip_comments,
    text_to_rgb,
)

SAMPLE = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"3 2 3 1 ",
"  c None",
". c #FF0000",
"X c blue",
/* pixels */
". X",
"X. ",
};
"""


def test_text_to_rgb_hex():
    assert text_to_rgb("#FF0000", None) == 0xFF0000


def test_text_to_rgb_hex_lowercase():
    assert text_to_rgb("#00ff00", "ignored") == 0xFF00


def test_text_to_rgb_two_word_name():
    assert text_to_rgb("light", "blue") == 0xADD8E6


def test_text_to_rgb_name_ignores_case():
    assert text_to_rgb("Snow", None) == 0xFFFAFA


def test_text_to_rgb_none_is_minus_one():
    assert text_to_rgb("None", None) == -1


def test_text_to_rgb_unknown_is_zero():
    assert text_to_rgb("nosuchcolour", None) == 0


def test_color_key_single_char():
    assert color_key("a") == ord("a")


def test_color_key_order_matters():
    assert color_key("ab") != color_key("ba")


def test_strip_comments_preserves_length():
    text = 'a /* one */ "b" // two\n"c"'
    assert len(strip_comments(text)) == len(text)


def test_strip_comments_removes_comments():
    text = 'x /* gone */ y // gone too\nz'
    stripped = strip_comments(text)
    assert "gone" not in stripped
    assert stripped.split() == ["x", "y", "z"]


def test_strip_comments_keeps_quoted_text():
    text = '"/* kept */" /* gone */'
    assert list(extract_strings(strip_comments(text))) == ["/* kept */"]


def test_extract_strings():
    assert list(extract_strings('{"a b", "c",\n"d"}')) == ["a b", "c", "d"]


def test_extract_strings_unterminated():
    assert list(extract_strings('"a" "b')) == ["a"]


def test_parse_lines_two_by_two():
    image = parse_xpm_lines(["2 2 2 1", ". c #000000", "# c #FFFFFF", ".#", "#."])
    assert image == XpmImage(2, 2, ((0, 0xFFFFFF), (0xFFFFFF, 0)))


def test_parse_lines_none_is_transparent():
    image = parse_xpm_lines(["1 1 1 1", "x c None", "x"])
    assert image.rows == ((0xFF000000,),)


def test_parse_lines_short_keys_last_definition_wins():
    image = parse_xpm_lines(["1 1 2 1", "a c #000001", "a c #000002", "a"])
    assert image.rows == ((0x000002,),)


def test_parse_lines_long_keys_first_definition_wins():
    image = parse_xpm_lines(["1 1 2 3", "abc c #000001", "abc c #000002", "abc"])
    assert image.rows == ((0x000001,),)


def test_parse_lines_unknown_key_is_zero():
    image = parse_xpm_lines(["1 1 1 1", "a c #0000FF", "b"])
    assert image.rows == ((0,),)


def test_parse_lines_dimensions_match_rows():
    image = parse_xpm_lines(["3 2 1 2", "ab c red", "ababab", "ababab"])
    assert (image.width, image.height) == (3, 2)
    assert len(image.rows) == image.height
    assert all(len(row) == image.width for row in image.rows)
    assert image.rows[0][0] == 0xFF0000


@pytest.mark.parametrize(
    "lines",
    [
        [],
        ["0 1 1 1", "a c red", "a"],
        ["1 1 1"],
        ["1 1 1 1", "a s red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 1 1 1", "a c red"],
        ["2 1 1 1", "a c red", "a"],
    ],
)
def test_parse_lines_errors(lines):
    with pytest.raises(XpmError):
        parse_xpm_lines(lines)


def test_parse_text_sample():
    image = parse_xpm_text(SAMPLE)
    assert image.width == 3 and image.height == 2
    assert image.rows == (
        (0xFF0000, 0xFF000000, 0xFF),
        (0xFF, 0xFF0000, 0xFF000000),
    )


def test_load_xpm(tmp_path):
    path = tmp_path / "sample.xpm"
    path.write_text(SAMPLE, encoding="latin-1")
    assert load_xpm(path) == parse_xpm_text(SAMPLE)


def test_load_xpm_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_xpm(tmp_path / "absent.xpm")