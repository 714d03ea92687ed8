import pytest

from cubtools.search import strchr, strlen, strncmp, strnstr, strrchr


@pytest.mark.parametrize("text", ["", "a", "hello", "NO ./textures/north.xpm"])
def test_strlen_plain(text):
    assert strlen(text) == len(text)


def test_strlen_stops_at_terminator():
    assert strlen("abc\0def") == strlen("abc")


@pytest.mark.parametrize("char", list("helo"))
def test_strchr_and_strrchr_match_index(char):
    text = "hello world"
    assert strchr(text, char) == text.index(char)
    assert strrchr(text, char) == text.rindex(char)


def test_strchr_missing():
    assert strchr("hello", "z") is None
    assert strrchr("hello", "z") is None


def test_terminator_search_gives_length():
    assert strchr("hello", "\0") == len("hello")
    assert strrchr("hello", 0) == len("hello")


def test_strchr_accepts_code():
    assert strchr("map", ord("p")) == "map".index("p")


def test_search_ignores_text_after_terminator():
    assert strchr("ab\0c", "c") is None
    assert strrchr("aba\0a", "a") == "aba".rindex("a")


def test_strnstr_empty_needle():
    assert strnstr("abc", "", 0) == 0


def test_strnstr_zero_length():
    assert strnstr("abc", "a", 0) is None


def test_strnstr_found_within_length():
    text = "abcdef"
    assert strnstr(text, "cd", len(text)) == text.find("cd")
    assert strnstr(text, "cd", 4) == text.find("cd")


def test_strnstr_must_fit_within_length():
    assert strnstr("abcdef", "cd", 3) is None


def test_strnstr_missing_and_negative():
    assert strnstr("abcdef", "xy", 6) is None
    assert strnstr("abcdef", "a", -1) is None


def test_strncmp_equal():
    assert strncmp("abc", "abc", 10) == 0
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("x", "y", 0) == 0


def test_strncmp_difference_of_codes():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")
    assert strncmp("a", "", 1) == ord("a")
    assert strncmp("", "a", 1) == -ord("a")


def test_strncmp_antisymmetric():
    pairs = [("abc", "abd"), ("hello", "help"), ("", "z"), ("255", "25")]
    for a, b in pairs:
        assert strncmp(a, b, 5) == -strncmp(b, a, 5)


def test_strncmp_prefix_shorter_string():
    assert strncmp("255", "25", 3) == ord("5")
    assert strncmp("255", "25", 2) == 0