import pytest

from cubtools.textscan import find, find_unquoted, split_words


def test_find_returns_first_offset():
    assert find("abcabc", "bc", 10) == 1


def test_find_missing_needle():
    assert find("abcdef", "xy", 10) == -1


def test_find_needle_longer_than_limit():
    assert find("abcdef", "abc", 2) == -1


def test_find_limit_equal_to_needle_length_allowed():
    assert find("xxabc", "abc", 3) == 2


def test_find_unquoted_skips_quoted_text():
    text = '"/* inside */" /* outside */'
    assert find_unquoted(text, "/*", len(text)) == text.index("/* outside")


def test_find_unquoted_without_quotes_matches_find():
    text = "one // two // three"
    assert find_unquoted(text, "//", len(text)) == find(text, "//", len(text))


def test_find_unquoted_only_quoted_matches():
    text = '"//"'
    assert find_unquoted(text, "//", len(text)) == -1


def test_find_unquoted_limit():
    assert find_unquoted("ab/*", "/*", 1) == -1


@pytest.mark.parametrize(
    "text, words",
    [
        ("16 16 2 1", ["16", "16", "2", "1"]),
        ("  a\t\tb  ", ["a", "b"]),
        ("", []),
        (" \t ", []),
        ("a\nb c", ["a\nb", "c"]),
    ],
)
def test_split_words(text, words):
    assert split_words(text) == words


def test_split_words_rejoin_round_trip():
    words = ["c", "#FF00FF", "s", "none"]
    assert split_words("\t".join(words)) == words