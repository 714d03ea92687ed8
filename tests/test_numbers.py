import pytest

from cubtools.numbers import atoi, itoa

INT_MIN = -2147483648
INT_MAX = 2147483647


@pytest.mark.parametrize("n", [0, 1, -1, 9, 10, -25, 255, 1100, INT_MAX, INT_MIN])
def test_round_trip(n):
    assert atoi(itoa(n)) == n


@pytest.mark.parametrize("n", range(-25, 1101))
def test_itoa_matches_str(n):
    assert itoa(n) == str(n)


def test_itoa_int_min():
    assert itoa(INT_MIN) == "-2147483648"


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi(" \t\n\v\f\r-42abc") == -42
    assert atoi("+17 18") == 17


def test_atoi_no_digits_gives_zero():
    assert atoi("") == 0
    assert atoi("abc") == 0
    assert atoi("-") == 0
    assert atoi("+-5") == 0


def test_atoi_single_sign_only():
    assert atoi("--5") == atoi("")


def test_atoi_ignores_trailing_newline():
    assert atoi("200\n") == 200


def test_atoi_wraps_past_int_range():
    assert atoi("2147483648") == INT_MIN
    assert atoi(itoa(INT_MAX)) + 0 == INT_MAX


def test_atoi_wrap_is_modular():
    big = 2**32 + 123
    assert atoi(str(big)) == atoi("123")


def test_atoi_rgb_component_round_trip():
    for value in range(256):
        assert itoa(atoi(str(value))) == str(value)