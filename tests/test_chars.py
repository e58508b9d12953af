import string

import pytest

from ftshell.chars import (
    INT_MAX,
    INT_MIN,
    atoi,
    isalnum,
    isalpha,
    isascii,
    isdigit,
    isprint,
    itoa,
    tolower,
    toupper,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("   -42abc", -42),
        ("\t\n\v\f\r+17", 17),
        ("007", 7),
    ],
)
def test_atoi_parses_leading_number(text, expected):
    assert atoi(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "   ", "-", "+-5", "--5", "x12"])
def test_atoi_without_digits_is_zero(text):
    assert atoi(text) == 0


@pytest.mark.parametrize("number", [0, 1, -1, 123456, -98765, INT_MAX, INT_MIN])
def test_itoa_atoi_round_trip(number):
    assert atoi(itoa(number)) == number


def test_itoa_zero_and_bounds():
    assert itoa(0) == "0"
    assert itoa(INT_MIN) == "-2147483648"
    assert itoa(INT_MAX) == "2147483647"


@pytest.mark.parametrize("number", [INT_MAX + 1, INT_MIN - 1])
def test_itoa_out_of_range(number):
    with pytest.raises(OverflowError):
        itoa(number)


def test_atoi_wraps_past_int_max():
    assert atoi(str(INT_MAX + 1)) == INT_MIN


def test_isalpha_matches_ascii_letters():
    letters = set(string.ascii_letters)
    for value in range(256):
        assert isalpha(value) == (chr(value) in letters)


def test_isdigit_matches_ascii_digits():
    for value in range(256):
        assert isdigit(value) == (chr(value) in string.digits)


def test_isalnum_is_union_of_alpha_and_digit():
    for value in range(-5, 300):
        assert isalnum(value) == (isalpha(value) or isdigit(value))


def test_isascii_bounds():
    assert isascii(0) is True
    assert isascii(127) is True
    assert isascii(128) is False
    assert isascii(-1) is False


def test_isprint_bounds():
    assert isprint(" ") is True
    assert isprint("~") is True
    assert isprint(31) is False
    assert isprint(127) is False


def test_classifiers_accept_characters():
    assert isalpha("a") is True
    assert isdigit("a") is False
    assert isalnum("7") is True


def test_classifier_rejects_long_string():
    with pytest.raises(ValueError):
        isalpha("ab")


def test_case_mapping_on_letters():
    for lower, upper in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert toupper(lower) == upper
        assert tolower(upper) == lower
        assert toupper(ord(lower)) == ord(upper)
        assert tolower(ord(upper)) == ord(lower)


def test_case_mapping_leaves_other_values():
    for value in list(range(0, 65)) + list(range(91, 97)) + list(range(123, 300)):
        assert toupper(value) == value
        assert tolower(value) == value


def test_case_mapping_round_trip():
    for char in string.ascii_letters:
        assert tolower(toupper(char)) == char.lower()
        assert toupper(tolower(char)) == char.upper()