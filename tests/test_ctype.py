import string

import pytest

from sigtalk.ctype import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

CODES = range(-5, 300)


@pytest.mark.parametrize("code", CODES)
def test_is_alpha_matches_ascii_letters(code):
    expected = 0 <= code < 128 and chr(code) in string.ascii_letters
    assert is_alpha(code) == expected


@pytest.mark.parametrize("code", CODES)
def test_is_digit_matches_ascii_digits(code):
    expected = 0 <= code < 128 and chr(code) in string.digits
    assert is_digit(code) == expected


@pytest.mark.parametrize("code", CODES)
def test_is_alnum_is_union(code):
    assert is_alnum(code) == (is_alpha(code) or is_digit(code))


@pytest.mark.parametrize("code", CODES)
def test_is_ascii_range(code):
    assert is_ascii(code) == (0 <= code <= 127)


@pytest.mark.parametrize("code", CODES)
def test_is_print_range(code):
    assert is_print(code) == (32 <= code <= 126)


def test_space_printable_but_not_alnum():
    assert is_print(" ") is True
    assert is_alnum(" ") is False


def test_non_ascii_letter_is_not_alpha():
    assert is_alpha("é") is False
    assert is_print("é") is False


@pytest.mark.parametrize("ch", string.ascii_lowercase)
def test_to_upper_letters(ch):
    assert to_upper(ch) == ch.upper()
    assert to_upper(ord(ch)) == ord(ch.upper())


@pytest.mark.parametrize("ch", string.ascii_uppercase)
def test_to_lower_letters(ch):
    assert to_lower(ch) == ch.lower()
    assert to_lower(ord(ch)) == ord(ch.lower())


@pytest.mark.parametrize("code", CODES)
def test_case_conversion_leaves_non_letters(code):
    if not is_alpha(code):
        assert to_upper(code) == code
        assert to_lower(code) == code
    else:
        assert to_lower(to_upper(code)) == to_lower(code)


def test_non_ascii_letter_unchanged_by_case():
    assert to_upper("é") == "é"
    assert to_lower("É") == "É"


def test_multi_character_string_rejected():
    with pytest.raises(TypeError):
        is_alpha("ab")