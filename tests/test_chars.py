import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftprint.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("code", range(128))
def test_classification_matches_ascii_sets(code):
    ch = chr(code)
    assert is_alpha(ch) == (ch in string.ascii_letters)
    assert is_digit(ch) == (ch in string.digits)
    assert is_print(ch) == ch.isprintable()
    assert is_ascii(ch)


@given(st.integers(min_value=-1000, max_value=1000))
def test_alnum_is_alpha_or_digit(code):
    assert is_alnum(code) == (is_alpha(code) or is_digit(code))


@given(st.integers(min_value=-1000, max_value=1000))
def test_int_and_str_agree(code):
    if code >= 0:
        ch = chr(code)
        assert is_alpha(ch) == is_alpha(code)
        assert is_print(ch) == is_print(code)


def test_ascii_bounds():
    assert is_ascii(0)
    assert is_ascii(127)
    assert not is_ascii(128)
    assert not is_ascii(-1)


def test_non_ascii_letters_are_not_alpha():
    assert not is_alpha("é")
    assert not is_alnum("é")


@pytest.mark.parametrize("lower, upper", zip(string.ascii_lowercase, string.ascii_uppercase))
def test_case_conversion_letters(lower, upper):
    assert to_upper(lower) == upper
    assert to_lower(upper) == lower
    assert to_upper(ord(lower)) == ord(upper)
    assert to_lower(ord(upper)) == ord(lower)


@given(st.integers(min_value=-500, max_value=500))
def test_case_conversion_leaves_non_letters(code):
    if not is_alpha(code):
        assert to_upper(code) == code
        assert to_lower(code) == code


@given(st.sampled_from(string.ascii_letters))
def test_case_round_trip(ch):
    assert to_lower(to_upper(ch)) == ch.lower()
    assert to_upper(to_lower(ch)) == ch.upper()


def test_result_keeps_argument_type():
    assert isinstance(to_upper("q"), str)
    assert to_upper("q") == "Q"
    assert to_upper(ord("q")) == ord("Q")


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)