import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftprint.output import put_char, put_endl, put_nbr, put_str


def test_put_char_string():
    out = io.StringIO()
    assert put_char("x", out) == 1
    assert out.getvalue() == "x"


def test_put_char_code():
    out = io.StringIO()
    put_char(ord("A"), out)
    assert out.getvalue() == "A"


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


@given(st.text(max_size=40))
def test_put_str_writes_text(text):
    out = io.StringIO()
    assert put_str(text, out) == len(text)
    assert out.getvalue() == text


def test_put_str_none_writes_nothing():
    out = io.StringIO()
    assert put_str(None, out) == 0
    assert out.getvalue() == ""


@given(st.text(max_size=40))
def test_put_endl_appends_newline(text):
    out = io.StringIO()
    assert put_endl(text, out) == len(text) + 1
    assert out.getvalue() == text + "\n"


def test_put_endl_none_writes_newline_only():
    out = io.StringIO()
    put_endl(None, out)
    assert out.getvalue() == "\n"


@given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_put_nbr_round_trip(n):
    out = io.StringIO()
    count = put_nbr(n, out)
    assert int(out.getvalue()) == n
    assert count == len(out.getvalue())


def test_put_nbr_int_min():
    out = io.StringIO()
    put_nbr(-2147483648, out)
    assert out.getvalue() == "-2147483648"


def test_default_stream_is_stdout(capsys):
    put_str("shown", None)
    assert capsys.readouterr().out == "shown"