import io

import pytest

from pushswap.output import put_char, put_endl, put_nbr, put_str


def test_put_char_writes_one_character():
    stream = io.StringIO()
    put_char("x", stream)
    put_char("y", stream)
    assert stream.getvalue() == "xy"


def test_put_char_rejects_longer_text():
    with pytest.raises(ValueError):
        put_char("xy", io.StringIO())


def test_put_str_writes_text():
    stream = io.StringIO()
    put_str("hello", stream)
    assert stream.getvalue() == "hello"


def test_put_str_none_writes_nothing():
    stream = io.StringIO()
    put_str(None, stream)
    assert stream.getvalue() == ""


def test_put_endl_appends_newline():
    stream = io.StringIO()
    put_endl("Error", stream)
    assert stream.getvalue() == "Error\n"


def test_put_endl_none_writes_nothing():
    stream = io.StringIO()
    put_endl(None, stream)
    assert stream.getvalue() == ""


def test_put_endl_defaults_to_stdout(capsys):
    put_endl("pa")
    assert capsys.readouterr().out == "pa\n"


def test_put_nbr_int_min():
    stream = io.StringIO()
    put_nbr(-2147483648, stream)
    assert stream.getvalue() == "-2147483648"


@pytest.mark.parametrize("number", [0, 7, 42, -5, 2147483647, -123456])
def test_put_nbr_round_trip(number):
    stream = io.StringIO()
    put_nbr(number, stream)
    assert int(stream.getvalue()) == number


def test_put_nbr_negative_has_single_sign():
    stream = io.StringIO()
    put_nbr(-9, stream)
    assert stream.getvalue().count("-") == 1
    assert stream.getvalue().startswith("-")