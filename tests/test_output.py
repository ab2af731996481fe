import io

import pytest

from ftkit.output import put_char, put_endl, put_nbr, put_str


def test_put_char_writes_one_character():
    out = io.StringIO()
    put_char("z", out)
    assert out.getvalue() == "z"


def test_put_char_rejects_longer_text():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str_writes_text():
    out = io.StringIO()
    put_str("hello", out)
    assert out.getvalue() == "hello"


def test_put_str_none_writes_nothing():
    out = io.StringIO()
    put_str(None, out)
    assert out.getvalue() == ""


def test_put_endl_appends_newline():
    out = io.StringIO()
    put_endl("line", out)
    assert out.getvalue() == "line" + "\n"


def test_put_endl_none_writes_nothing():
    out = io.StringIO()
    put_endl(None, out)
    assert out.getvalue() == ""


@pytest.mark.parametrize("n", [0, 7, 42, -5, 2147483647])
def test_put_nbr_round_trips(n):
    out = io.StringIO()
    put_nbr(n, out)
    assert int(out.getvalue()) == n


def test_put_nbr_int_min():
    out = io.StringIO()
    put_nbr(-2147483648, out)
    assert out.getvalue() == "-2147483648"


def test_put_nbr_out_of_range():
    with pytest.raises(OverflowError):
        put_nbr(2147483648, io.StringIO())


def test_default_stream_is_stdout(capsys):
    put_str("abc")
    put_nbr(-1)
    assert capsys.readouterr().out == "abc" + "-1"