import io

import pytest

from ftkit.lines import LineReader, read_lines

TEXT = "first line\nsecond\n\nlast without newline"


@pytest.mark.parametrize("size", [1, 2, 3, 7, 42, 10000])
def test_lines_rejoin_to_text(size):
    lines = list(LineReader(io.StringIO(TEXT), size))
    assert "".join(lines) == TEXT
    assert lines == TEXT.splitlines(keepends=True)


@pytest.mark.parametrize("size", [1, 4, 100])
def test_each_line_holds_at_most_one_newline(size):
    lines = list(LineReader(io.StringIO(TEXT), size))
    for line in lines[:-1]:
        assert line.endswith("\n")
        assert line.count("\n") == 1
    assert "\n" not in lines[-1]


def test_read_line_returns_none_at_end():
    reader = LineReader(io.StringIO("a\nb"), 3)
    assert reader.read_line() == "a\n"
    assert reader.read_line() == "b"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_empty_stream():
    assert LineReader(io.StringIO("")).read_line() is None
    assert list(read_lines(io.StringIO(""))) == []


def test_trailing_newline_gives_no_empty_line():
    assert list(read_lines(io.StringIO("x\n"))) == ["x\n"]


def test_blank_lines_are_kept():
    assert list(read_lines(io.StringIO("\n\n"))) == ["\n", "\n"]


@pytest.mark.parametrize("size", [1, 5, 64])
def test_binary_stream(size):
    data = TEXT.encode()
    lines = list(LineReader(io.BytesIO(data), size))
    assert b"".join(lines) == data
    assert lines == data.splitlines(keepends=True)
    assert all(isinstance(line, bytes) for line in lines)


def test_read_lines_matches_reader():
    assert list(read_lines(io.StringIO(TEXT))) == list(LineReader(io.StringIO(TEXT), 8))


def test_data_appended_after_end_is_read():
    stream = io.StringIO()
    reader = LineReader(stream, 4)
    assert reader.read_line() is None
    stream.write("more\n")
    stream.seek(0)
    assert reader.read_line() == "more\n"


@pytest.mark.parametrize("size", [0, -1])
def test_bad_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("a"), size)


def test_read_error_propagates():
    class Broken(io.StringIO):
        def read(self, size=-1):
            raise OSError("read failed")

    with pytest.raises(OSError):
        LineReader(Broken()).read_line()