import io

import pytest

from cubkit.lines import LineReader, read_lines

SAMPLE = "NO ./north.xpm\nSO ./south.xpm\n\n111\n101\n111"


@pytest.mark.parametrize("size", [1, 2, 3, 5, 42, 1000])
def test_lines_join_back_to_input(size):
    lines = read_lines(io.StringIO(SAMPLE), size)
    assert "".join(lines) == SAMPLE
    assert lines == SAMPLE.splitlines(keepends=True)


def test_every_line_but_last_ends_with_newline():
    lines = read_lines(io.StringIO(SAMPLE), 4)
    assert all(line.endswith("\n") for line in lines[:-1])
    assert lines[-1] == "111"


def test_readline_returns_none_at_end():
    reader = LineReader(io.StringIO("only\n"), 3)
    assert reader.readline() == "only\n"
    assert reader.readline() is None
    assert reader.readline() is None


def test_empty_stream_gives_nothing():
    assert read_lines(io.StringIO(""), 8) == []
    assert LineReader(io.StringIO(""), 8).readline() is None


def test_blank_lines_are_kept():
    assert read_lines(io.StringIO("\n\n"), 1) == ["\n", "\n"]


def test_binary_stream():
    data = b"F 220,100,0\nC 225,30,0\n"
    lines = read_lines(io.BytesIO(data), 7)
    assert b"".join(lines) == data
    assert len(lines) == 2


def test_iteration_matches_read_lines():
    reader = LineReader(io.StringIO(SAMPLE), 6)
    assert list(reader) == read_lines(io.StringIO(SAMPLE), 6)


@pytest.mark.parametrize("size", [0, -1])
def test_non_positive_buffer_rejected(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO(SAMPLE), size)