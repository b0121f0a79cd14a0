import pytest

from kpltools.reader import CharReader, open_reader


def _drain(reader):
    chars = []
    while reader.current_char is not None:
        chars.append(reader.current_char)
        reader.read_char()
    return chars


def test_first_character_is_read_on_construction():
    reader = CharReader("xyz")
    assert reader.current_char == "x"
    assert reader.line_no == 1
    assert reader.col_no == 1


def test_round_trip_of_text():
    text = "PROGRAM p;\n  BEGIN\n END."
    reader = CharReader(text)
    assert "".join(_drain(reader)) == text


def test_read_char_returns_current_char():
    reader = CharReader("ab")
    returned = reader.read_char()
    assert returned == reader.current_char == "b"


def test_columns_advance_within_a_line():
    reader = CharReader("abcd")
    columns = [reader.col_no]
    for _ in range(3):
        reader.read_char()
        columns.append(reader.col_no)
    assert columns == list(range(1, 5))


def test_newline_moves_to_next_line_and_resets_column():
    reader = CharReader("a\nb")
    reader.read_char()
    assert reader.current_char == "\n"
    assert reader.line_no == 2
    assert reader.col_no == 0
    reader.read_char()
    assert reader.current_char == "b"
    assert (reader.line_no, reader.col_no) == (2, 1)


def test_line_count_matches_newlines():
    text = "one\ntwo\n\nthree\n"
    reader = CharReader(text)
    _drain(reader)
    assert reader.line_no == text.count("\n") + 1


def test_empty_text_is_immediately_exhausted():
    reader = CharReader("")
    assert reader.current_char is None
    assert reader.read_char() is None


def test_end_of_input_stays_none():
    reader = CharReader("q")
    assert reader.read_char() is None
    assert reader.read_char() is None
    assert reader.line_no == 1


def test_open_reader_reads_file(tmp_path):
    path = tmp_path / "prog.kpl"
    text = "VAR x : INTEGER;\r\nBEGIN END."
    path.write_bytes(text.encode("latin-1"))
    reader = open_reader(path)
    assert "".join(_drain(reader)) == text


def test_open_reader_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        open_reader(tmp_path / "missing.kpl")