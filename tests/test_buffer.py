import pytest

from cosmicnote.buffer import LineEnding, TextBuffer


def test_empty_buffer():
    buf = TextBuffer()
    assert buf.is_empty()
    assert buf.len_chars() == 0
    assert buf.len_lines() == 1


def test_from_str():
    buf = TextBuffer("Hello\nWorld")
    assert buf.len_lines() == 2
    assert buf.line(0) == "Hello\n"
    assert buf.line(1) == "World"
    assert buf.line(2) is None


def test_line_ending_detection():
    assert TextBuffer("Hello\nWorld").line_ending is LineEnding.LF
    assert TextBuffer("Hello\r\nWorld").line_ending is LineEnding.CRLF


def test_line_ending_strings():
    assert LineEnding.LF.as_str() == "\n"
    assert LineEnding.CRLF.as_str() == "\r\n"
    assert LineEnding.LF.display_name() == "LF"
    assert LineEnding.CRLF.display_name() == "CRLF"


def test_insert():
    buf = TextBuffer("Hello World")
    buf.insert(5, ",")
    assert str(buf) == "Hello, World"


def test_delete():
    buf = TextBuffer("Hello, World")
    buf.delete(5, 7)
    assert str(buf) == "Hello World"


def test_line_col_conversion():
    buf = TextBuffer("Line 1\nLine 2\nLine 3")
    assert buf.line_col_to_char(0, 0) == 0
    assert buf.line_col_to_char(1, 0) == 7
    assert buf.line_col_to_char(1, 4) == 11
    assert buf.char_to_line_col(0) == (0, 0)
    assert buf.char_to_line_col(7) == (1, 0)
    assert buf.char_to_line_col(11) == (1, 4)


def test_line_col_clamping():
    buf = TextBuffer("ab\ncd")
    assert buf.line_col_to_char(0, 99) == 2
    assert buf.line_col_to_char(5, 0) is None
    assert buf.char_to_line_col(100) == (1, 2)


def test_word_boundaries():
    buf = TextBuffer("Hello world  test")
    assert buf.next_word_boundary(0) == 6
    assert buf.next_word_boundary(6) == 13
    assert buf.prev_word_boundary(17) == 13
    assert buf.prev_word_boundary(6) == 0


def test_word_boundaries_at_edges():
    buf = TextBuffer("abc")
    assert buf.next_word_boundary(3) == 3
    assert buf.prev_word_boundary(0) == 0


def test_word_at():
    buf = TextBuffer("Hello world")
    assert buf.word_at(2) == (0, 5)
    assert buf.word_at(7) == (6, 11)
    assert buf.word_at(5) is None
    assert buf.word_at(50) is None


def test_word_at_includes_underscore():
    buf = TextBuffer("foo_bar baz")
    assert buf.word_at(1) == (0, 7)


def test_word_count():
    assert TextBuffer("Hello world, this is a test.").word_count() == 6


def test_version_increments():
    buf = TextBuffer()
    assert buf.version == 0
    buf.insert(0, "test")
    assert buf.version == 1
    buf.delete(0, 2)
    assert buf.version == 2


def test_empty_delete_keeps_version():
    buf = TextBuffer("abc")
    buf.delete(2, 2)
    assert buf.version == 0
    assert not buf.is_modified()


def test_modified_and_saved():
    buf = TextBuffer("abc")
    assert not buf.is_modified()
    buf.insert(3, "d")
    assert buf.is_modified()
    buf.mark_saved()
    assert not buf.is_modified()


def test_crlf_round_trip():
    buf = TextBuffer("a\r\nb\r\nc")
    assert buf.text == "a\nb\nc"
    assert str(buf) == "a\r\nb\r\nc"
    assert buf.to_string_with_ending(LineEnding.LF) == "a\nb\nc"


def test_set_line_ending_marks_modified():
    buf = TextBuffer("a\nb")
    buf.line_ending = LineEnding.CRLF
    assert buf.is_modified()
    assert str(buf) == "a\r\nb"


def test_line_without_newline_and_len():
    buf = TextBuffer("first\nsecond")
    assert buf.line_without_newline(0) == "first"
    assert buf.line_len(0) == 5
    assert buf.line_len(1) == 6
    assert buf.line_len(2) is None


def test_insert_at_and_invalid_line():
    buf = TextBuffer("ab\ncd")
    buf.insert_at(1, 1, "X")
    assert buf.text == "ab\ncXd"
    buf.insert_at(9, 0, "!")
    assert buf.text == "ab\ncXd!"


def test_insert_char_clamps_position():
    buf = TextBuffer("ab")
    buf.insert_char(100, "c")
    assert buf.text == "abc"


def test_delete_by_line_col():
    buf = TextBuffer("one\ntwo\nthree")
    buf.delete_by_line_col(0, 1, 2, 2)
    assert buf.text == "oree"


def test_replace():
    buf = TextBuffer("Hello World")
    buf.replace(6, 11, "There")
    assert buf.text == "Hello There"


def test_slice():
    buf = TextBuffer("Hello World")
    assert buf.slice(0, 5) == "Hello"
    assert buf.slice(6, 100) == "World"
    assert buf.slice(5, 3) == ""


def test_set_content():
    buf = TextBuffer("x")
    buf.set_content("a\r\nb")
    assert buf.line_ending is LineEnding.CRLF
    assert buf.text == "a\nb"
    assert buf.len_lines() == 2
    assert buf.version == 1


def test_char_at():
    buf = TextBuffer("abc")
    assert buf.char_at(1) == "b"
    assert buf.char_at(3) is None


def test_len_bytes_counts_utf8():
    buf = TextBuffer("héllo")
    assert buf.len_chars() == 5
    assert buf.len_bytes() == 6


@pytest.mark.parametrize("text", ["", "a", "a\n", "a\nb\n\nc"])
def test_char_to_line_col_inverts_line_col_to_char(text):
    buf = TextBuffer(text)
    for idx in range(buf.len_chars() + 1):
        line, col = buf.char_to_line_col(idx)
        assert buf.line_col_to_char(line, col) == idx