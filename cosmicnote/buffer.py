"""Text buffer with line/column addressing, line-ending tracking and versioning."""

from __future__ import annotations

from bisect import bisect_right
from enum import Enum
from typing import Optional


class LineEnding(Enum):
    """Line ending style of a document."""

    LF = "\n"
    CRLF = "\r\n"

    def as_str(self) -> str:
        """The characters that end a line."""
        return self.value

    def display_name(self) -> str:
        """Short name for the status bar."""
        return self.name

    @classmethod
    def detect(cls, text: str) -> LineEnding:
        """CRLF if the text contains any CRLF sequence, otherwise LF."""
        return cls.CRLF if "\r\n" in text else cls.LF


def _is_word_char(ch: str) -> bool:
    return ch.isalnum()


class TextBuffer:
    """Editable text stored with LF line endings internally.

    The original line ending is remembered and restored by ``str()``.
    Positions are character offsets; lines are counted from 0.
    """

    def __init__(self, text: str = "") -> None:
        self._line_ending = LineEnding.detect(text)
        self._text = text.replace("\r\n", "\n")
        self._line_starts: Optional[list[int]] = None
        self._version = 0
        self._modified = False
        self._saved_version = 0

    # -- state ------------------------------------------------------------

    @property
    def text(self) -> str:
        """The contents with LF line endings."""
        return self._text

    @property
    def version(self) -> int:
        """Counter incremented on every change."""
        return self._version

    @property
    def line_ending(self) -> LineEnding:
        return self._line_ending

    @line_ending.setter
    def line_ending(self, ending: LineEnding) -> None:
        self._line_ending = ending
        self._version += 1
        self._modified = True

    def is_modified(self) -> bool:
        """Whether the buffer changed since it was last saved."""
        return self._modified or self._version != self._saved_version

    def mark_saved(self) -> None:
        self._modified = False
        self._saved_version = self._version

    def _changed(self, text: str) -> None:
        self._text = text
        self._line_starts = None
        self._version += 1

    def _starts(self) -> list[int]:
        if self._line_starts is None:
            starts = [0]
            pos = self._text.find("\n")
            while pos != -1:
                starts.append(pos + 1)
                pos = self._text.find("\n", pos + 1)
            self._line_starts = starts
        return self._line_starts

    def _clamp(self, idx: int) -> int:
        return max(0, min(idx, len(self._text)))

    # -- sizes ------------------------------------------------------------

    def len_chars(self) -> int:
        return len(self._text)

    def len_bytes(self) -> int:
        return len(self._text.encode("utf-8"))

    def len_lines(self) -> int:
        """Number of lines; an empty buffer has one line."""
        return len(self._starts())

    def is_empty(self) -> bool:
        return not self._text

    # -- lines ------------------------------------------------------------

    def line(self, line_idx: int) -> Optional[str]:
        """The line including its trailing newline, or None if out of range."""
        starts = self._starts()
        if not 0 <= line_idx < len(starts):
            return None
        end = starts[line_idx + 1] if line_idx + 1 < len(starts) else len(self._text)
        return self._text[starts[line_idx]:end]

    def line_without_newline(self, line_idx: int) -> Optional[str]:
        line = self.line(line_idx)
        if line is None:
            return None
        return line.rstrip("\n").rstrip("\r")

    def line_len(self, line_idx: int) -> Optional[int]:
        """Length of a line in characters, excluding the newline."""
        line = self.line_without_newline(line_idx)
        return None if line is None else len(line)

    def line_col_to_char(self, line: int, col: int) -> Optional[int]:
        """Character offset of (line, col); the column is clamped to the line."""
        starts = self._starts()
        if not 0 <= line < len(starts):
            return None
        line_len = self.line_len(line) or 0
        return starts[line] + min(max(col, 0), line_len)

    def char_to_line_col(self, char_idx: int) -> tuple[int, int]:
        """(line, column) of a character offset, clamped to the buffer."""
        idx = self._clamp(char_idx)
        starts = self._starts()
        line = bisect_right(starts, idx) - 1
        return line, idx - starts[line]

    # -- editing ----------------------------------------------------------

    def insert(self, char_idx: int, text: str) -> None:
        idx = self._clamp(char_idx)
        self._changed(self._text[:idx] + text + self._text[idx:])
        self._modified = True

    def insert_at(self, line: int, col: int, text: str) -> None:
        """Insert at (line, col), or at the end when the line does not exist."""
        idx = self.line_col_to_char(line, col)
        self.insert(len(self._text) if idx is None else idx, text)

    def insert_char(self, char_idx: int, ch: str) -> None:
        self.insert(char_idx, ch)

    def delete(self, start: int, end: int) -> None:
        """Remove characters in [start, end); out-of-range bounds are clamped."""
        start = self._clamp(start)
        end = self._clamp(end)
        if start < end:
            self._changed(self._text[:start] + self._text[end:])
            self._modified = True

    def delete_by_line_col(
        self, start_line: int, start_col: int, end_line: int, end_col: int
    ) -> None:
        start = self.line_col_to_char(start_line, start_col)
        end = self.line_col_to_char(end_line, end_col)
        self.delete(0 if start is None else start, len(self._text) if end is None else end)

    def replace(self, start: int, end: int, text: str) -> None:
        self.delete(start, end)
        self.insert(start, text)

    def slice(self, start: int, end: int) -> str:
        start = self._clamp(start)
        end = self._clamp(end)
        return self._text[start:end] if start < end else ""

    def __str__(self) -> str:
        return self.to_string_with_ending(self._line_ending)

    def to_string_with_ending(self, ending: LineEnding) -> str:
        if ending is LineEnding.CRLF:
            return self._text.replace("\n", "\r\n")
        return self._text

    def set_content(self, text: str) -> None:
        """Replace the whole contents, detecting the line ending anew."""
        self._line_ending = LineEnding.detect(text)
        self._changed(text.replace("\r\n", "\n"))

    # -- characters and words ---------------------------------------------

    def char_at(self, char_idx: int) -> Optional[str]:
        if not 0 <= char_idx < len(self._text):
            return None
        return self._text[char_idx]

    def word_at(self, char_idx: int) -> Optional[tuple[int, int]]:
        """Bounds of the word (letters, digits, underscore) around an offset."""
        text = self._text
        if not 0 <= char_idx < len(text):
            return None

        def in_word(ch: str) -> bool:
            return ch.isalnum() or ch == "_"

        start = char_idx
        while start > 0 and in_word(text[start - 1]):
            start -= 1
        end = char_idx
        while end < len(text) and in_word(text[end]):
            end += 1
        return None if start == end else (start, end)

    def next_word_boundary(self, char_idx: int) -> int:
        text = self._text
        length = len(text)
        if char_idx >= length:
            return length
        idx = max(char_idx, 0)
        start_is_word = _is_word_char(text[idx])
        while idx < length and _is_word_char(text[idx]) == start_is_word:
            idx += 1
        while idx < length and text[idx].isspace() and text[idx] != "\n":
            idx += 1
        return idx

    def prev_word_boundary(self, char_idx: int) -> int:
        text = self._text
        idx = min(char_idx, len(text))
        if idx <= 0:
            return 0
        while idx > 0 and text[idx - 1].isspace() and text[idx - 1] != "\n":
            idx -= 1
        if idx == 0:
            return 0
        start_is_word = _is_word_char(text[idx - 1])
        while idx > 0 and _is_word_char(text[idx - 1]) == start_is_word:
            idx -= 1
        return idx

    def word_count(self) -> int:
        return len(self._text.split())