"""Cursor movement within a text buffer."""

from __future__ import annotations

from typing import Optional

from cosmicnote.buffer import TextBuffer
from cosmicnote.position import CursorPosition


def _line_len(buffer: TextBuffer, line: int) -> int:
    return buffer.line_len(line) or 0


def _last_line(buffer: TextBuffer) -> int:
    return max(buffer.len_lines() - 1, 0)


def move_left(buffer: TextBuffer, pos: CursorPosition) -> CursorPosition:
    """One character left, wrapping to the end of the previous line."""
    if pos.column > 0:
        return CursorPosition(pos.line, pos.column - 1)
    if pos.line > 0:
        return CursorPosition(pos.line - 1, _line_len(buffer, pos.line - 1))
    return pos


def move_right(buffer: TextBuffer, pos: CursorPosition) -> CursorPosition:
    """One character right, wrapping to the start of the next line."""
    if pos.column < _line_len(buffer, pos.line):
        return CursorPosition(pos.line, pos.column + 1)
    if pos.line < _last_line(buffer):
        return CursorPosition(pos.line + 1, 0)
    return pos


def move_up(
    buffer: TextBuffer, pos: CursorPosition, preferred_col: Optional[int]
) -> tuple[CursorPosition, Optional[int]]:
    """One line up; returns the new position and the column to remember."""
    if pos.line == 0:
        return pos, preferred_col
    target = pos.column if preferred_col is None else preferred_col
    new_col = min(target, _line_len(buffer, pos.line - 1))
    return CursorPosition(pos.line - 1, new_col), target


def move_down(
    buffer: TextBuffer, pos: CursorPosition, preferred_col: Optional[int]
) -> tuple[CursorPosition, Optional[int]]:
    """One line down; returns the new position and the column to remember."""
    if pos.line >= _last_line(buffer):
        return pos, preferred_col
    target = pos.column if preferred_col is None else preferred_col
    new_col = min(target, _line_len(buffer, pos.line + 1))
    return CursorPosition(pos.line + 1, new_col), target


def move_home(buffer: TextBuffer, pos: CursorPosition) -> CursorPosition:
    """Smart home: toggle between the first non-blank character and column 0."""
    line = buffer.line_without_newline(pos.line) or ""
    first_non_ws = next((i for i, ch in enumerate(line) if not ch.isspace()), 0)
    if pos.column in (first_non_ws, 0):
        if pos.column == 0 and first_non_ws > 0:
            return CursorPosition(pos.line, first_non_ws)
        return CursorPosition(pos.line, 0)
    return CursorPosition(pos.line, first_non_ws)


def move_end(buffer: TextBuffer, pos: CursorPosition) -> CursorPosition:
    """To the end of the line."""
    return CursorPosition(pos.line, _line_len(buffer, pos.line))


def move_word_left(buffer: TextBuffer, pos: CursorPosition) -> CursorPosition:
    """To the start of the previous word."""
    idx = buffer.line_col_to_char(pos.line, pos.column)
    new_idx = buffer.prev_word_boundary(0 if idx is None else idx)
    return CursorPosition(*buffer.char_to_line_col(new_idx))


def move_word_right(buffer: TextBuffer, pos: CursorPosition) -> CursorPosition:
    """To the start of the next word."""
    idx = buffer.line_col_to_char(pos.line, pos.column)
    new_idx = buffer.next_word_boundary(buffer.len_chars() if idx is None else idx)
    return CursorPosition(*buffer.char_to_line_col(new_idx))


def move_page_up(
    buffer: TextBuffer,
    pos: CursorPosition,
    viewport_lines: int,
    preferred_col: Optional[int],
) -> tuple[CursorPosition, Optional[int]]:
    """Up by a viewport of lines."""
    target = pos.column if preferred_col is None else preferred_col
    new_line = max(pos.line - viewport_lines, 0)
    new_col = min(target, _line_len(buffer, new_line))
    return CursorPosition(new_line, new_col), target


def move_page_down(
    buffer: TextBuffer,
    pos: CursorPosition,
    viewport_lines: int,
    preferred_col: Optional[int],
) -> tuple[CursorPosition, Optional[int]]:
    """Down by a viewport of lines."""
    target = pos.column if preferred_col is None else preferred_col
    new_line = min(pos.line + viewport_lines, _last_line(buffer))
    new_col = min(target, _line_len(buffer, new_line))
    return CursorPosition(new_line, new_col), target


def move_document_start() -> CursorPosition:
    """The very first position."""
    return CursorPosition(0, 0)


def move_document_end(buffer: TextBuffer) -> CursorPosition:
    """The position after the last character."""
    last = _last_line(buffer)
    return CursorPosition(last, _line_len(buffer, last))


def go_to_line(buffer: TextBuffer, line_number: int) -> CursorPosition:
    """Start of a 1-based line number, clamped to the buffer."""
    line = max(line_number - 1, 0)
    return CursorPosition(min(line, _last_line(buffer)), 0)


def clamp(buffer: TextBuffer, pos: CursorPosition) -> CursorPosition:
    """The nearest valid position within the buffer."""
    line = min(pos.line, _last_line(buffer))
    return CursorPosition(line, min(pos.column, _line_len(buffer, line)))


def calculate_scroll(
    cursor_line: int, current_scroll: int, viewport_lines: int, scroll_margin: int
) -> int:
    """First visible line that keeps the cursor inside the scroll margin."""
    margin = min(scroll_margin, viewport_lines // 2)
    if cursor_line < current_scroll + margin:
        return max(cursor_line - margin, 0)
    viewport_bottom = current_scroll + viewport_lines
    if cursor_line >= max(viewport_bottom - margin, 0):
        return max(cursor_line - viewport_lines, 0) + margin + 1
    return current_scroll