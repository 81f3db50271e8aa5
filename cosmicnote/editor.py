"""Editor component: a text buffer with cursor, selection and scrolling."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from cosmicnote import cursor as moves
from cosmicnote.buffer import TextBuffer
from cosmicnote.position import CursorPosition, Selection

DEFAULT_VIEWPORT_LINES = 30
DEFAULT_SCROLL_MARGIN = 3


@dataclass
class EditorState:
    """Cursor and selection of an editor."""

    cursor: CursorPosition = field(default_factory=CursorPosition)
    selection: Selection = field(
        default_factory=lambda: Selection.collapsed(CursorPosition())
    )


class Editor:
    """Editing operations on a text buffer, tracking cursor, selection and scroll."""

    def __init__(self, content: str = "") -> None:
        self.buffer = TextBuffer(content)
        self.state = EditorState()
        self._preferred_col: Optional[int] = None
        self._viewport_lines = DEFAULT_VIEWPORT_LINES
        self._scroll_line = 0
        self._scroll_margin = DEFAULT_SCROLL_MARGIN

    # -- state ------------------------------------------------------------

    @property
    def cursor(self) -> CursorPosition:
        return self.state.cursor

    @property
    def scroll_line(self) -> int:
        """First visible line."""
        return self._scroll_line

    def set_cursor(self, pos: CursorPosition) -> None:
        """Place the cursor, clamped to the buffer, and collapse the selection."""
        clamped = moves.clamp(self.buffer, pos)
        self.state.cursor = clamped
        self.state.selection = Selection.collapsed(clamped)
        self._update_scroll()
        self._preferred_col = None

    def selection(self) -> Optional[Selection]:
        """The current selection, or None when it is collapsed."""
        if self.state.selection.is_collapsed():
            return None
        return self.state.selection

    def has_selection(self) -> bool:
        return not self.state.selection.is_collapsed()

    def set_selection(self, selection: Selection) -> None:
        self.state.selection = selection

    def set_viewport_lines(self, lines: int) -> None:
        self._viewport_lines = lines
        self._update_scroll()

    def _update_scroll(self) -> None:
        self._scroll_line = moves.calculate_scroll(
            self.state.cursor.line,
            self._scroll_line,
            self._viewport_lines,
            self._scroll_margin,
        )

    def is_modified(self) -> bool:
        return self.buffer.is_modified()

    def mark_saved(self) -> None:
        self.buffer.mark_saved()

    def content(self) -> str:
        """The whole text, with the original line endings."""
        return str(self.buffer)

    def set_content(self, content: str) -> None:
        """Replace everything and reset cursor, selection and scroll."""
        self.buffer = TextBuffer(content)
        self.state = EditorState()
        self._preferred_col = None
        self._scroll_line = 0

    # -- movement ---------------------------------------------------------

    def _move(
        self,
        extend_selection: bool,
        step: Callable[[CursorPosition], CursorPosition],
    ) -> None:
        self._begin_selection(extend_selection)
        self.state.cursor = step(self.state.cursor)
        self._preferred_col = None
        self._end_selection(extend_selection)
        self._update_scroll()

    def _move_vertical(
        self,
        extend_selection: bool,
        step: Callable[
            [CursorPosition, Optional[int]], tuple[CursorPosition, Optional[int]]
        ],
    ) -> None:
        self._begin_selection(extend_selection)
        self.state.cursor, self._preferred_col = step(
            self.state.cursor, self._preferred_col
        )
        self._end_selection(extend_selection)
        self._update_scroll()

    def move_left(self, extend_selection: bool) -> None:
        self._move(extend_selection, lambda p: moves.move_left(self.buffer, p))

    def move_right(self, extend_selection: bool) -> None:
        self._move(extend_selection, lambda p: moves.move_right(self.buffer, p))

    def move_up(self, extend_selection: bool) -> None:
        self._move_vertical(
            extend_selection, lambda p, c: moves.move_up(self.buffer, p, c)
        )

    def move_down(self, extend_selection: bool) -> None:
        self._move_vertical(
            extend_selection, lambda p, c: moves.move_down(self.buffer, p, c)
        )

    def move_home(self, extend_selection: bool) -> None:
        """Smart home: first non-blank character, then column 0."""
        self._move(extend_selection, lambda p: moves.move_home(self.buffer, p))

    def move_end(self, extend_selection: bool) -> None:
        self._move(extend_selection, lambda p: moves.move_end(self.buffer, p))

    def move_word_left(self, extend_selection: bool) -> None:
        self._move(extend_selection, lambda p: moves.move_word_left(self.buffer, p))

    def move_word_right(self, extend_selection: bool) -> None:
        self._move(extend_selection, lambda p: moves.move_word_right(self.buffer, p))

    def page_up(self, extend_selection: bool) -> None:
        self._move_vertical(
            extend_selection,
            lambda p, c: moves.move_page_up(self.buffer, p, self._viewport_lines, c),
        )

    def page_down(self, extend_selection: bool) -> None:
        self._move_vertical(
            extend_selection,
            lambda p, c: moves.move_page_down(self.buffer, p, self._viewport_lines, c),
        )

    def move_document_start(self, extend_selection: bool) -> None:
        self._move(extend_selection, lambda p: moves.move_document_start())

    def move_document_end(self, extend_selection: bool) -> None:
        self._move(extend_selection, lambda p: moves.move_document_end(self.buffer))

    def go_to_line(self, line_number: int) -> None:
        """Move to the start of a 1-based line number."""
        self.clear_selection()
        self.state.cursor = moves.go_to_line(self.buffer, line_number)
        self._preferred_col = None
        self._update_scroll()

    # -- selection --------------------------------------------------------

    def _begin_selection(self, extend: bool) -> None:
        if extend and self.state.selection.is_collapsed():
            self.state.selection = Selection(self.state.cursor, self.state.cursor)

    def _end_selection(self, extend: bool) -> None:
        if extend:
            self.state.selection.end = self.state.cursor
        else:
            self.state.selection = Selection.collapsed(self.state.cursor)

    def clear_selection(self) -> None:
        self.state.selection = Selection.collapsed(self.state.cursor)

    def select_all(self) -> None:
        end = moves.move_document_end(self.buffer)
        self.state.selection = Selection(CursorPosition(0, 0), end)
        self.state.cursor = end

    # -- editing ----------------------------------------------------------

    def _cursor_index(self, default: int) -> int:
        idx = self.buffer.line_col_to_char(
            self.state.cursor.line, self.state.cursor.column
        )
        return default if idx is None else idx

    def _selection_bounds(self) -> tuple[CursorPosition, CursorPosition, int, int]:
        start, end = self.state.selection.normalized()
        start_idx = self.buffer.line_col_to_char(start.line, start.column)
        end_idx = self.buffer.line_col_to_char(end.line, end.column)
        return (
            start,
            end,
            0 if start_idx is None else start_idx,
            self.buffer.len_chars() if end_idx is None else end_idx,
        )

    def _collapse_after_edit(self) -> None:
        self.state.selection = Selection.collapsed(self.state.cursor)
        self._preferred_col = None
        self._update_scroll()

    def insert_char(self, ch: str) -> None:
        """Type one character, replacing the selection if there is one."""
        self._delete_selection()
        self.buffer.insert_char(self._cursor_index(self.buffer.len_chars()), ch)
        cur = self.state.cursor
        if ch == "\n":
            self.state.cursor = CursorPosition(cur.line + 1, 0)
        else:
            self.state.cursor = CursorPosition(cur.line, cur.column + 1)
        self._collapse_after_edit()

    def insert_text(self, text: str) -> None:
        """Insert text at the cursor, replacing the selection if there is one."""
        self._delete_selection()
        self.buffer.insert(self._cursor_index(self.buffer.len_chars()), text)
        cur = self.state.cursor
        newlines = text.count("\n")
        if newlines:
            tail = text.rpartition("\n")[2]
            self.state.cursor = CursorPosition(cur.line + newlines, len(tail))
        else:
            self.state.cursor = CursorPosition(cur.line, cur.column + len(text))
        self._collapse_after_edit()

    def backspace(self) -> None:
        """Delete the selection, or the character before the cursor."""
        if self._delete_selection():
            return
        cur = self.state.cursor
        if cur.line == 0 and cur.column == 0:
            return
        idx = self._cursor_index(0)
        if idx > 0:
            deleted = self.buffer.char_at(idx - 1)
            self.buffer.delete(idx - 1, idx)
            if deleted == "\n":
                prev_line = cur.line - 1
                self.state.cursor = CursorPosition(
                    prev_line, self.buffer.line_len(prev_line) or 0
                )
            else:
                self.state.cursor = CursorPosition(cur.line, max(cur.column - 1, 0))
        self._collapse_after_edit()

    def delete(self) -> None:
        """Delete the selection, or the character after the cursor."""
        if self._delete_selection():
            return
        idx = self._cursor_index(self.buffer.len_chars())
        if idx < self.buffer.len_chars():
            self.buffer.delete(idx, idx + 1)
        self._preferred_col = None

    def _delete_selection(self) -> bool:
        if self.state.selection.is_collapsed():
            return False
        start, _, start_idx, end_idx = self._selection_bounds()
        self.buffer.delete(start_idx, end_idx)
        self.state.cursor = start
        self.state.selection = Selection.collapsed(start)
        self._preferred_col = None
        return True

    def selected_text(self) -> Optional[str]:
        """The selected text, or None when nothing is selected."""
        if self.state.selection.is_collapsed():
            return None
        _, _, start_idx, end_idx = self._selection_bounds()
        return self.buffer.slice(start_idx, end_idx)

    def delete_word_left(self) -> None:
        """Delete the selection, or back to the previous word boundary."""
        if self._delete_selection():
            return
        idx = self._cursor_index(0)
        if idx > 0:
            word_start = self.buffer.prev_word_boundary(idx)
            self.buffer.delete(word_start, idx)
            self.state.cursor = CursorPosition(*self.buffer.char_to_line_col(word_start))
        self._collapse_after_edit()

    def delete_word_right(self) -> None:
        """Delete the selection, or forward to the next word boundary."""
        if self._delete_selection():
            return
        idx = self._cursor_index(self.buffer.len_chars())
        if idx < self.buffer.len_chars():
            self.buffer.delete(idx, self.buffer.next_word_boundary(idx))
        self._preferred_col = None

    # -- information ------------------------------------------------------

    def line_count(self) -> int:
        return self.buffer.len_lines()

    def char_count(self) -> int:
        return self.buffer.len_chars()

    def get_line(self, line_idx: int) -> Optional[str]:
        """A line without its newline, or None if out of range."""
        return self.buffer.line_without_newline(line_idx)