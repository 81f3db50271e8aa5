"""Undo and redo history with grouping of consecutive edits."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from cosmicnote.config import MAX_UNDO_HISTORY
from cosmicnote.position import CursorPosition, Selection

logger = logging.getLogger(__name__)

#: Longest pause, in seconds, between two edits that may still be grouped.
GROUP_TIMEOUT = 0.5

#: Estimated fixed overhead of one recorded operation, in bytes.
_OPERATION_OVERHEAD = 128


class EditKind(Enum):
    """What an edit did to the text."""

    INSERT = "insert"
    DELETE = "delete"
    REPLACE = "replace"


@dataclass
class EditOperation:
    """A single reversible edit.

    ``position`` is a character offset. For a replacement ``text`` is the new
    text and ``old_text`` the text it replaced.
    """

    kind: EditKind
    position: int
    text: str
    cursor_before: CursorPosition
    selection_before: Selection
    cursor_after: CursorPosition
    old_text: Optional[str] = None
    timestamp: float = field(default_factory=time.monotonic)

    @classmethod
    def insert(
        cls,
        position: int,
        text: str,
        cursor_before: CursorPosition,
        selection_before: Selection,
        cursor_after: CursorPosition,
    ) -> EditOperation:
        """An insertion of ``text`` at ``position``."""
        return cls(EditKind.INSERT, position, text, cursor_before, selection_before, cursor_after)

    @classmethod
    def delete(
        cls,
        position: int,
        text: str,
        cursor_before: CursorPosition,
        selection_before: Selection,
        cursor_after: CursorPosition,
    ) -> EditOperation:
        """A removal of ``text`` that started at ``position``."""
        return cls(EditKind.DELETE, position, text, cursor_before, selection_before, cursor_after)

    @classmethod
    def replace(
        cls,
        position: int,
        old_text: str,
        new_text: str,
        cursor_before: CursorPosition,
        selection_before: Selection,
        cursor_after: CursorPosition,
    ) -> EditOperation:
        """A replacement of ``old_text`` by ``new_text`` at ``position``."""
        return cls(
            EditKind.REPLACE,
            position,
            new_text,
            cursor_before,
            selection_before,
            cursor_after,
            old_text=old_text,
        )

    def _within_timeout(self, other: EditOperation) -> bool:
        return max(other.timestamp - self.timestamp, 0.0) <= GROUP_TIMEOUT

    def can_merge_with(self, other: EditOperation) -> bool:
        """Whether ``other``, made right after this edit, can join it."""
        if self.kind is EditKind.INSERT and other.kind is EditKind.INSERT:
            if not self._within_timeout(other):
                return False
            if other.position != self.position + len(self.text):
                return False
            if other.text == "\n":
                return False
            if other.text == " " and self.text.endswith(" "):
                return False
            return True
        if self.kind is EditKind.DELETE and other.kind is EditKind.DELETE:
            if not self._within_timeout(other):
                return False
            is_backspace = other.position + len(other.text) == self.position
            is_forward_delete = other.position == self.position
            if not (is_backspace or is_forward_delete):
                return False
            return "\n" not in other.text and "\n" not in self.text
        return False

    def merge(self, other: EditOperation) -> None:
        """Fold ``other`` into this edit; check :meth:`can_merge_with` first."""
        if self.kind is EditKind.INSERT and other.kind is EditKind.INSERT:
            self.text += other.text
        elif self.kind is EditKind.DELETE and other.kind is EditKind.DELETE:
            if other.position < self.position:
                self.text = other.text + self.text
                self.position = other.position
            else:
                self.text += other.text
        else:
            logger.warning("Attempted to merge incompatible operations")
            return
        self.cursor_after = other.cursor_after
        self.timestamp = other.timestamp


class UndoManager:
    """Undo and redo stacks for one document."""

    def __init__(self, max_history: int = MAX_UNDO_HISTORY) -> None:
        self.max_history = max_history
        # Each entry pairs an operation with the id of the state it leads to.
        self._undo_stack: list[tuple[EditOperation, int]] = []
        self._redo_stack: list[tuple[EditOperation, int]] = []
        self._next_state = 1
        self._base_state = 0
        self._saved_state = 0

    def _new_state(self) -> int:
        state = self._next_state
        self._next_state += 1
        return state

    @property
    def _current_state(self) -> int:
        return self._undo_stack[-1][1] if self._undo_stack else self._base_state

    def push(self, operation: EditOperation) -> None:
        """Record an edit, merging it into the previous one when possible."""
        if self._undo_stack:
            last, _ = self._undo_stack[-1]
            if last.can_merge_with(operation):
                last.merge(operation)
                self._undo_stack[-1] = (last, self._new_state())
                return

        self._undo_stack.append((operation, self._new_state()))
        while len(self._undo_stack) > self.max_history:
            _, dropped_state = self._undo_stack.pop(0)
            self._base_state = dropped_state
        self._redo_stack.clear()

    def undo(self) -> Optional[EditOperation]:
        """Take the last edit off the history; returns it, or None if empty."""
        if not self._undo_stack:
            return None
        entry = self._undo_stack.pop()
        self._redo_stack.append(entry)
        return entry[0]

    def redo(self) -> Optional[EditOperation]:
        """Re-apply the last undone edit; returns it, or None if none."""
        if not self._redo_stack:
            return None
        entry = self._redo_stack.pop()
        self._undo_stack.append(entry)
        return entry[0]

    def can_undo(self) -> bool:
        return bool(self._undo_stack)

    def can_redo(self) -> bool:
        return bool(self._redo_stack)

    def clear(self) -> None:
        """Forget all history; the current state counts as saved."""
        self._undo_stack.clear()
        self._redo_stack.clear()
        self._base_state = self._new_state()
        self._saved_state = self._base_state

    def mark_saved(self) -> None:
        self._saved_state = self._current_state

    def is_at_saved_state(self) -> bool:
        """Whether the document matches what was last saved."""
        return self._saved_state == self._current_state

    def undo_count(self) -> int:
        return len(self._undo_stack)

    def redo_count(self) -> int:
        return len(self._redo_stack)

    def memory_usage(self) -> int:
        """Approximate memory held by the history, in bytes."""
        return sum(
            len(op.text.encode("utf-8")) + _OPERATION_OVERHEAD
            for op, _ in (*self._undo_stack, *self._redo_stack)
        )