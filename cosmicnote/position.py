"""Cursor positions and selections within a text buffer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class CursorPosition:
    """A position as a 0-based line and a 0-based column in characters."""

    line: int = 0
    column: int = 0


@dataclass
class Selection:
    """A range between an anchor (start) and the moving end."""

    start: CursorPosition
    end: CursorPosition

    @classmethod
    def collapsed(cls, pos: CursorPosition) -> Selection:
        """An empty selection at a single position."""
        return cls(pos, pos)

    def is_collapsed(self) -> bool:
        """Whether the selection covers no text."""
        return self.start == self.end

    def normalized(self) -> tuple[CursorPosition, CursorPosition]:
        """The bounds ordered so that the first comes before the second."""
        if self.end < self.start:
            return self.end, self.start
        return self.start, self.end