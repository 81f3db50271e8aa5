"""Editor display settings, viewport geometry and plain-text line rendering."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from cosmicnote.position import CursorPosition


@dataclass
class EditorWidgetConfig:
    """How the editor text is displayed."""

    show_line_numbers: bool = True
    line_number_width: int = 4
    tab_size: int = 4
    highlight_current_line: bool = True
    show_whitespace: bool = False
    word_wrap: bool = True


def _cells(extent: float, unit: float) -> int:
    if unit <= 0 or extent <= 0:
        return 0
    return math.ceil(extent / unit)


@dataclass
class EditorViewport:
    """Size of the visible editor area, in pixels and in text cells."""

    width: float = 0.0
    height: float = 0.0
    line_height: float = 0.0
    char_width: float = 0.0
    visible_lines: int = field(init=False, default=0)
    visible_columns: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        self.set_size(self.width, self.height)

    def set_size(self, width: float, height: float) -> None:
        """Change the pixel size and recompute the visible line and column counts."""
        self.width = width
        self.height = height
        self.visible_lines = _cells(height, self.line_height)
        self.visible_columns = _cells(width, self.char_width)


def screen_to_position(
    x: float,
    y: float,
    scroll_line: int,
    line_height: float,
    char_width: float,
    line_number_width: float,
) -> CursorPosition:
    """Position under a point; only the line is resolved, the column is 0."""
    line_offset = int(max(y, 0.0) / line_height)
    return CursorPosition(scroll_line + line_offset, 0)


def cursor_indicator(cursor: CursorPosition) -> str:
    """1-based line and column text for the status bar."""
    return f"Ln {cursor.line + 1}, Col {cursor.column + 1}"


def render_line(text: str, line_idx: int, config: EditorWidgetConfig) -> str:
    """One line as displayed: optional line-number gutter, then the content."""
    if config.show_whitespace:
        content = text.replace("\t", "→").replace(" ", "·")
    else:
        content = text.replace("\t", " " * config.tab_size)
    if not content:
        content = " "
    if config.show_line_numbers:
        return f"{line_idx + 1:>{config.line_number_width}} {content}"
    return content