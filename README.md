# cosmicnote

The editing core of a lightweight Markdown editor, as a plain Python library.
It contains no GUI code. It provides the parts an editor front end is built on.

## Modules

- `cosmicnote.buffer`: `TextBuffer` stores text with LF line endings
  internally. It remembers the original line ending, which `LineEnding`
  detects, and `str(buffer)` restores it. The buffer converts between
  line/column and character offsets. It inserts, deletes and replaces ranges,
  finds words and word boundaries, and counts words. A version counter and a
  modified flag are reset by `mark_saved()`.
- `cosmicnote.position`: the `CursorPosition` (0-based line and column) and
  `Selection` value types.
- `cosmicnote.cursor`: cursor-movement functions. They cover left and right
  with line wrapping, up and down with a remembered preferred column, smart
  home, end, word jumps, page up and down, document start and end, 1-based
  `go_to_line`, and `clamp`. `calculate_scroll` returns the first visible line
  that keeps the cursor inside a scroll margin.
- `cosmicnote.editor`: `Editor` ties a buffer, cursor, selection and scroll
  position together. Its movement methods can extend the selection. Its
  editing operations are `insert_char`, `insert_text`, `backspace`, `delete`,
  `delete_word_left`, `delete_word_right`, `select_all` and `selected_text`.
- `cosmicnote.undo`: `EditOperation` (insert, delete or replace) and
  `UndoManager`. The manager keeps undo and redo stacks with a size limit
  (1000 by default). Consecutive inserts, or consecutive deletes, made within
  500 ms are merged into one step. A newline, or a second space typed after a
  space, starts a new step. `is_at_saved_state()` reports whether the history
  is back at the point of the last `mark_saved()`.
- `cosmicnote.clipboard`: `ClipboardManager` with `get_text`, `set_text`,
  `has_text` and `clear`. It also caches the last text seen, which `get_text`
  returns when the clipboard cannot be opened. By default it reaches the
  system clipboard through Tk, which needs a display. Any other backend can be
  passed in as a factory that returns an object with `get_text`, `set_text`
  and `clear`. `clipboard()`, `copy_text()` and `paste_text()` use one shared
  manager.
- `cosmicnote.viewport`: `EditorWidgetConfig` and `EditorViewport` (pixel size
  and visible line and column counts). `render_line` draws a line as text,
  with an optional line-number gutter, tab expansion or visible whitespace.
  `cursor_indicator` gives text such as `Ln 3, Col 5`, and
  `screen_to_position` maps a point to a line.
- `cosmicnote.config`: `Config`, with editor, file, UI and key-binding
  defaults. It round-trips through JSON with `to_json` / `from_json`, and every
  field is required and type-checked when parsing. `load()` and `save()` use
  `config.json` in the per-user configuration directory. `load()` returns
  defaults when no file exists. It also provides the per-user data, cache,
  recovery and backup directories.
- `cosmicnote.errors`: the error hierarchy, rooted at `AppError`.
  `FileError.user_message()` and `ClipboardError.user_message()` return
  messages to show in dialogs.

## Installation

```
pip install .
```

## Example

```python
from cosmicnote.editor import Editor
from cosmicnote.position import CursorPosition

editor = Editor("Hello World")
editor.set_cursor(CursorPosition(0, 5))
editor.insert_text(",")
assert editor.content() == "Hello, World"

editor.select_all()
assert editor.selected_text() == "Hello, World"
```

```python
from cosmicnote.config import Config

config = Config()
restored = Config.from_json(config.to_json())
assert restored.editor.font_size == 14.0
```

## What it does not do

This is a library, not an application. It has no window, menus or command,
and no Markdown parsing or preview. It does not open or save documents, keep
session or recovery files, or search and replace.

`Editor` does not record its edits in an `UndoManager`. A front end that wants
undo builds `EditOperation` objects itself and pushes them.

## Running the tests

```
pip install ".[test]"
pytest
```