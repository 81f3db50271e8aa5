"""Application configuration: defaults, JSON serialisation and storage paths."""

import dataclasses
import json
import typing
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path, PurePath
from typing import Any

import platformdirs

from cosmicnote.errors import (
    ConfigDirectoryError,
    ConfigLoadError,
    ConfigParseError,
    ConfigSaveError,
)

APP_ID = "com.cosmic.Notebook"

DEFAULT_WINDOW_WIDTH = 1200
DEFAULT_WINDOW_HEIGHT = 800
MIN_WINDOW_WIDTH = 400
MIN_WINDOW_HEIGHT = 300

MAX_FILE_SIZE = 10 * 1024 * 1024
WARNING_FILE_SIZE = 1024 * 1024

DEFAULT_AUTOSAVE_INTERVAL = 60
MAX_RECENT_FILES = 20
MAX_UNDO_HISTORY = 1000

CONFIG_FILE_NAME = "config.json"


class ViewMode(Enum):
    """How a document is displayed."""

    EDIT = "Edit"
    PREVIEW = "Preview"
    SPLIT = "Split"


class ThemePreference(Enum):
    """Which colour theme to use."""

    SYSTEM = "System"
    LIGHT = "Light"
    DARK = "Dark"


@dataclass
class EditorConfig:
    """Editor behaviour and appearance."""

    font_family: str = "Fira Code"
    font_size: float = 14.0
    tab_width: int = field(default=4, metadata={"max": 255})
    use_spaces: bool = True
    show_line_numbers: bool = True
    highlight_current_line: bool = True
    word_wrap: bool = True
    show_whitespace: bool = False
    auto_indent: bool = True
    bracket_matching: bool = True
    max_undo_history: int = MAX_UNDO_HISTORY
    cursor_blink_rate: int = 530


def _default_ignored_directories() -> list:
    return [".git", "node_modules", "target", "__pycache__", ".venv", "venv", "build", "dist"]


@dataclass
class FileConfig:
    """File handling settings."""

    autosave_enabled: bool = True
    autosave_interval: int = DEFAULT_AUTOSAVE_INTERVAL
    create_backups: bool = True
    max_file_size: int = MAX_FILE_SIZE
    default_extension: str = "md"
    visible_extensions: list[str] = field(default_factory=lambda: ["md", "markdown"])
    show_hidden_files: bool = False
    recent_files: list[Path] = field(default_factory=list)
    max_recent_files: int = MAX_RECENT_FILES
    watch_files: bool = True
    ignored_directories: list[str] = field(default_factory=_default_ignored_directories)


@dataclass
class UiConfig:
    """Window and layout settings."""

    window_width: int = DEFAULT_WINDOW_WIDTH
    window_height: int = DEFAULT_WINDOW_HEIGHT
    sidebar_visible: bool = True
    sidebar_width: int = 250
    default_view_mode: ViewMode = ViewMode.EDIT
    show_status_bar: bool = True
    show_toolbar: bool = True
    remember_window_state: bool = True
    theme: ThemePreference = ThemePreference.SYSTEM


@dataclass
class KeybindingsConfig:
    """Keyboard shortcuts, as accelerator strings."""

    new_file: str = "Ctrl+N"
    open_file: str = "Ctrl+O"
    save_file: str = "Ctrl+S"
    save_file_as: str = "Ctrl+Shift+S"
    close_tab: str = "Ctrl+W"

    undo: str = "Ctrl+Z"
    redo: str = "Ctrl+Y"
    cut: str = "Ctrl+X"
    copy: str = "Ctrl+C"
    paste: str = "Ctrl+V"
    select_all: str = "Ctrl+A"

    find: str = "Ctrl+F"
    find_replace: str = "Ctrl+H"
    find_next: str = "F3"
    find_previous: str = "Shift+F3"

    go_to_line: str = "Ctrl+G"
    next_tab: str = "Ctrl+Tab"
    previous_tab: str = "Ctrl+Shift+Tab"
    command_palette: str = "Ctrl+Shift+P"

    toggle_sidebar: str = "Ctrl+B"
    toggle_preview: str = "Ctrl+Shift+V"
    zoom_in: str = "Ctrl+="
    zoom_out: str = "Ctrl+-"
    zoom_reset: str = "Ctrl+0"


def _coerce(hint: Any, value: Any, name: str) -> Any:
    """Check and convert a decoded JSON value against a field's type."""
    if hint is bool:
        if not isinstance(value, bool):
            raise ConfigParseError(f"expected a boolean for `{name}`")
        return value
    if hint is int:
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ConfigParseError(f"expected a non-negative integer for `{name}`")
        return value
    if hint is float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigParseError(f"expected a number for `{name}`")
        return float(value)
    if hint is str:
        if not isinstance(value, str):
            raise ConfigParseError(f"expected a string for `{name}`")
        return value
    if hint is Path:
        if not isinstance(value, str):
            raise ConfigParseError(f"expected a path string for `{name}`")
        return Path(value)
    if isinstance(hint, type) and issubclass(hint, Enum):
        try:
            return hint(value)
        except ValueError:
            raise ConfigParseError(f"unknown variant {value!r} for `{name}`") from None
    if typing.get_origin(hint) is list:
        if not isinstance(value, list):
            raise ConfigParseError(f"expected a list for `{name}`")
        (item_hint,) = typing.get_args(hint)
        return [_coerce(item_hint, item, name) for item in value]
    if isinstance(hint, type) and dataclasses.is_dataclass(hint):
        return _from_mapping(hint, value, f"{name}.")
    raise ConfigParseError(f"unsupported field type for `{name}`")


def _from_mapping(cls: type, data: Any, prefix: str = "") -> Any:
    if not isinstance(data, dict):
        raise ConfigParseError(f"expected an object for `{prefix.rstrip('.') or 'config'}`")
    values = {}
    for f in dataclasses.fields(cls):
        name = f"{prefix}{f.name}"
        if f.name not in data:
            raise ConfigParseError(f"missing field `{name}`")
        value = _coerce(f.type, data[f.name], name)
        limit = f.metadata.get("max")
        if limit is not None and value > limit:
            raise ConfigParseError(f"`{name}` must be at most {limit}")
        values[f.name] = value
    return cls(**values)


def _encode(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, PurePath):
        return str(value)
    raise TypeError(f"cannot serialise {type(value).__name__}")


def _app_dir(base: str) -> Path:
    if not base:
        raise ConfigDirectoryError()
    return Path(base) / APP_ID


@dataclass
class Config:
    """The complete user configuration."""

    editor: EditorConfig = field(default_factory=EditorConfig)
    files: FileConfig = field(default_factory=FileConfig)
    ui: UiConfig = field(default_factory=UiConfig)
    keybindings: KeybindingsConfig = field(default_factory=KeybindingsConfig)

    @classmethod
    def load(cls) -> "Config":
        """Read the stored configuration, or return defaults when none is stored."""
        path = cls.config_dir() / CONFIG_FILE_NAME
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return cls()
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigLoadError(str(exc)) from exc
        return cls.from_json(text)

    def save(self) -> None:
        """Write the configuration to the configuration directory."""
        directory = self.config_dir()
        try:
            directory.mkdir(parents=True, exist_ok=True)
            (directory / CONFIG_FILE_NAME).write_text(self.to_json(), encoding="utf-8")
        except OSError as exc:
            raise ConfigSaveError(str(exc)) from exc

    def to_json(self) -> str:
        """Serialise the configuration to a JSON string."""
        return json.dumps(dataclasses.asdict(self), default=_encode)

    @classmethod
    def from_json(cls, text: str) -> "Config":
        """Parse a configuration from a JSON string; every field is required."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ConfigParseError(str(exc)) from exc
        return _from_mapping(cls, data)

    @staticmethod
    def config_dir() -> Path:
        """Directory holding the configuration file."""
        return _app_dir(platformdirs.user_config_dir())

    @staticmethod
    def data_dir() -> Path:
        """Directory for session data, backups and recovery files."""
        return _app_dir(platformdirs.user_data_dir())

    @staticmethod
    def cache_dir() -> Path:
        """Directory for cached data."""
        return _app_dir(platformdirs.user_cache_dir())

    @staticmethod
    def recovery_dir() -> Path:
        """Directory for crash recovery files."""
        return Config.data_dir() / "recovery"

    @staticmethod
    def backup_dir() -> Path:
        """Directory for file backups."""
        return Config.data_dir() / "backups"