import json
from pathlib import Path

import platformdirs
import pytest

from cosmicnote.config import (
    APP_ID,
    Config,
    EditorConfig,
    FileConfig,
    KeybindingsConfig,
    ThemePreference,
    UiConfig,
    ViewMode,
)
from cosmicnote.errors import AppError, ConfigDirectoryError, ConfigParseError


@pytest.fixture
def dirs(tmp_path, monkeypatch):
    config_base = tmp_path / "config"
    data_base = tmp_path / "data"
    cache_base = tmp_path / "cache"
    monkeypatch.setattr(platformdirs, "user_config_dir", lambda *a, **k: str(config_base))
    monkeypatch.setattr(platformdirs, "user_data_dir", lambda *a, **k: str(data_base))
    monkeypatch.setattr(platformdirs, "user_cache_dir", lambda *a, **k: str(cache_base))
    return config_base, data_base, cache_base


def test_default_config():
    config = Config()
    assert config.editor.show_line_numbers
    assert config.files.autosave_enabled
    assert config.ui.sidebar_visible


def test_config_serialization():
    config = Config()
    restored = Config.from_json(config.to_json())
    assert restored.editor.font_size == config.editor.font_size
    assert restored == config


def test_view_mode_default():
    assert UiConfig().default_view_mode is ViewMode.EDIT
    assert UiConfig().theme is ThemePreference.SYSTEM


def test_default_values():
    editor = EditorConfig()
    assert editor.font_family == "Fira Code"
    assert editor.font_size == 14.0
    assert editor.tab_width == 4
    assert editor.max_undo_history == 1000
    assert editor.cursor_blink_rate == 530
    files = FileConfig()
    assert files.max_file_size == 10485760
    assert files.autosave_interval == 60
    assert files.visible_extensions == ["md", "markdown"]
    assert "node_modules" in files.ignored_directories
    assert len(files.ignored_directories) == 8
    ui = UiConfig()
    assert (ui.window_width, ui.window_height, ui.sidebar_width) == (1200, 800, 250)


def test_default_keybindings():
    keys = KeybindingsConfig()
    assert keys.save_file_as == "Ctrl+Shift+S"
    assert keys.find_previous == "Shift+F3"
    assert keys.zoom_in == "Ctrl+="
    assert keys.command_palette == "Ctrl+Shift+P"


def test_enums_serialise_by_variant_name():
    data = json.loads(Config().to_json())
    assert data["ui"]["default_view_mode"] == "Edit"
    assert data["ui"]["theme"] == "System"


def test_non_default_values_round_trip():
    config = Config()
    config.ui.default_view_mode = ViewMode.SPLIT
    config.ui.theme = ThemePreference.DARK
    config.files.recent_files = [Path("/notes/a.md"), Path("/notes/b.md")]
    config.editor.font_size = 18.5
    restored = Config.from_json(config.to_json())
    assert restored.ui.default_view_mode is ViewMode.SPLIT
    assert restored.ui.theme is ThemePreference.DARK
    assert restored.files.recent_files == [Path("/notes/a.md"), Path("/notes/b.md")]
    assert restored.editor.font_size == 18.5


def test_missing_field_is_rejected():
    data = json.loads(Config().to_json())
    del data["editor"]["font_size"]
    with pytest.raises(ConfigParseError, match="editor.font_size"):
        Config.from_json(json.dumps(data))


def test_missing_section_is_rejected():
    data = json.loads(Config().to_json())
    del data["keybindings"]
    with pytest.raises(ConfigParseError):
        Config.from_json(json.dumps(data))


def test_invalid_json_is_rejected():
    with pytest.raises(ConfigParseError):
        Config.from_json("{not json")


def test_unknown_variant_is_rejected():
    data = json.loads(Config().to_json())
    data["ui"]["default_view_mode"] = "Fullscreen"
    with pytest.raises(ConfigParseError):
        Config.from_json(json.dumps(data))


def test_wrong_type_is_rejected():
    data = json.loads(Config().to_json())
    data["editor"]["font_size"] = "large"
    with pytest.raises(ConfigParseError):
        Config.from_json(json.dumps(data))


def test_tab_width_out_of_range_is_rejected():
    data = json.loads(Config().to_json())
    data["editor"]["tab_width"] = 300
    with pytest.raises(ConfigParseError):
        Config.from_json(json.dumps(data))


def test_unknown_keys_are_ignored():
    data = json.loads(Config().to_json())
    data["editor"]["extra"] = 1
    assert Config.from_json(json.dumps(data)) == Config()


def test_directories(dirs):
    config_base, data_base, cache_base = dirs
    assert Config.config_dir() == config_base / APP_ID
    assert Config.data_dir() == data_base / APP_ID
    assert Config.cache_dir() == cache_base / APP_ID
    assert Config.recovery_dir() == data_base / APP_ID / "recovery"
    assert Config.backup_dir() == data_base / APP_ID / "backups"


def test_missing_base_directory_raises(monkeypatch):
    monkeypatch.setattr(platformdirs, "user_config_dir", lambda *a, **k: "")
    with pytest.raises(ConfigDirectoryError):
        Config.config_dir()


def test_load_without_file_returns_defaults(dirs):
    assert Config.load() == Config()


def test_save_then_load(dirs):
    config = Config()
    config.editor.font_size = 20.0
    config.ui.sidebar_visible = False
    config.save()
    loaded = Config.load()
    assert loaded.editor.font_size == 20.0
    assert loaded.ui.sidebar_visible is False


def test_load_corrupt_file_raises(dirs):
    config_base, _, _ = dirs
    directory = config_base / APP_ID
    directory.mkdir(parents=True)
    (directory / "config.json").write_text("[]", encoding="utf-8")
    with pytest.raises(ConfigParseError) as info:
        Config.load()
    assert isinstance(info.value, AppError)