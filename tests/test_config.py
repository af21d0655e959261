"""Test configuration loading"""

from pathlib import Path

import pytest

from lyric_sheet.core.config import (
    DEFAULT_BASE_URL,
    DEFAULT_SONG_GID,
    Config,
    load_config,
)
from lyric_sheet.core.exceptions import ConfigError


def write_config(directory: Path, content: str) -> Path:
    path = directory / "config.yaml"
    path.write_text(content, encoding="utf-8")
    return path


class TestLoadConfig:
    """Test load_config()"""

    def test_defaults_without_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        config = load_config()

        assert config == Config()
        assert config.sheet.base_url == DEFAULT_BASE_URL
        assert config.sheet.song_gid == DEFAULT_SONG_GID
        assert config.song_columns.lyrics == 9

    def test_explicit_missing_file(self, tmp_path):
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.yaml")
        assert "not found" in exc_info.value.message

    def test_full_file(self, tmp_path):
        path = write_config(tmp_path, """
sheet:
  base_url: "https://example.com/pub"
  song_gid: 123
  artist_gid: "456"
network:
  timeout: 3
  user_agent: "custom-agent"
columns:
  song:
    lyrics: 12
  artist:
    image_url: 4
logging:
  directory: "logs"
""")
        config = load_config(path)

        assert config.sheet.base_url == "https://example.com/pub"
        assert config.sheet.song_gid == "123"
        assert config.sheet.artist_gid == "456"
        assert config.network.timeout == 3.0
        assert config.network.user_agent == "custom-agent"
        assert config.song_columns.lyrics == 12
        assert config.song_columns.title == 0
        assert config.artist_columns.image_url == 4
        assert config.logging.directory.is_absolute()

    def test_empty_file_means_defaults(self, tmp_path):
        assert load_config(write_config(tmp_path, "")) == Config()

    def test_environment_overrides(self, tmp_path, monkeypatch):
        monkeypatch.setenv("LYRIC_SHEET_SONG_GID", "999")
        monkeypatch.setenv("LYRIC_SHEET_URL", "https://override.example.com/pub")
        path = write_config(tmp_path, "sheet:\n  song_gid: '1'\n")

        config = load_config(path)
        assert config.sheet.song_gid == "999"
        assert config.sheet.base_url == "https://override.example.com/pub"

    def test_dotenv_in_working_directory(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("LYRIC_SHEET_SONG_GID=999\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        assert load_config().sheet.song_gid == "999"

    def test_environment_beats_dotenv(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("LYRIC_SHEET_SONG_GID=999\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("LYRIC_SHEET_SONG_GID", "555")

        assert load_config().sheet.song_gid == "555"

    @pytest.mark.parametrize("content, field", [
        ("network:\n  timeout: -1\n", "network.timeout"),
        ("network:\n  timeout: fast\n", "network.timeout"),
        ("sheet:\n  song_gid: ''\n", "sheet.song_gid"),
        ("sheet:\n  base_url: 'ftp://example.com'\n", "sheet.base_url"),
        ("columns:\n  song:\n    title: -2\n", "columns.song.title"),
        ("logging:\n  directory: 5\n", "logging.directory"),
    ])
    def test_invalid_values(self, tmp_path, content, field):
        with pytest.raises(ConfigError) as exc_info:
            load_config(write_config(tmp_path, content))
        assert exc_info.value.details["field"] == field

    def test_invalid_yaml(self, tmp_path):
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(write_config(tmp_path, "sheet: [unclosed\n"))

    def test_not_a_dictionary(self, tmp_path):
        with pytest.raises(ConfigError, match="YAML dictionary"):
            load_config(write_config(tmp_path, "- a\n- b\n"))

    def test_section_must_be_dictionary(self, tmp_path):
        with pytest.raises(ConfigError) as exc_info:
            load_config(write_config(tmp_path, "network: 5\n"))
        assert exc_info.value.details["section"] == "network"
