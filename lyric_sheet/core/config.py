"""
Configuration management for lyric-sheet.

This module handles loading, validating, and providing access to the
application configuration stored in config.yaml.

The configuration file contains:
    - Published spreadsheet location and the gid of each feed
    - Network settings (timeout, User-Agent)
    - Optional overrides of the positional column contract
    - Optional directory for log files

Configuration File Location:
    config.yaml is looked up in the current working directory. Unlike an
    explicit --config path, a missing default file is not an error: the
    built-in defaults point at the production sheet.

Environment Overrides:
    LYRIC_SHEET_URL, LYRIC_SHEET_SONG_GID and LYRIC_SHEET_ARTIST_GID take
    precedence over the file. They may also be placed in a .env file.

Example config.yaml:
    sheet:
      base_url: "https://docs.google.com/spreadsheets/d/e/<id>/pub"
      song_gid: "2105753516"
      artist_gid: "172424194"

    network:
      timeout: 15
      user_agent: "lyric-sheet/0.1"

    columns:
      song:
        lyrics: 9

    logging:
      directory: null
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import find_dotenv, load_dotenv

from lyric_sheet.core.columns import ArtistColumns, SongColumns
from lyric_sheet.core.exceptions import ConfigError


# Default configuration file name (looked up in current working directory)
CONFIG_FILENAME = "config.yaml"

DEFAULT_BASE_URL = (
    "https://docs.google.com/spreadsheets/d/e/"
    "2PACX-1vQHrCOSe45I2r-X7jM7x-eLLVtDtWeL9zTGO5ndjtF89ojmxTcAcOsUJkRwasCyj21JZhgbXuN5D1Tk/pub"
)
DEFAULT_SONG_GID = "2105753516"
DEFAULT_ARTIST_GID = "172424194"
DEFAULT_TIMEOUT = 15.0
DEFAULT_USER_AGENT = "lyric-sheet/0.1"

ENV_BASE_URL = "LYRIC_SHEET_URL"
ENV_SONG_GID = "LYRIC_SHEET_SONG_GID"
ENV_ARTIST_GID = "LYRIC_SHEET_ARTIST_GID"


@dataclass(frozen=True)
class SheetConfig:
    """
    Location of the published spreadsheet.

    Attributes:
        base_url: The sheet's "publish to web" URL, without query string.
        song_gid: Tab identifier of the song sheet.
        artist_gid: Tab identifier of the artist sheet.
    """
    base_url: str = DEFAULT_BASE_URL
    song_gid: str = DEFAULT_SONG_GID
    artist_gid: str = DEFAULT_ARTIST_GID


@dataclass(frozen=True)
class NetworkConfig:
    """
    HTTP settings for feed requests.

    Attributes:
        timeout: Per-request timeout in seconds.
        user_agent: User-Agent header sent with every request.
    """
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT


@dataclass(frozen=True)
class LoggingConfig:
    """
    Attributes:
        directory: Where log files are written. None means console only.
    """
    directory: Path | None = None


@dataclass(frozen=True)
class Config:
    """
    Complete application configuration.

    Created by load_config() and immutable afterwards.

    Example:
        config = load_config()
        print(f"Songs gid: {config.sheet.song_gid}")
        print(f"Lyrics column: {config.song_columns.lyrics}")
    """
    sheet: SheetConfig = field(default_factory=SheetConfig)
    network: NetworkConfig = field(default_factory=NetworkConfig)
    song_columns: SongColumns = field(default_factory=SongColumns)
    artist_columns: ArtistColumns = field(default_factory=ArtistColumns)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(config_path: Path | None = None) -> Config:
    """
    Load and validate configuration from config.yaml.

    Args:
        config_path: Optional explicit path to config file.
                     If None, looks for config.yaml in current working directory
                     and falls back to defaults when it is absent.

    Returns:
        Config: A frozen dataclass containing all configuration values.

    Raises:
        ConfigError: If an explicit config file is not found, has invalid YAML
                     syntax, or contains invalid values. The error message
                     indicates the specific problem.

    Behavior:
        1. Load .env into the environment (existing variables win)
        2. Locate config file (explicit path or CWD/config.yaml)
        3. Read and parse YAML content (empty file means defaults)
        4. Parse each section, applying defaults
        5. Apply environment overrides to the sheet section
        6. Create and return frozen Config object

    Example:
        try:
            config = load_config()
        except ConfigError as e:
            print(f"Configuration error: {e.message}")
            sys.exit(1)
    """
    load_dotenv(find_dotenv(usecwd=True), override=False)

    explicit = config_path is not None
    if config_path is None:
        config_path = Path.cwd() / CONFIG_FILENAME

    raw_config: dict[str, Any] = {}

    if config_path.exists():
        raw_config = _read_yaml(config_path)
    elif explicit:
        raise ConfigError(
            f"Configuration file not found: {config_path}",
            details={"file_path": str(config_path)}
        )

    columns_section = _get_section(raw_config, "columns")

    return Config(
        sheet=_parse_sheet_config(_get_section(raw_config, "sheet")),
        network=_parse_network_config(_get_section(raw_config, "network")),
        song_columns=SongColumns().with_overrides(_get_section(columns_section, "song", "columns.")),
        artist_columns=ArtistColumns().with_overrides(_get_section(columns_section, "artist", "columns.")),
        logging=_parse_logging_config(_get_section(raw_config, "logging")),
    )


def _read_yaml(config_path: Path) -> dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            content = f.read()
    except OSError as e:
        raise ConfigError(
            f"Failed to read configuration file: {e}",
            details={"file_path": str(config_path), "original_error": str(e)}
        ) from e

    try:
        raw_config = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(
            f"Invalid YAML syntax in configuration file: {e}",
            details={"file_path": str(config_path), "original_error": str(e)}
        ) from e

    if raw_config is None:
        return {}

    if not isinstance(raw_config, dict):
        raise ConfigError(
            "Configuration file must contain a YAML dictionary",
            details={"file_path": str(config_path)}
        )

    return raw_config


def _get_section(raw: dict[str, Any], section: str, prefix: str = "") -> dict[str, Any]:
    """
    Return an optional section as a dictionary.

    Raises:
        ConfigError: If the section exists but is not a dictionary.
    """
    value = raw.get(section)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(
            f"Section '{prefix}{section}' must be a dictionary",
            details={"section": f"{prefix}{section}"}
        )
    return value


def _parse_string(section: dict[str, Any], key: str, default: str, field_name: str) -> str:
    value = section.get(key)
    if value is None:
        return default
    # gids are often written unquoted in YAML
    if isinstance(value, int) and not isinstance(value, bool):
        value = str(value)
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(
            f"'{field_name}' must be a non-empty string",
            details={"field": field_name}
        )
    return value.strip()


def _parse_sheet_config(sheet_section: dict[str, Any]) -> SheetConfig:
    """
    Parse the sheet section and apply environment overrides.

    Args:
        sheet_section: The 'sheet' section from config.yaml (may be empty).

    Returns:
        SheetConfig: Sheet location with defaults applied.

    Raises:
        ConfigError: If a value is present but empty, or the base URL
                     is not an http(s) URL.
    """
    base_url = _parse_string(sheet_section, "base_url", DEFAULT_BASE_URL, "sheet.base_url")
    song_gid = _parse_string(sheet_section, "song_gid", DEFAULT_SONG_GID, "sheet.song_gid")
    artist_gid = _parse_string(sheet_section, "artist_gid", DEFAULT_ARTIST_GID, "sheet.artist_gid")

    base_url = os.environ.get(ENV_BASE_URL, "").strip() or base_url
    song_gid = os.environ.get(ENV_SONG_GID, "").strip() or song_gid
    artist_gid = os.environ.get(ENV_ARTIST_GID, "").strip() or artist_gid

    if not base_url.startswith(("http://", "https://")):
        raise ConfigError(
            f"'sheet.base_url' must be an http(s) URL: {base_url}",
            details={"field": "sheet.base_url", "value": base_url}
        )

    return SheetConfig(base_url=base_url, song_gid=song_gid, artist_gid=artist_gid)


def _parse_network_config(network_section: dict[str, Any]) -> NetworkConfig:
    """
    Parse and validate the network configuration section.

    Raises:
        ConfigError: If timeout is not a positive number or user_agent is empty.
    """
    timeout = DEFAULT_TIMEOUT

    raw_timeout = network_section.get("timeout")
    if raw_timeout is not None:
        if isinstance(raw_timeout, bool) or not isinstance(raw_timeout, (int, float)) or raw_timeout <= 0:
            raise ConfigError(
                "'network.timeout' must be a positive number",
                details={"field": "network.timeout", "value": raw_timeout}
            )
        timeout = float(raw_timeout)

    user_agent = _parse_string(network_section, "user_agent", DEFAULT_USER_AGENT, "network.user_agent")

    return NetworkConfig(timeout=timeout, user_agent=user_agent)


def _parse_logging_config(logging_section: dict[str, Any]) -> LoggingConfig:
    raw_directory = logging_section.get("directory")
    if raw_directory is None:
        return LoggingConfig()

    if not isinstance(raw_directory, str) or not raw_directory.strip():
        raise ConfigError(
            "'logging.directory' must be a non-empty string or null",
            details={"field": "logging.directory"}
        )

    # Expand ~ and make absolute
    return LoggingConfig(directory=Path(raw_directory.strip()).expanduser().resolve())
