"""
Core module for lyric-sheet.

This module provides the foundational components used throughout the application:
    - exceptions: Custom exception classes for error handling
    - config: Configuration loading and validation
    - columns: Positional column contract of the spreadsheet
    - logger: Logging system with console and file outputs

Usage:
    from lyric_sheet.core import (
        Config, load_config,
        setup_logging, get_logger,
        LyricSheetError, ConfigError, FeedError
    )
"""

from lyric_sheet.core.columns import (
    ArtistColumns,
    COLUMN_CONTRACT_VERSION,
    DEFAULT_ARTIST_COLUMNS,
    DEFAULT_SONG_COLUMNS,
    SongColumns,
)
from lyric_sheet.core.config import (
    Config,
    LoggingConfig,
    NetworkConfig,
    SheetConfig,
    load_config,
)
from lyric_sheet.core.exceptions import (
    ConfigError,
    FeedError,
    FeedTransportError,
    FeedUnavailableError,
    LyricSheetError,
)
from lyric_sheet.core.logger import (
    get_logger,
    log_dropped_row,
    setup_logging,
    shutdown_logging,
)

__all__ = [
    # Columns
    "SongColumns",
    "ArtistColumns",
    "COLUMN_CONTRACT_VERSION",
    "DEFAULT_SONG_COLUMNS",
    "DEFAULT_ARTIST_COLUMNS",
    # Config
    "Config",
    "SheetConfig",
    "NetworkConfig",
    "LoggingConfig",
    "load_config",
    # Exceptions
    "LyricSheetError",
    "ConfigError",
    "FeedError",
    "FeedTransportError",
    "FeedUnavailableError",
    # Logger
    "setup_logging",
    "get_logger",
    "log_dropped_row",
    "shutdown_logging",
]
