"""
lyric-sheet: Lyrics catalog ingestion from a published spreadsheet.

The lyrics site keeps its catalog in a spreadsheet instead of a database.
This package fetches the sheet's CSV exports and turns them into typed,
normalized records for the presentation layer.

Architecture:
    The ingestion is a pipeline of small, separately testable steps:

    parsing/csv_text: Delimited-text parser
        - Quoted fields, embedded commas/newlines, doubled quotes
        - LF and CRLF line endings

    parsing/lyrics: Lyric block normalizer
        - Caret lines, paragraph blocks, flat 3-line groups
        - Output: LyricLine(original, romanization, translation)

    parsing/video_id: Video ID extraction
        - Bare IDs, watch/short/embed/shorts/mobile URLs
        - Output: 11-character ID or ""

    catalog/mapper: Row mapping
        - Positional columns (core/columns), defaults, dropped rows

    catalog/assembler: Orchestration
        - Song feed with one fallback retry, optional artist feed
        - Fallback artist metadata from song rows

Modules:
    core/       - Configuration, column contract, logging, exceptions
    parsing/    - Pure text parsing
    catalog/    - Models, mapping, HTTP fetching, assembly, store
    cli.py      - Command-line interface

Usage:
    Command Line:
        lyric-sheet
        lyric-sheet --json > catalog.json

    Python API:
        from lyric_sheet import load_config, fetch_catalog

        catalog = fetch_catalog(config=load_config())
        for song in catalog.songs:
            print(song.title, song.youtube_id, len(song.lyrics))

Dependencies:
    - requests: HTTP client for the sheet feeds
    - pyyaml: Configuration file parsing
    - python-dotenv: .env support for sheet overrides
    - rich-click: CLI framework with colors
    - tqdm: Progress-bar-safe console logging
"""

__version__ = "0.1.0"
__author__ = "lyric-sheet"
__license__ = "MIT"

# Convenience imports for common usage
from lyric_sheet.core import (
    Config,
    ConfigError,
    FeedError,
    FeedTransportError,
    FeedUnavailableError,
    LyricSheetError,
    get_logger,
    load_config,
    setup_logging,
)
from lyric_sheet.catalog import (
    ArtistMeta,
    Catalog,
    CatalogStore,
    SheetClient,
    Song,
    assemble_catalog,
    build_catalog,
    fetch_catalog,
)
from lyric_sheet.parsing import LyricLine, extract_youtube_id, parse_csv, parse_lyrics

__all__ = [
    # Version
    "__version__",
    # Core
    "Config",
    "load_config",
    "setup_logging",
    "get_logger",
    # Exceptions
    "LyricSheetError",
    "ConfigError",
    "FeedError",
    "FeedTransportError",
    "FeedUnavailableError",
    # Parsing
    "parse_csv",
    "parse_lyrics",
    "extract_youtube_id",
    "LyricLine",
    # Catalog
    "Song",
    "ArtistMeta",
    "Catalog",
    "CatalogStore",
    "SheetClient",
    "build_catalog",
    "assemble_catalog",
    "fetch_catalog",
]
