"""
Positional column contract between the spreadsheet and the row mapper.

The published sheet has no header binding: every column is addressed by
position, and reordering columns in the spreadsheet is a breaking change.
All indices live here so the contract is declared once and can be
overridden from config.yaml (see core.config) instead of being scattered
through the mapper as magic numbers.

Song sheet layout (version 1):
    0 title | 1 translated title | 2 artist | 3 artist sub name |
    4 categories (comma-joined) | 5 album | 6 release year |
    7 video URL or ID | 8 cover URL | 9 lyrics | 10 AI interpretation |
    11 date added (YYYY-MM-DD)

Artist sheet layout (version 1):
    0 name | 1 sub name | 2 image URL
"""

from dataclasses import dataclass, fields, replace
from typing import Any

from lyric_sheet.core.exceptions import ConfigError


COLUMN_CONTRACT_VERSION = "1"

# Song rows shorter than this are rejected before any lookup.
SONG_MIN_CELLS = 3


def _apply_overrides(columns: Any, overrides: dict[str, Any] | None, section: str) -> Any:
    """
    Return a copy of a columns dataclass with validated index overrides.

    Raises:
        ConfigError: On unknown column names or non-integer/negative indices.
    """
    if not overrides:
        return columns

    known = {f.name for f in fields(columns) if f.name != "version"}
    changes: dict[str, int] = {}

    for name, value in overrides.items():
        field_name = f"columns.{section}.{name}"
        if name not in known:
            raise ConfigError(
                f"Unknown column '{name}' in '{field_name}'",
                details={"field": field_name, "known": sorted(known)}
            )
        # bool is an int subclass; reject it explicitly
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ConfigError(
                f"'{field_name}' must be a non-negative integer",
                details={"field": field_name, "value": value}
            )
        changes[name] = value

    return replace(columns, **changes)


@dataclass(frozen=True)
class SongColumns:
    """
    Column indices of the song sheet.

    Attributes:
        title: Original song title (required).
        translated_title: Translated title, also seeds the placeholder cover.
        artist: Artist display name (required, joins to the artist sheet).
        artist_sub_name: Translated / alternate artist name.
        categories: Comma-joined category list; first entry is the genre.
        album: Album name, "Single" when empty.
        release_year: Release year, current year when empty.
        video: Raw video URL or bare 11-character ID.
        cover_url: Cover image URL (must start with http).
        lyrics: Raw lyric block.
        ai_interpretation: Free-text interpretation shown on the detail page.
        date_added: Date the row was added, used for "new" filtering downstream.
        version: Contract version these indices describe.
    """
    title: int = 0
    translated_title: int = 1
    artist: int = 2
    artist_sub_name: int = 3
    categories: int = 4
    album: int = 5
    release_year: int = 6
    video: int = 7
    cover_url: int = 8
    lyrics: int = 9
    ai_interpretation: int = 10
    date_added: int = 11
    version: str = COLUMN_CONTRACT_VERSION

    def with_overrides(self, overrides: dict[str, Any] | None) -> "SongColumns":
        return _apply_overrides(self, overrides, "song")


@dataclass(frozen=True)
class ArtistColumns:
    """Column indices of the artist sheet."""
    name: int = 0
    sub_name: int = 1
    image_url: int = 2
    version: str = COLUMN_CONTRACT_VERSION

    def with_overrides(self, overrides: dict[str, Any] | None) -> "ArtistColumns":
        return _apply_overrides(self, overrides, "artist")


DEFAULT_SONG_COLUMNS = SongColumns()
DEFAULT_ARTIST_COLUMNS = ArtistColumns()
