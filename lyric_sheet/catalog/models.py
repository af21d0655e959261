"""
Data models for catalog entities.

This module defines immutable dataclasses for the records produced by one
ingestion run: songs, artist metadata, and the catalog that bundles them.

Design Decisions:
    - All dataclasses are frozen to prevent accidental modification
    - Sequences are tuples for immutability
    - Field names are snake_case; to_dict() renders the camelCase shape the
      presentation layer consumes
    - Models are independent of the sheet's column layout (see core.columns)

Usage:
    from lyric_sheet.catalog.models import Song, ArtistMeta, Catalog

    catalog = Catalog.empty()
    print(catalog.is_empty)  # True
"""

from dataclasses import dataclass, field
from typing import Any

from lyric_sheet.parsing.lyrics import LyricLine


DEFAULT_GENRE = "K-POP"
DEFAULT_ALBUM = "Single"


@dataclass(frozen=True)
class Song:
    """
    Immutable representation of one song row.

    Attributes:
        song_id: "song-<n>" where n is the zero-based data row index within
                 this fetch. Not stable across fetches: editing the sheet
                 reassigns ids.
                 Example: "song-0"

        title: Title in the original language. Never empty.

        translated_title: Translated title, if provided.

        artist: Artist display name. Never empty. Exact key into
                Catalog.artist_meta.

        artist_sub_name: Translated / alternate artist name, if provided.

        album: Album name, "Single" when the sheet leaves it empty.

        cover_url: Cover image URL. Either the sheet's http(s) URL or a
                   deterministic placeholder.

        youtube_id: Canonical 11-character video ID, or "" if none.

        genre: Primary category (first of tags).
               Example: "K-POP"

        tags: All categories in sheet order, de-duplicated. Contains genre.
              Example: ("K-POP", "OST")

        release_year: Four-digit year string, current year when empty.

        lyrics: Normalized lyric lines in performance order.

        ai_interpretation: Free-text interpretation, if provided.

        date_added: Date the row was added (YYYY-MM-DD), if provided.
    """

    song_id: str
    title: str
    artist: str
    album: str
    cover_url: str
    youtube_id: str
    genre: str
    tags: tuple[str, ...]
    release_year: str
    lyrics: tuple[LyricLine, ...] = field(default_factory=tuple)
    translated_title: str | None = None
    artist_sub_name: str | None = None
    ai_interpretation: str | None = None
    date_added: str | None = None

    @property
    def has_video(self) -> bool:
        return bool(self.youtube_id)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to the camelCase record used by the presentation layer.

        Optional fields are omitted when absent.
        """
        data: dict[str, Any] = {
            "id": self.song_id,
            "title": self.title,
            "artist": self.artist,
            "album": self.album,
            "coverUrl": self.cover_url,
            "youtubeId": self.youtube_id,
            "genre": self.genre,
            "tags": list(self.tags),
            "releaseYear": self.release_year,
            "lyrics": [line.to_dict() for line in self.lyrics],
        }
        optional = {
            "translatedTitle": self.translated_title,
            "artistSubName": self.artist_sub_name,
            "aiInterpretation": self.ai_interpretation,
            "dateAdded": self.date_added,
        }
        data.update({key: value for key, value in optional.items() if value})
        return data


@dataclass(frozen=True)
class ArtistMeta:
    """
    Display metadata for one artist.

    Attributes:
        name: Artist display name, identical to Song.artist.
        sub_name: Translated / alternate name. Falls back to name.
        image_url: Artist image URL, a placeholder, or a song cover when the
                   entry was synthesized from a song row.
    """

    name: str
    sub_name: str
    image_url: str

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "subName": self.sub_name, "imageUrl": self.image_url}


@dataclass(frozen=True)
class Catalog:
    """
    Combined output of one ingestion run.

    Attributes:
        songs: Songs in sheet order (the store may re-sort them).
        artist_meta: Artist name -> ArtistMeta. Every Song.artist has an entry.

    Note:
        artist_meta is a plain dict and should be treated as read-only;
        every run builds a fresh one.
    """

    songs: tuple[Song, ...] = field(default_factory=tuple)
    artist_meta: dict[str, ArtistMeta] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> "Catalog":
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.songs

    def to_dict(self) -> dict[str, Any]:
        return {
            "songs": [song.to_dict() for song in self.songs],
            "artistMeta": {name: meta.to_dict() for name, meta in self.artist_meta.items()},
        }
