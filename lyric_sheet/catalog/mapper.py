"""
Row mapping from parsed sheet rows to catalog records.

Columns are positional (see lyric_sheet.core.columns). Dirty rows are
normal in a hand-edited spreadsheet, so a row that lacks the required
cells is dropped, never raised. Callers that want to know WHY rows were
dropped pass a DroppedRowCollector; without one the only trace is a DEBUG
log record (which setup_logging() routes to dropped_rows.log).

Usage:
    from lyric_sheet.catalog.mapper import map_song_row, DroppedRowCollector

    collector = DroppedRowCollector()
    song = map_song_row(["Title", "", "Artist"], index=0, collector=collector)
"""

from dataclasses import dataclass, field
from datetime import date
from urllib.parse import quote

from lyric_sheet.catalog.models import DEFAULT_ALBUM, DEFAULT_GENRE, ArtistMeta, Song
from lyric_sheet.core.columns import (
    DEFAULT_ARTIST_COLUMNS,
    DEFAULT_SONG_COLUMNS,
    SONG_MIN_CELLS,
    ArtistColumns,
    SongColumns,
)
from lyric_sheet.core.logger import get_logger, log_dropped_row
from lyric_sheet.parsing.lyrics import parse_lyrics
from lyric_sheet.parsing.video_id import extract_youtube_id

logger = get_logger(__name__)

SONGS_FEED = "songs"
ARTISTS_FEED = "artists"

PLACEHOLDER_IMAGE_URL = "https://picsum.photos/seed/{seed}/{size}"
COVER_PLACEHOLDER_SIZE = 400
ARTIST_PLACEHOLDER_SIZE = 200


@dataclass(frozen=True)
class DroppedRow:
    """
    A row rejected by the mapper.

    Attributes:
        feed: "songs" or "artists".
        index: Zero-based data row index (header excluded).
        reason: Short human-readable reason, e.g. "missing artist".
        cells: The parsed cells, as a tuple.
    """
    feed: str
    index: int
    reason: str
    cells: tuple[str, ...]


@dataclass
class DroppedRowCollector:
    """Opt-in record of every row the mapper rejected."""
    rows: list[DroppedRow] = field(default_factory=list)

    def record(self, feed: str, index: int, reason: str, cells: list[str]) -> None:
        self.rows.append(DroppedRow(feed=feed, index=index, reason=reason, cells=tuple(cells)))

    def for_feed(self, feed: str) -> list[DroppedRow]:
        return [row for row in self.rows if row.feed == feed]

    def __len__(self) -> int:
        return len(self.rows)


def _cell(row: list[str], index: int) -> str:
    """Cell at index, or "" when the row is shorter."""
    return row[index] if index < len(row) else ""


def _drop(
    collector: DroppedRowCollector | None,
    feed: str,
    index: int,
    reason: str,
    row: list[str]
) -> None:
    log_dropped_row(logger, feed, index, reason, row)
    if collector is not None:
        collector.record(feed, index, reason, row)


def _http_or_placeholder(value: str, seed: str, size: int) -> str:
    if value.startswith("http"):
        return value
    return PLACEHOLDER_IMAGE_URL.format(seed=quote(seed, safe=""), size=size)


def parse_categories(raw: str) -> list[str]:
    """
    Split a comma-joined category cell.

    Entries are trimmed, empties dropped and duplicates removed keeping the
    first occurrence. An empty result becomes [DEFAULT_GENRE].

    Example:
        parse_categories("K-POP, OST")  # ["K-POP", "OST"]
        parse_categories(" , ")         # ["K-POP"]
    """
    categories = [part.strip() for part in raw.split(",") if part.strip()]
    return list(dict.fromkeys(categories)) or [DEFAULT_GENRE]


def map_song_row(
    row: list[str],
    index: int,
    columns: SongColumns = DEFAULT_SONG_COLUMNS,
    collector: DroppedRowCollector | None = None,
    today: date | None = None
) -> Song | None:
    """
    Map one song row to a Song.

    Args:
        row: Parsed cells of one data row (header already removed).
        index: Zero-based data row index, used for the song id.
        columns: Positional column contract.
        collector: Optional recorder of dropped rows.
        today: Date used for the release year default. Defaults to today.

    Returns:
        The Song, or None if the row has fewer than 3 cells or an empty
        title or artist.
    """
    if len(row) < SONG_MIN_CELLS:
        _drop(collector, SONGS_FEED, index, f"fewer than {SONG_MIN_CELLS} cells", row)
        return None

    title = _cell(row, columns.title)
    artist = _cell(row, columns.artist)
    if not title:
        _drop(collector, SONGS_FEED, index, "missing title", row)
        return None
    if not artist:
        _drop(collector, SONGS_FEED, index, "missing artist", row)
        return None

    translated_title = _cell(row, columns.translated_title)
    tags = parse_categories(_cell(row, columns.categories))
    release_year = _cell(row, columns.release_year) or str((today or date.today()).year)

    return Song(
        song_id=f"song-{index}",
        title=title,
        translated_title=translated_title or None,
        artist=artist,
        artist_sub_name=_cell(row, columns.artist_sub_name) or None,
        album=_cell(row, columns.album) or DEFAULT_ALBUM,
        cover_url=_http_or_placeholder(
            _cell(row, columns.cover_url),
            translated_title or title,
            COVER_PLACEHOLDER_SIZE,
        ),
        youtube_id=extract_youtube_id(_cell(row, columns.video)),
        genre=tags[0],
        tags=tuple(tags),
        release_year=release_year,
        lyrics=tuple(parse_lyrics(_cell(row, columns.lyrics))),
        ai_interpretation=_cell(row, columns.ai_interpretation) or None,
        date_added=_cell(row, columns.date_added) or None,
    )


def map_artist_row(
    row: list[str],
    index: int,
    columns: ArtistColumns = DEFAULT_ARTIST_COLUMNS,
    collector: DroppedRowCollector | None = None
) -> ArtistMeta | None:
    """
    Map one artist row to ArtistMeta.

    Returns None for rows with an empty name cell.
    """
    name = _cell(row, columns.name)
    if not name:
        _drop(collector, ARTISTS_FEED, index, "missing name", row)
        return None

    return ArtistMeta(
        name=name,
        sub_name=_cell(row, columns.sub_name) or name,
        image_url=_http_or_placeholder(_cell(row, columns.image_url), name, ARTIST_PLACEHOLDER_SIZE),
    )


def map_song_rows(
    rows: list[list[str]],
    columns: SongColumns = DEFAULT_SONG_COLUMNS,
    collector: DroppedRowCollector | None = None,
    today: date | None = None
) -> list[Song]:
    """Map data rows (header removed), keeping sheet order and dropping invalid rows."""
    songs = []
    for index, row in enumerate(rows):
        song = map_song_row(row, index, columns=columns, collector=collector, today=today)
        if song is not None:
            songs.append(song)
    return songs


def map_artist_rows(
    rows: list[list[str]],
    columns: ArtistColumns = DEFAULT_ARTIST_COLUMNS,
    collector: DroppedRowCollector | None = None
) -> dict[str, ArtistMeta]:
    """Map data rows (header removed) into a name -> ArtistMeta dict. Later rows win."""
    artist_meta: dict[str, ArtistMeta] = {}
    for index, row in enumerate(rows):
        meta = map_artist_row(row, index, columns=columns, collector=collector)
        if meta is not None:
            artist_meta[meta.name] = meta
    return artist_meta
