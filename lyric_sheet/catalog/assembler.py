"""
Catalog assembly: feeds in, Catalog out.

Workflow:
    1. Fetch the song feed. If the primary request fails or returns HTML,
       retry once against the fallback locator (the sheet's first tab).
       If that fails too, the whole run fails: songs are essential.
    2. Fetch the artist feed, concurrently with step 1. Failure or HTML
       degrades to an empty artist table: artist metadata is optional.
    3. Drop the header row of each feed.
    4. Map song rows and artist rows (invalid rows are dropped silently).
    5. Reconcile: every song artist missing from the artist table gets an
       entry synthesized from the song (sub name, cover image). The first
       song of an artist wins.

Entry points:
    build_catalog()    - pure function from feed text to Catalog
    assemble_catalog() - fetch + build, raises FeedError on song feed failure
    fetch_catalog()    - fetch + build, never raises (empty Catalog on failure)

Usage:
    from lyric_sheet.catalog.assembler import fetch_catalog

    catalog = fetch_catalog()
    for song in catalog.songs:
        print(song.title, catalog.artist_meta[song.artist].sub_name)
"""

from concurrent.futures import ThreadPoolExecutor
from datetime import date

from lyric_sheet.catalog.fetcher import SheetClient, timestamp_ms
from lyric_sheet.catalog.mapper import DroppedRowCollector, map_artist_rows, map_song_rows
from lyric_sheet.catalog.models import ArtistMeta, Catalog, Song
from lyric_sheet.core.columns import (
    DEFAULT_ARTIST_COLUMNS,
    DEFAULT_SONG_COLUMNS,
    ArtistColumns,
    SongColumns,
)
from lyric_sheet.core.config import Config, load_config
from lyric_sheet.core.exceptions import FeedError, LyricSheetError
from lyric_sheet.core.logger import get_logger
from lyric_sheet.parsing.csv_text import parse_csv

logger = get_logger(__name__)


def merge_fallback_artists(
    songs: list[Song] | tuple[Song, ...],
    artist_meta: dict[str, ArtistMeta]
) -> dict[str, ArtistMeta]:
    """
    Return a copy of artist_meta with an entry for every song artist.

    Existing entries are never replaced.
    """
    merged = dict(artist_meta)
    for song in songs:
        if song.artist not in merged:
            merged[song.artist] = ArtistMeta(
                name=song.artist,
                sub_name=song.artist_sub_name or song.artist,
                image_url=song.cover_url,
            )
    return merged


def build_catalog(
    song_text: str,
    artist_text: str = "",
    song_columns: SongColumns = DEFAULT_SONG_COLUMNS,
    artist_columns: ArtistColumns = DEFAULT_ARTIST_COLUMNS,
    collector: DroppedRowCollector | None = None,
    today: date | None = None
) -> Catalog:
    """
    Build a Catalog from the raw text of both feeds.

    Args:
        song_text: CSV body of the song feed, header row included.
        artist_text: CSV body of the artist feed, or "" if unavailable.
        song_columns: Song sheet column contract.
        artist_columns: Artist sheet column contract.
        collector: Optional recorder of dropped rows.
        today: Date for the release year default (tests pin it).

    Returns:
        Catalog with songs in sheet order.
    """
    song_rows = parse_csv(song_text)[1:]
    artist_rows = parse_csv(artist_text)[1:] if artist_text else []

    songs = map_song_rows(song_rows, columns=song_columns, collector=collector, today=today)
    artist_meta = map_artist_rows(artist_rows, columns=artist_columns, collector=collector)

    logger.info(
        f"Mapped {len(songs)}/{len(song_rows)} song rows, "
        f"{len(artist_meta)} artists from {len(artist_rows)} artist rows"
    )

    return Catalog(songs=tuple(songs), artist_meta=merge_fallback_artists(songs, artist_meta))


def fetch_song_text(client: SheetClient, timestamp: int) -> str:
    """
    Fetch the song feed, retrying once against the fallback locator.

    Raises:
        FeedError: If the fallback request fails or also returns HTML.
    """
    try:
        return client.fetch_songs_text(timestamp)
    except FeedError as e:
        logger.warning(f"{e.message} Retrying without gid...")

    return client.fetch_fallback_songs_text(timestamp)


def fetch_artist_text(client: SheetClient, timestamp: int) -> str:
    """Fetch the artist feed; any feed failure yields "" (empty artist table)."""
    try:
        return client.fetch_artists_text(timestamp)
    except FeedError as e:
        logger.warning(f"Continuing without artist sheet: {e.message}")
        return ""


def assemble_catalog(
    client: SheetClient,
    song_columns: SongColumns = DEFAULT_SONG_COLUMNS,
    artist_columns: ArtistColumns = DEFAULT_ARTIST_COLUMNS,
    collector: DroppedRowCollector | None = None,
    today: date | None = None
) -> Catalog:
    """
    Fetch both feeds concurrently and build the Catalog.

    Both requests share one cache-busting timestamp. Mapping starts only
    after the song fetch (including its fallback) has completed.

    Raises:
        FeedError: If the song feed is unavailable after the fallback retry.
    """
    timestamp = timestamp_ms()

    with ThreadPoolExecutor(max_workers=2) as executor:
        song_future = executor.submit(fetch_song_text, client, timestamp)
        artist_future = executor.submit(fetch_artist_text, client, timestamp)
        song_text = song_future.result()
        artist_text = artist_future.result()

    return build_catalog(
        song_text,
        artist_text,
        song_columns=song_columns,
        artist_columns=artist_columns,
        collector=collector,
        today=today,
    )


def fetch_catalog(
    client: SheetClient | None = None,
    config: Config | None = None,
    collector: DroppedRowCollector | None = None
) -> Catalog:
    """
    Fetch and build the Catalog, never raising.

    Args:
        client: Client to use. If None, one is created from config and closed
                afterwards.
        config: Configuration. If None, load_config() is used.
        collector: Optional recorder of dropped rows.

    Returns:
        The Catalog, or Catalog.empty() if anything failed. Failures are logged.
    """
    owns_client = client is None

    try:
        if config is None:
            config = load_config()
        if client is None:
            client = SheetClient(config.sheet, config.network)

        return assemble_catalog(
            client,
            song_columns=config.song_columns,
            artist_columns=config.artist_columns,
            collector=collector,
        )
    except LyricSheetError as e:
        logger.error(f"Failed to fetch sheet data: {e.message}")
        if e.details:
            logger.debug(f"Details: {e.details}")
    except Exception as e:
        logger.exception(f"Unexpected error while fetching sheet data: {e}")
    finally:
        if owns_client and client is not None:
            client.close()

    return Catalog.empty()
