"""
Owned, explicitly refreshed catalog value.

The ingestion pipeline is a pure function; this store is where caching and
refresh timing live. It holds the current Catalog and replaces it only when
a refresh succeeds:

    - success: catalog replaced atomically (songs sorted newest first)
    - failure: previous catalog retained, error remembered in last_error

Refreshes may overlap (e.g. a user hits refresh twice). Each refresh takes
a generation number when it starts; a result is only published if no newer
refresh has already published one, so a slow stale fetch can never
overwrite fresher data.

Usage:
    from functools import partial
    from lyric_sheet.catalog import CatalogStore, SheetClient, assemble_catalog

    store = CatalogStore(partial(assemble_catalog, SheetClient(config.sheet, config.network)))
    store.refresh()
    print(len(store.songs))
"""

import threading
from dataclasses import replace
from datetime import datetime
from typing import Callable

from lyric_sheet.catalog.models import ArtistMeta, Catalog, Song
from lyric_sheet.core.exceptions import LyricSheetError
from lyric_sheet.core.logger import get_logger

logger = get_logger(__name__)


def _year_key(song: Song) -> int:
    try:
        return int(song.release_year)
    except ValueError:
        return -1


def sort_newest_first(songs: tuple[Song, ...]) -> tuple[Song, ...]:
    """
    Sort by release year, newest first.

    Stable: songs of the same year keep sheet order. Non-numeric years sort last.
    """
    return tuple(sorted(songs, key=_year_key, reverse=True))


class CatalogStore:
    """
    Holds the current Catalog with replace-on-success / retain-on-failure.

    Attributes:
        catalog: The current Catalog (empty until the first success).
        loaded: True once any refresh has succeeded.
        last_error: The error of the most recent failed refresh, cleared on success.
        last_refreshed: When the current catalog was published.
    """

    def __init__(self, loader: Callable[[], Catalog]) -> None:
        """
        Args:
            loader: Strict catalog loader, typically a partial of
                    assemble_catalog(). It must raise LyricSheetError on
                    failure rather than return an empty catalog.
        """
        self._loader = loader
        self._lock = threading.Lock()
        self._catalog = Catalog.empty()
        self._started = 0
        self._published = 0
        self.loaded = False
        self.last_error: LyricSheetError | None = None
        self.last_refreshed: datetime | None = None

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def songs(self) -> tuple[Song, ...]:
        return self._catalog.songs

    @property
    def artist_meta(self) -> dict[str, ArtistMeta]:
        return self._catalog.artist_meta

    def refresh(self) -> bool:
        """
        Load a fresh catalog and publish it if still current.

        Returns:
            True if a new catalog was published, False if the refresh failed
            or its result was superseded by a newer refresh.
        """
        with self._lock:
            self._started += 1
            generation = self._started

        try:
            fresh = self._loader()
        except LyricSheetError as e:
            logger.error(f"Catalog refresh failed, keeping previous data: {e.message}")
            with self._lock:
                self.last_error = e
            return False

        fresh = replace(fresh, songs=sort_newest_first(fresh.songs))

        with self._lock:
            if generation < self._published:
                logger.debug(f"Discarding stale refresh #{generation} (#{self._published} already published)")
                return False
            self._catalog = fresh
            self._published = generation
            self.loaded = True
            self.last_error = None
            self.last_refreshed = datetime.now()

        logger.info(f"Catalog refreshed: {len(fresh.songs)} songs, {len(fresh.artist_meta)} artists")
        return True
