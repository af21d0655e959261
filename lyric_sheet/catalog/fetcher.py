"""
HTTP client for the published spreadsheet feeds.

Both feeds come from the same "publish to web" URL; the tab is selected
with a gid parameter and every request carries a millisecond timestamp so
intermediate caches never serve a stale export.

    songs (primary):  <base>?output=csv&gid=<song_gid>&single=true&t=<ms>
    songs (fallback): <base>?output=csv&t=<ms>          (first tab)
    artists:          <base>?output=csv&gid=<artist_gid>&single=true&t=<ms>

A wrong gid or an unpublished sheet is not reported with a status code:
the server answers 200 with an HTML page. is_html_document() detects that,
and fetch_feed_text() turns it into FeedUnavailableError.

Usage:
    from lyric_sheet.catalog.fetcher import SheetClient

    client = SheetClient(config.sheet, config.network)
    text = client.fetch_songs_text(timestamp_ms())
"""

import time
from typing import Any

import requests

from lyric_sheet.core.config import NetworkConfig, SheetConfig
from lyric_sheet.core.exceptions import FeedTransportError, FeedUnavailableError
from lyric_sheet.core.logger import get_logger

logger = get_logger(__name__)

HTML_DOCTYPE_MARKER = "<!doctype html"


def is_html_document(text: str) -> bool:
    """Return True if a feed body is an HTML page rather than CSV."""
    return text.strip()[:len(HTML_DOCTYPE_MARKER)].lower() == HTML_DOCTYPE_MARKER


def timestamp_ms() -> int:
    """Cache-busting timestamp shared by the requests of one ingestion run."""
    return int(time.time() * 1000)


class SheetClient:
    """
    Fetches raw CSV text for the song and artist feeds.

    The client holds a requests.Session, so connections are reused between
    the feeds of one run. requests does not document Session as thread-safe;
    the assembler only issues one GET per feed concurrently and never
    mutates the session while requests are in flight.

    Attributes:
        sheet: Sheet location (base URL and gids).
        network: Timeout and User-Agent.
    """

    def __init__(
        self,
        sheet: SheetConfig,
        network: NetworkConfig,
        session: requests.Session | None = None
    ) -> None:
        self.sheet = sheet
        self.network = network
        self._session = session or requests.Session()
        self._session.headers.update({"User-Agent": network.user_agent})

    def song_params(self, timestamp: int) -> dict[str, Any]:
        return {"output": "csv", "gid": self.sheet.song_gid, "single": "true", "t": timestamp}

    def fallback_song_params(self, timestamp: int) -> dict[str, Any]:
        return {"output": "csv", "t": timestamp}

    def artist_params(self, timestamp: int) -> dict[str, Any]:
        return {"output": "csv", "gid": self.sheet.artist_gid, "single": "true", "t": timestamp}

    def fetch_feed_text(self, feed: str, params: dict[str, Any]) -> str:
        """
        GET one feed and return its body.

        Args:
            feed: Feed name for errors and logs ("songs" or "artists").
            params: Query parameters (see the *_params methods).

        Returns:
            The CSV body.

        Raises:
            FeedTransportError: On connection error, timeout or non-2xx status.
            FeedUnavailableError: If the body is an HTML document.
        """
        url = self.sheet.base_url
        logger.debug(f"GET {feed} feed: {url} {params}")

        try:
            response = self._session.get(url, params=params, timeout=self.network.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            status_code = getattr(getattr(e, "response", None), "status_code", None)
            raise FeedTransportError(
                f"Request for {feed} feed failed: {e}",
                feed=feed,
                details={"url": url, "params": params, "status_code": status_code, "original_error": str(e)}
            ) from e

        text = response.text
        if is_html_document(text):
            raise FeedUnavailableError(
                f"The {feed} feed returned HTML instead of CSV. Check the gid and the sheet's publish settings.",
                feed=feed,
                details={"url": url, "params": params}
            )

        logger.debug(f"Fetched {feed} feed ({len(text)} characters)")
        return text

    def fetch_songs_text(self, timestamp: int) -> str:
        """
        Fetch the song tab by gid.

        Raises:
            FeedUnavailableError: Also when the body is empty, so the caller
                                  retries the fallback locator.
        """
        params = self.song_params(timestamp)
        text = self.fetch_feed_text("songs", params)
        if not text.strip():
            raise FeedUnavailableError(
                "The songs feed returned an empty body.",
                feed="songs",
                details={"url": self.sheet.base_url, "params": params}
            )
        return text

    def fetch_fallback_songs_text(self, timestamp: int) -> str:
        return self.fetch_feed_text("songs", self.fallback_song_params(timestamp))

    def fetch_artists_text(self, timestamp: int) -> str:
        return self.fetch_feed_text("artists", self.artist_params(timestamp))

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "SheetClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
