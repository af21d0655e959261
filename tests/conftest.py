"""Test configuration and fixtures"""

from datetime import date
from unittest.mock import Mock

import pytest
import requests

from lyric_sheet.catalog.fetcher import SheetClient
from lyric_sheet.core.config import NetworkConfig, SheetConfig

BASE_URL = "https://docs.google.com/spreadsheets/d/e/test-sheet/pub"
SONG_GID = "111"
ARTIST_GID = "222"

HTML_PAGE = "<!DOCTYPE html><html><body>Sorry, unable to open the file.</body></html>"

SONG_CSV = (
    "Title,Translated,Artist,Artist Sub,Category,Album,Year,YouTube,Cover,Lyrics,AI,Date\r\n"
    '봄날,Spring Day,BTS,방탄소년단,"K-POP, OST",You Never Walk Alone,2017,'
    "https://youtu.be/xEeFrLSkMm8,https://example.com/spring-day.jpg,"
    '"보고 싶다\nbogo sipda\nI miss you\n\n눈꽃이 떨어져요\nnunkkochi tteoreojyeoyo\nSnowflakes fall",'
    '"A song about longing, and waiting.",2024-01-05\r\n'
    "Lemon,,Kenshi Yonezu,,J-POP,,,not-a-video,,,,\r\n"
    ",Nameless,Someone\r\n"
    "Only,Two\r\n"
    "Dynamite,,BTS,,,,2020,dQw4w9WgXcQ\r\n"
)

ARTIST_CSV = (
    "Name,Sub Name,Image\n"
    "BTS,Bangtan Boys,https://example.com/bts.jpg\n"
    ",Nobody,\n"
)


@pytest.fixture
def song_csv():
    return SONG_CSV


@pytest.fixture
def artist_csv():
    return ARTIST_CSV


@pytest.fixture
def html_page():
    return HTML_PAGE


@pytest.fixture
def today():
    """Fixed date for release year defaults"""
    return date(2024, 6, 1)


@pytest.fixture
def sheet_config():
    return SheetConfig(base_url=BASE_URL, song_gid=SONG_GID, artist_gid=ARTIST_GID)


@pytest.fixture
def network_config():
    return NetworkConfig(timeout=5.0, user_agent="lyric-sheet-tests")


def make_response(text, status_code=200):
    """Build a fake requests.Response"""
    response = Mock()
    response.text = text
    response.status_code = status_code
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status_code} Server Error", response=response
        )
    else:
        response.raise_for_status.return_value = None
    return response


def make_session(songs, artists, fallback=None):
    """
    Build a fake session routing requests by feed.

    Each argument is the body text to return, a (text, status_code) tuple,
    or an exception instance to raise.
    """
    routes = {SONG_GID: songs, ARTIST_GID: artists, None: fallback}

    def get(url, params=None, timeout=None):
        outcome = routes[(params or {}).get("gid")]
        if isinstance(outcome, Exception):
            raise outcome
        if isinstance(outcome, tuple):
            return make_response(*outcome)
        return make_response(outcome)

    session = Mock()
    session.headers = {}
    session.get.side_effect = get
    return session


@pytest.fixture
def client_factory(sheet_config, network_config):
    """Create a SheetClient over a fake session"""
    def factory(songs, artists=ARTIST_CSV, fallback=None):
        return SheetClient(sheet_config, network_config, session=make_session(songs, artists, fallback))
    return factory


@pytest.fixture(autouse=True)
def clean_sheet_env(monkeypatch):
    """Keep developer environment overrides out of the tests"""
    for name in ("LYRIC_SHEET_URL", "LYRIC_SHEET_SONG_GID", "LYRIC_SHEET_ARTIST_GID"):
        # setenv first so monkeypatch restores values a loaded .env adds
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
