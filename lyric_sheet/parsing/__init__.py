"""
Pure text parsing for lyric-sheet.

Nothing in this package performs I/O or logging; every function maps a
string to plain values and never raises on malformed input.

    - csv_text: Delimited-text parser (quoted fields, embedded newlines)
    - lyrics: Lyric block normalizer (caret, paragraph and flat formats)
    - video_id: Canonical 11-character video ID extraction
"""

from lyric_sheet.parsing.csv_text import parse_csv
from lyric_sheet.parsing.lyrics import LyricLine, parse_lyrics
from lyric_sheet.parsing.video_id import (
    VIDEO_ID_LENGTH,
    extract_youtube_id,
    youtube_watch_url,
)

__all__ = [
    "parse_csv",
    "LyricLine",
    "parse_lyrics",
    "VIDEO_ID_LENGTH",
    "extract_youtube_id",
    "youtube_watch_url",
]
