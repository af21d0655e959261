"""
Canonical video ID extraction.

The video column of the song sheet holds whatever the editor pasted:
a bare ID, a watch URL, a youtu.be short link, an embed or shorts URL,
a mobile link, sometimes with timestamps or playlist parameters attached.
extract_youtube_id() reduces all of these to the 11-character ID, or to
an empty string when nothing valid can be found. It never raises.

Examples:
    extract_youtube_id("dQw4w9WgXcQ")                                  # "dQw4w9WgXcQ"
    extract_youtube_id("https://youtu.be/dQw4w9WgXcQ")                 # "dQw4w9WgXcQ"
    extract_youtube_id("https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=10s")
                                                                       # "dQw4w9WgXcQ"
    extract_youtube_id("not a url")                                    # ""
"""

import re

VIDEO_ID_LENGTH = 11

_BARE_ID = re.compile(r"[A-Za-z0-9_-]{11}")

# Known path prefixes (youtu.be/, v/, vi/, u/<c>/, embed/, shorts/) or a v=/vi=
# query parameter after '?', 'watch?' or '&'. The greedy prefix makes the last
# occurrence win; the candidate stops at the first '#', '&' or '?'.
_URL_PATTERN = re.compile(
    r"^.*(?:(?:youtu\.be/|v/|vi/|u/\w/|embed/|shorts/)|(?:(?:watch)?\?vi?=|&vi?=))([^#&?]*).*"
)


def extract_youtube_id(value: str | None) -> str:
    """
    Extract the canonical 11-character video ID from a URL or bare ID.

    Args:
        value: Raw cell content. May be None, empty, an ID or a URL.

    Returns:
        The video ID, or "" if the input does not contain a valid one.
    """
    if not value:
        return ""

    candidate = value.strip()
    if _BARE_ID.fullmatch(candidate):
        return candidate

    match = _URL_PATTERN.match(candidate)
    if match is None:
        return ""

    video_id = match.group(1)
    # Length alone would accept IDs containing spaces or other URL debris
    if not _BARE_ID.fullmatch(video_id):
        return ""
    return video_id


def youtube_watch_url(video_id: str) -> str:
    """Return the watch URL for an ID, or "" for an empty ID."""
    if not video_id:
        return ""
    return f"https://www.youtube.com/watch?v={video_id}"
