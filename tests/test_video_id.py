"""Test canonical video ID extraction"""

import pytest

from lyric_sheet.parsing.video_id import extract_youtube_id, youtube_watch_url

VIDEO_ID = "dQw4w9WgXcQ"


class TestExtractYoutubeId:
    """Test extract_youtube_id()"""

    @pytest.mark.parametrize("value", [
        "dQw4w9WgXcQ",
        "  dQw4w9WgXcQ  ",
        "https://youtu.be/dQw4w9WgXcQ",
        "https://youtu.be/dQw4w9WgXcQ?si=abcdef",
        "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
        "https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=10s",
        "https://www.youtube.com/watch?feature=share&v=dQw4w9WgXcQ",
        "https://www.youtube.com/watch?vi=dQw4w9WgXcQ",
        "https://m.youtube.com/watch?v=dQw4w9WgXcQ",
        "https://www.youtube.com/embed/dQw4w9WgXcQ#t=3",
        "https://www.youtube.com/v/dQw4w9WgXcQ?version=3",
        "https://www.youtube.com/shorts/dQw4w9WgXcQ",
        "https://www.youtube.com/user/someone#p/u/1/dQw4w9WgXcQ",
        "youtube.com/watch?v=dQw4w9WgXcQ",
    ])
    def test_recognized_shapes(self, value):
        assert extract_youtube_id(value) == VIDEO_ID

    @pytest.mark.parametrize("value", [
        "",
        "   ",
        None,
        "not a url",
        "hello world",  # 11 characters, but not URL-safe
        "https://youtu.be/short",
        "https://youtu.be/dQw4w9WgXcQextra",
        "https://example.com/video.mp4",
        "https://www.youtube.com/watch?v=",
        "https://youtu.be/dQw4w9WgXcQ\n?si=abc",  # newline picked up from a multi-line cell
    ])
    def test_rejected_values(self, value):
        assert extract_youtube_id(value) == ""

    def test_bare_ids_with_dash_and_underscore(self):
        assert extract_youtube_id("a-b_c-d_e-f") == "a-b_c-d_e-f"


def test_youtube_watch_url():
    assert youtube_watch_url(VIDEO_ID) == f"https://www.youtube.com/watch?v={VIDEO_ID}"
    assert youtube_watch_url("") == ""
