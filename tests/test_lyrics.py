"""Test lyric block normalization"""

from lyric_sheet.parsing.lyrics import LyricLine, parse_lyrics


class TestParagraphFormat:
    """Blank-line separated blocks"""

    def test_single_three_line_block(self):
        assert parse_lyrics("L1\nL2\nL3") == [
            LyricLine(original="L1", romanization="L2", translation="L3")
        ]

    def test_blocks_separated_by_blank_lines(self):
        raw = "A1\nA2\nA3\n\nB1\nB2"
        assert parse_lyrics(raw) == [
            LyricLine("A1", "A2", "A3"),
            LyricLine("B1", "B2", None),
        ]

    def test_several_blank_lines_are_one_separator(self):
        assert parse_lyrics("A\n  \n\n\nB") == [LyricLine("A"), LyricLine("B")]

    def test_lines_beyond_third_are_ignored(self):
        assert parse_lyrics("a\nb\nc\nd\n\ne") == [
            LyricLine("a", "b", "c"),
            LyricLine("e"),
        ]

    def test_lines_are_trimmed(self):
        assert parse_lyrics("  L1  \r\n L2\r\nL3 ") == [LyricLine("L1", "L2", "L3")]


class TestFlatFormat:
    """A single block longer than three lines is chunked by three"""

    def test_nine_lines_become_three_stanzas(self):
        raw = "\n".join(f"line{i}" for i in range(1, 10))
        assert parse_lyrics(raw) == [
            LyricLine("line1", "line2", "line3"),
            LyricLine("line4", "line5", "line6"),
            LyricLine("line7", "line8", "line9"),
        ]

    def test_partial_last_group_is_kept(self):
        raw = "1\n2\n3\n4"
        assert parse_lyrics(raw) == [LyricLine("1", "2", "3"), LyricLine("4")]

    def test_empty_lines_are_skipped_when_chunking(self):
        raw = "1\n2\n3\n4\n5\n6\n   "
        assert parse_lyrics(raw) == [LyricLine("1", "2", "3"), LyricLine("4", "5", "6")]


class TestCaretFormat:
    """Legacy original^romanization^translation lines"""

    def test_caret_lines(self):
        raw = "orig^rom^trans\nonly^\n^no original\n"
        assert parse_lyrics(raw) == [
            LyricLine("orig", "rom", "trans"),
            LyricLine("only", None, None),
        ]

    def test_caret_wins_over_blank_line_blocks(self):
        raw = "x^y\nz\nw\n\nq"
        assert parse_lyrics(raw) == [
            LyricLine("x", "y"),
            LyricLine("z"),
            LyricLine("w"),
            LyricLine("q"),
        ]

    def test_extra_caret_parts_are_ignored(self):
        assert parse_lyrics("a^b^c^d") == [LyricLine("a", "b", "c")]

    def test_parts_are_trimmed(self):
        assert parse_lyrics(" a ^ b ^ c \r\n") == [LyricLine("a", "b", "c")]


class TestEmptyInput:

    def test_empty_and_none(self):
        assert parse_lyrics("") == []
        assert parse_lyrics(None) == []

    def test_whitespace_only(self):
        assert parse_lyrics("   \n  ") == []


def test_lyric_line_to_dict_omits_missing_parts():
    assert LyricLine("a").to_dict() == {"original": "a"}
    assert LyricLine("a", "b", "c").to_dict() == {"original": "a", "romanization": "b", "translation": "c"}
