"""
Lyric block normalization.

A lyrics cell in the song sheet has been authored in three different
conventions over the life of the sheet. All three are still present in the
data, so each one must keep working:

    1. Caret lines (legacy):
           original^romanization^translation
           original^romanization^translation

    2. Paragraph blocks, one stanza line per block, blocks separated by
       blank lines:
           original
           romanization
           translation

           original
           ...

    3. A flat stream of lines with no separators at all, which is read as
       consecutive groups of three (original, romanization, translation).

Every convention is normalized into an ordered list of LyricLine.

Usage:
    from lyric_sheet.parsing.lyrics import parse_lyrics

    lines = parse_lyrics("L1\\nL2\\nL3")
    # [LyricLine(original="L1", romanization="L2", translation="L3")]
"""

import re
from dataclasses import dataclass
from typing import Any

CARET = "^"
LINES_PER_GROUP = 3

# One or more blank (or whitespace-only) lines between blocks
_BLOCK_SEPARATOR = re.compile(r"\n\s*\n")


@dataclass(frozen=True)
class LyricLine:
    """
    One performed lyric line with its optional companions.

    Attributes:
        original: Line in the original language. Never empty.
        romanization: Romanized reading of the original, if provided.
        translation: Translation of the original, if provided.
    """

    original: str
    romanization: str | None = None
    translation: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"original": self.original}
        if self.romanization:
            data["romanization"] = self.romanization
        if self.translation:
            data["translation"] = self.translation
        return data


def parse_lyrics(raw: str | None) -> list[LyricLine]:
    """
    Normalize one raw lyrics cell into LyricLine objects.

    The caret format wins whenever a '^' appears anywhere in the cell,
    even if the cell also contains blank-line separators.

    Args:
        raw: The lyrics cell exactly as parsed from the sheet.

    Returns:
        Lines in performance order. Empty for empty input.
    """
    if not raw:
        return []

    if CARET in raw:
        return _parse_caret_lines(raw)

    return [
        line
        for line in (_block_to_line(block) for block in _split_blocks(raw))
        if line is not None
    ]


def _parse_caret_lines(raw: str) -> list[LyricLine]:
    result = []
    for physical_line in raw.split("\n"):
        parts = [part.strip() for part in physical_line.split(CARET)]
        original = parts[0]
        if not original:
            continue
        # Parts after the third are ignored
        result.append(LyricLine(
            original=original,
            romanization=parts[1] if len(parts) > 1 and parts[1] else None,
            translation=parts[2] if len(parts) > 2 and parts[2] else None,
        ))
    return result


def _split_blocks(raw: str) -> list[str]:
    blocks = _BLOCK_SEPARATOR.split(raw)

    # Best-effort fallback: a single block with more than three physical
    # lines is assumed to be consecutive 3-line groups. This guesses the
    # author's intent and is not verified against the sheet.
    if len(blocks) == 1 and len(raw.split("\n")) > LINES_PER_GROUP:
        lines = _non_empty_lines(raw)
        return [
            "\n".join(lines[i:i + LINES_PER_GROUP])
            for i in range(0, len(lines), LINES_PER_GROUP)
        ]

    return blocks


def _block_to_line(block: str) -> LyricLine | None:
    lines = _non_empty_lines(block)
    if not lines:
        return None
    return LyricLine(
        original=lines[0],
        romanization=lines[1] if len(lines) > 1 else None,
        translation=lines[2] if len(lines) > 2 else None,
    )


def _non_empty_lines(text: str) -> list[str]:
    return [line.strip() for line in text.split("\n") if line.strip()]
