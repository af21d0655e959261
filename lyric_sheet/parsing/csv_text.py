"""
Delimited-text parser for published spreadsheet exports.

The sheet exports are CSV, but lyric cells routinely contain commas,
doubled quotes and embedded newlines, and export line endings vary between
LF and CRLF. The parser is a single left-to-right scan with an explicit
quote state, so a quoted cell may span any number of physical lines.

Rules:
    - '"' toggles quoted state; '""' inside quotes is one literal quote
    - ',' outside quotes ends the current cell
    - '\\n', '\\r' or '\\r\\n' outside quotes ends the current row
    - every other character is appended verbatim (quotes included)
    - cells are trimmed; a row with no cells and an empty buffer is skipped

Usage:
    from lyric_sheet.parsing.csv_text import parse_csv

    rows = parse_csv('title,artist\\n"Hello, World",Someone\\n')
    # [["title", "artist"], ["Hello, World", "Someone"]]
"""

QUOTE = '"'
DELIMITER = ","


def parse_csv(text: str) -> list[list[str]]:
    """
    Parse raw CSV text into rows of trimmed string cells.

    Args:
        text: Full body of one feed.

    Returns:
        List of rows, each a list of cells. Columns are positional;
        rows may have different lengths.
    """
    rows: list[list[str]] = []
    row: list[str] = []
    cell: list[str] = []
    in_quotes = False

    i = 0
    length = len(text)
    while i < length:
        char = text[i]
        next_char = text[i + 1] if i + 1 < length else ""

        if char == QUOTE:
            if in_quotes and next_char == QUOTE:
                cell.append(QUOTE)
                i += 1
            else:
                in_quotes = not in_quotes
        elif char == DELIMITER and not in_quotes:
            row.append("".join(cell).strip())
            cell = []
        elif char in "\r\n" and not in_quotes:
            # The raw buffer is checked before trimming: a whitespace-only
            # line still yields a row with one empty cell.
            if cell or row:
                row.append("".join(cell).strip())
                rows.append(row)
            row = []
            cell = []
            if char == "\r" and next_char == "\n":
                i += 1
        else:
            cell.append(char)
        i += 1

    if cell or row:
        row.append("".join(cell).strip())
        rows.append(row)

    return rows
