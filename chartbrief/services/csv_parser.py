"""
Quote-aware CSV tokenizer.

Supports the dialect the uploader produces: comma delimiter, double-quote
quoting with ``""`` as the escape, and LF / CRLF / CR line endings. Parsing
is done in two passes, each a small two-state machine:

1. ``split_lines`` breaks the text into logical lines, ignoring line breaks
   that sit inside a quoted span, and drops whitespace-only lines.
2. ``parse_line`` breaks one logical line into fields, decoding quotes and
   stripping surrounding whitespace from every field.

Rows are not padded or truncated to the header width.
"""
from enum import Enum
from typing import List

from chartbrief.models import ParsedCSV

QUOTE = '"'
DELIMITER = ","


class ScanState(Enum):
    UNQUOTED = "unquoted"
    QUOTED = "quoted"


def _toggle(state: ScanState) -> ScanState:
    return ScanState.UNQUOTED if state is ScanState.QUOTED else ScanState.QUOTED


def split_lines(text: str) -> List[str]:
    """
    Split raw text into logical CSV lines.

    Quote characters are kept in the returned lines (``parse_line`` decodes
    them). ``\\r\\n`` is consumed as a single break.
    """
    lines: List[str] = []
    current: List[str] = []
    state = ScanState.UNQUOTED

    i = 0
    length = len(text)
    while i < length:
        char = text[i]

        if char == QUOTE:
            state = _toggle(state)
            current.append(char)
        elif char in ("\n", "\r") and state is ScanState.UNQUOTED:
            if char == "\r" and i + 1 < length and text[i + 1] == "\n":
                i += 1
            line = "".join(current)
            if line.strip():
                lines.append(line)
            current = []
        else:
            current.append(char)
        i += 1

    line = "".join(current)
    if line.strip():
        lines.append(line)

    return lines


def parse_line(line: str) -> List[str]:
    """Split one logical line into stripped, quote-decoded fields."""
    fields: List[str] = []
    current: List[str] = []
    state = ScanState.UNQUOTED

    i = 0
    length = len(line)
    while i < length:
        char = line[i]

        if state is ScanState.QUOTED:
            if char == QUOTE:
                if i + 1 < length and line[i + 1] == QUOTE:
                    # Escaped quote
                    current.append(QUOTE)
                    i += 1
                else:
                    state = ScanState.UNQUOTED
            else:
                current.append(char)
        else:
            if char == QUOTE:
                state = ScanState.QUOTED
            elif char == DELIMITER:
                fields.append("".join(current).strip())
                current = []
            else:
                current.append(char)
        i += 1

    fields.append("".join(current).strip())
    return fields


def parse_csv(text: str) -> ParsedCSV:
    """
    Parse CSV text into headers and rows.

    The first non-blank logical line becomes the header; every later line
    becomes one row in original order.

    Args:
        text: Decoded CSV content

    Returns:
        ParsedCSV (empty headers and rows when the text has no content lines)
    """
    lines = split_lines(text)

    if not lines:
        return ParsedCSV(headers=(), rows=())

    headers = tuple(parse_line(lines[0]))
    rows = tuple(tuple(parse_line(line)) for line in lines[1:])

    return ParsedCSV(headers=headers, rows=rows)
