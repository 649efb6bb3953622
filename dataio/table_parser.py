# dataio/table_parser.py
"""Tokenizer for delimited text tables.

Lines are split first and then scanned character by character with two
states, inside and outside a quoted field. Quotes follow the RFC 4180
convention: a field that starts with ``"`` runs to the next quote that is not
doubled, and ``""`` inside it stands for one literal quote. Unquoted fields are
trimmed of surrounding whitespace. A quoted field cannot span lines.
"""
import logging
import re
from typing import List

from models.errors import EmptyInputError
from models.table import ParsedTable

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = ","
QUOTE = '"'

_LINE_BREAK = re.compile(r"\r?\n")


def split_lines(text: str) -> List[str]:
    """Split *text* on ``\\n``/``\\r\\n`` and drop lines that are blank after trimming."""
    return [line for line in _LINE_BREAK.split(text) if line.strip() != ""]


def tokenize_line(line: str, delimiter: str = DEFAULT_DELIMITER) -> List[str]:
    """Split one line into field values."""
    fields: List[str] = []
    n = len(line)
    i = 0
    while True:
        # i is at the start of a field; skip whitespace before a possible opening quote
        j = i
        while j < n and line[j] != delimiter and line[j].isspace():
            j += 1

        if j < n and line[j] == QUOTE:
            value, i = _scan_quoted(line, j + 1, delimiter)
            fields.append(value)
        else:
            end = line.find(delimiter, i)
            if end < 0:
                end = n
            fields.append(line[i:end].strip())
            i = end

        if i >= n:
            break
        # line[i] is a delimiter; a trailing one opens a final empty field
        i += 1
        if i == n:
            fields.append("")
            break
    return fields


def _scan_quoted(line: str, i: int, delimiter: str):
    """Decode a quoted field whose content starts at *i*.

    Returns the value and the index of the delimiter ending the field (or the
    line length). Characters between the closing quote and the delimiter are
    dropped; an unterminated quote runs to the end of the line.
    """
    n = len(line)
    chars = []
    while i < n:
        c = line[i]
        if c == QUOTE:
            if i + 1 < n and line[i + 1] == QUOTE:
                chars.append(QUOTE)
                i += 2
                continue
            i += 1
            break
        chars.append(c)
        i += 1
    else:
        logger.debug("Unterminated quoted field in line: %r", line)

    end = line.find(delimiter, i)
    if end < 0:
        end = n
    return "".join(chars), end


def parse(text: str, delimiter: str = DEFAULT_DELIMITER) -> ParsedTable:
    """Parse delimited *text* into a :class:`ParsedTable`.

    The first non-blank line is the header row. Rows keep whatever number of
    fields they have.

    Raises:
        EmptyInputError: if *text* has no non-blank lines.
        ValueError: if *delimiter* is not a single non-quote character.
    """
    if not isinstance(delimiter, str) or len(delimiter) != 1 or delimiter in (QUOTE, "\r", "\n"):
        raise ValueError(f"Delimiter must be a single character, got {delimiter!r}")

    lines = split_lines(text or "")
    if not lines:
        raise EmptyInputError()

    headers = tokenize_line(lines[0], delimiter)
    rows = [tokenize_line(line, delimiter) for line in lines[1:]]
    logger.debug("Parsed %d columns, %d rows", len(headers), len(rows))
    return ParsedTable(headers=headers, rows=rows)
