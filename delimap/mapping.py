"""
Line -> header -> record mapping.

Lines are split one at a time; a quoted field may contain the separator
but never a line break.
"""

from __future__ import annotations

import csv
from typing import List, Optional, Sequence

from .models import Record, RecordView
from .rules import QUOTE_CHAR

_CSV_UNSAFE = (QUOTE_CHAR, "\r", "\n")


def _split_scanned(line: str, separator: str) -> List[str]:
    fields: List[str] = []
    current: List[str] = []
    in_quotes = False
    i = 0
    n = len(line)
    step = len(separator)

    while i < n:
        ch = line[i]
        if in_quotes:
            if ch == QUOTE_CHAR:
                # doubled quote inside a quoted field is a literal quote
                if line.startswith(QUOTE_CHAR, i + 1):
                    current.append(QUOTE_CHAR)
                    i += 2
                    continue
                in_quotes = False
            else:
                current.append(ch)
            i += 1
        elif line.startswith(separator, i):
            fields.append("".join(current))
            current = []
            i += step
        elif ch == QUOTE_CHAR and not current:
            in_quotes = True
            i += 1
        else:
            current.append(ch)
            i += 1

    fields.append("".join(current))
    return fields


def split_line(line: str, separator: str) -> List[str]:
    """Split one line on ``separator``, honouring double-quoted fields."""
    line = line.rstrip("\r\n")
    if not line:
        return []

    # csv only takes one-character delimiters and rejects quote or line-break
    # delimiters and line breaks inside unquoted fields
    if len(separator) > 1 or separator in _CSV_UNSAFE or "\r" in line or "\n" in line:
        return _split_scanned(line, separator)

    reader = csv.reader([line], delimiter=separator, quotechar=QUOTE_CHAR)
    return next(reader, [])


def extract_header(lines: Sequence[str], separator: Optional[str]) -> List[str]:
    if not lines or not separator:
        return []
    return split_line(lines[0], separator)


def zip_record(fields: Sequence[str], header: Sequence[str]) -> Record:
    """
    Map positional fields onto header names.

    Extra fields are dropped and missing ones stay absent. A repeated header
    name keeps the value of its last position.
    """
    return {name: value for name, value in zip(header, fields)}


def build_records(lines: Sequence[str], header: Sequence[str], separator: Optional[str]) -> List[Record]:
    """Build one record per data line; ``lines`` excludes the header line."""
    if not separator:
        return []
    return [zip_record(split_line(line, separator), header) for line in lines]


def build_object_records(
    lines: Sequence[str], header: Sequence[str], separator: Optional[str]
) -> List[RecordView]:
    return [RecordView(record) for record in build_records(lines, header, separator)]
