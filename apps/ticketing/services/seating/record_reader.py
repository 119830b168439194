"""Tokenize seating exports into delimited records."""

import csv
from dataclasses import dataclass
from typing import Iterator, List, Optional


@dataclass(frozen=True)
class SourceRecord:
    line_number: int
    fields: List[str]
    error: Optional[str] = None


def split_fields(line: str) -> List[str]:
    """
    Split one record into trimmed fields.
    
    Fields are comma separated and double-quote enclosed, with quotes
    escaped by doubling.
    """
    reader = csv.reader([line], delimiter=',', quotechar='"', doublequote=True, strict=False)
    row = next(reader, [])
    return [value.strip() for value in row]


def iter_records(text: str) -> Iterator[SourceRecord]:
    """
    Yield one ``SourceRecord`` per non-empty line.
    
    Lines that the csv tokenizer refuses come back with ``error`` set and no
    fields, so a single bad line never stops the rest of the file.
    
    Args:
        text: Normalized seating text (LF line endings)
    """
    for line_number, line in enumerate(text.split('\n'), start=1):
        if not line.strip():
            continue
        try:
            fields = split_fields(line)
        except csv.Error as e:
            yield SourceRecord(line_number=line_number, fields=[], error=str(e))
            continue
        yield SourceRecord(line_number=line_number, fields=fields)
