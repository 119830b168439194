"""Decompose seat descriptions into area, row and seat number."""

import re
from dataclasses import dataclass
from typing import Optional

from .normalizer import collapse_whitespace

AGGREGATE_MARKER = 'Stapelplätze'

AGGREGATE_COUNT_PATTERN = re.compile(r'\((\d+)\s+Stapelplätze\)', re.IGNORECASE)
ROW_PATTERN = re.compile(r'Reihe\s+(\d+)', re.IGNORECASE)
SEAT_PATTERN = re.compile(r'Platz\s+(\d+)', re.IGNORECASE)


@dataclass(frozen=True)
class SeatPosition:
    area: Optional[str] = None
    row: Optional[str] = None
    seat_number: Optional[str] = None


EMPTY_POSITION = SeatPosition()


def extract_aggregate_count(description: str) -> Optional[int]:
    """
    Return N for descriptions containing ``(N Stapelplätze)``, else None.
    
    Example:
        "Innenraum Stehplatz  Reihe  Tisch  Platz (100 Stapelplätze)" -> 100
    """
    match = AGGREGATE_COUNT_PATTERN.search(description)
    if match:
        return int(match.group(1))
    return None


def parse_description(description: str) -> SeatPosition:
    """
    Extract area, row and seat number from a seat description.
    
    Example:
        " Tribüne K  Reihe 8   Platz 1" -> area "Tribüne K", row "8", seat "1"
    
    The area is whatever precedes ``Reihe``; without a row there is no
    area even if a seat number is found. Descriptions mentioning
    Stapelplätze without a parseable count decompose to nothing.
    """
    trimmed = description.strip()
    
    if AGGREGATE_MARKER.casefold() in trimmed.casefold():
        return EMPTY_POSITION
    
    row_match = ROW_PATTERN.search(trimmed)
    seat_match = SEAT_PATTERN.search(trimmed)
    
    area = None
    if row_match:
        area = collapse_whitespace(trimmed[:row_match.start()]) or None
    
    return SeatPosition(
        area=area,
        row=row_match.group(1) if row_match else None,
        seat_number=seat_match.group(1) if seat_match else None,
    )
