"""
Seating export parser.

Turns the text export of a seating plan into an ordered list of
``SeatDescriptor`` values, one per printable seat. Each line of the export
looks like::

    " Tribüne K  Reihe 8   Platz 1","1:Sitzplatz","frei","-","-"

i.e. description, category code and status followed by ignored extras.
Aggregate lines such as ``"Innenraum Stehplatz ... (100 Stapelplätze)"``
stand for N anonymous seats and are expanded.

Malformed lines never abort the parse: they are skipped and recorded as a
``RejectedRecord`` for diagnostics.
"""

import enum
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from apps.ticketing.types import SeatDescriptor

from .category_parser import extract_category
from .description_parser import extract_aggregate_count, parse_description
from .normalizer import normalize_seating_text
from .record_reader import SourceRecord, iter_records

logger = logging.getLogger(__name__)

MIN_FIELDS = 3


class RejectionReason(str, enum.Enum):
    UNREADABLE_RECORD = 'unreadable_record'
    TOO_FEW_FIELDS = 'too_few_fields'
    EMPTY_DESCRIPTION = 'empty_description'
    EMPTY_CATEGORY = 'empty_category'
    EMPTY_STATUS = 'empty_status'


@dataclass(frozen=True)
class RejectedRecord:
    line_number: int
    reason: RejectionReason
    fields: Tuple[str, ...] = ()


@dataclass(frozen=True)
class SeatingParseResult:
    seats: List[SeatDescriptor] = field(default_factory=list)
    rejections: List[RejectedRecord] = field(default_factory=list)

    @property
    def rejected_count(self) -> int:
        return len(self.rejections)


def _check_record(record: SourceRecord) -> Optional[RejectionReason]:
    """Return why a record cannot be used, or None if it is usable."""
    if record.error is not None:
        return RejectionReason.UNREADABLE_RECORD
    if len(record.fields) < MIN_FIELDS:
        return RejectionReason.TOO_FEW_FIELDS

    description, category_field, status = record.fields[:MIN_FIELDS]
    if not description.replace('"', '').strip():
        return RejectionReason.EMPTY_DESCRIPTION
    if not category_field:
        return RejectionReason.EMPTY_CATEGORY
    if not status:
        return RejectionReason.EMPTY_STATUS
    return None


def _record_to_seats(record: SourceRecord) -> List[SeatDescriptor]:
    """Map one valid record to its seat descriptors (N for aggregate lines)."""
    description = record.fields[0].replace('"', '').strip()
    category = extract_category(record.fields[1])
    status = record.fields[2]

    aggregate_count = extract_aggregate_count(description)
    if aggregate_count is not None:
        seat = SeatDescriptor.from_fields(None, None, None, category, status)
        return [seat] * aggregate_count

    position = parse_description(description)
    return [
        SeatDescriptor.from_fields(
            area=position.area,
            row=position.row,
            seat_number=position.seat_number,
            category=category,
            status=status,
        )
    ]


def _classify(record: SourceRecord) -> Union[RejectedRecord, List[SeatDescriptor]]:
    reason = _check_record(record)
    if reason is not None:
        return RejectedRecord(
            line_number=record.line_number,
            reason=reason,
            fields=tuple(record.fields),
        )
    return _record_to_seats(record)


def parse_seating_report(content: str) -> SeatingParseResult:
    """
    Parse seating data and keep the reason for every skipped line.

    Args:
        content: Decoded seating export contents

    Returns:
        SeatingParseResult with seats in input order and rejected lines
    """
    seats: List[SeatDescriptor] = []
    rejections: List[RejectedRecord] = []

    for outcome in map(_classify, iter_records(normalize_seating_text(content))):
        if isinstance(outcome, RejectedRecord):
            logger.debug(
                f"[SEATING] Skipping line {outcome.line_number}: {outcome.reason.value}"
            )
            rejections.append(outcome)
        else:
            seats.extend(outcome)

    logger.info(f"[SEATING] Parsed {len(seats)} seats ({len(rejections)} lines skipped)")

    return SeatingParseResult(seats=seats, rejections=rejections)


def parse_seating(content: str) -> List[SeatDescriptor]:
    """
    Parse seating data from raw file contents.

    Args:
        content: Decoded seating export contents

    Returns:
        List of seat descriptors in input order; malformed lines are skipped
    """
    return parse_seating_report(content).seats
