"""Read an ids.csv export back into ticket records."""

import csv
import io
import logging
from typing import Dict, List, Optional

from apps.ticketing.types import TicketRecord

from .columns import EXPORT_COLUMNS

logger = logging.getLogger(__name__)


def _normalize_header(header: str) -> str:
    return header.strip().lower().replace('_', '')


# normalized header -> TicketRecord attribute, accepting "ID"/"id", "StartTime"/"start_time", ...
_HEADER_LOOKUP = {}
for _header, _attribute in EXPORT_COLUMNS:
    _HEADER_LOOKUP[_normalize_header(_header)] = _attribute
    _HEADER_LOOKUP[_normalize_header(_attribute)] = _attribute


def _row_to_record(row: Dict[str, Optional[str]]) -> TicketRecord:
    values = {}
    for header, value in row.items():
        if header is None:
            continue
        attribute = _HEADER_LOOKUP.get(_normalize_header(header))
        if attribute is not None and attribute not in values:
            values[attribute] = (value or '').strip()
    
    def optional(attribute: str) -> Optional[str]:
        return values.get(attribute) or None
    
    return TicketRecord(
        id=values.get('id', ''),
        artist=values.get('artist', ''),
        date=values.get('date', ''),
        start_time=values.get('start_time', ''),
        venue=values.get('venue', ''),
        category=values.get('category', ''),
        static_text=values.get('static_text', ''),
        formatted_seat=optional('formatted_seat'),
        area=optional('area'),
        row=optional('row'),
        seat_number=optional('seat_number'),
    )


def import_from_csv(text: str) -> List[TicketRecord]:
    """
    Parse CSV text with a header row into ticket records.
    
    Column names are matched case-insensitively. Rows without an ID are
    skipped. Manual custom lines are not part of the export and come back
    as None.
    
    Args:
        text: CSV contents as written by ``export_to_csv``
    
    Returns:
        List of ticket records in file order
    """
    reader = csv.DictReader(io.StringIO(text))
    records = []
    for row in reader:
        record = _row_to_record(row)
        if not record.id:
            continue
        records.append(record)
    
    logger.info(f"[EXPORT] Imported {len(records)} tickets from CSV")
    return records
