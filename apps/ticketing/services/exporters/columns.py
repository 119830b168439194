"""Column layout shared by the ids.csv / ids.xlsx exports and the importer."""

from typing import List, Optional

from apps.ticketing.types import TicketRecord

# (header, TicketRecord attribute)
EXPORT_COLUMNS = (
    ('ID', 'id'),
    ('Artist', 'artist'),
    ('Date', 'date'),
    ('StartTime', 'start_time'),
    ('Venue', 'venue'),
    ('Category', 'category'),
    ('Seat', 'formatted_seat'),
    ('Area', 'area'),
    ('Row', 'row'),
    ('SeatNumber', 'seat_number'),
    ('StaticText', 'static_text'),
)

EXPORT_HEADERS = [header for header, _ in EXPORT_COLUMNS]


def record_to_row(record: TicketRecord) -> List[str]:
    """Column values of one record; absent optional fields become ''."""
    values: List[Optional[str]] = [getattr(record, attribute) for _, attribute in EXPORT_COLUMNS]
    return ['' if value is None else str(value) for value in values]
