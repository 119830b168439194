"""Join seats, identifiers and event data into printable ticket records."""

import logging
from typing import List, Optional, Sequence

from apps.ticketing.exceptions import ConfigurationError, IdentifierCountMismatchError
from apps.ticketing.types import EventConfig, ManualSeat, SeatDescriptor, TicketRecord

logger = logging.getLogger(__name__)


def format_seat(area: Optional[str], row: Optional[str], seat_number: Optional[str]) -> Optional[str]:
    """
    Human readable seat label.

    Example:
        ("Tribüne K", "8", "1") -> "Tribüne K, Reihe 8, Platz 1"
    """
    parts = []
    if area:
        parts.append(area)
    if row:
        parts.append(f"Reihe {row}")
    if seat_number:
        parts.append(f"Platz {seat_number}")
    return ', '.join(parts) if parts else None


def build_ticket_record(seat: SeatDescriptor, ticket_id: str, config: EventConfig) -> TicketRecord:
    """Build the ticket for one (seat, identifier) pair."""
    common = dict(
        id=ticket_id,
        artist=config.artist,
        date=config.date,
        start_time=config.start_time,
        venue=config.venue,
        category=seat.category or config.category,
        static_text=config.static_text,
        area=seat.area,
    )

    if isinstance(seat.kind, ManualSeat):
        return TicketRecord(custom_line=seat.kind.custom_line, **common)

    return TicketRecord(
        formatted_seat=format_seat(seat.area, seat.kind.row, seat.kind.seat_number),
        row=seat.kind.row,
        seat_number=seat.kind.seat_number,
        **common,
    )


def assemble_tickets(
    seats: Sequence[SeatDescriptor],
    ticket_ids: Sequence[str],
    config: EventConfig,
) -> List[TicketRecord]:
    """
    Pair seats with identifiers positionally and apply the event data.

    Args:
        seats: Seat descriptors in print order
        ticket_ids: One identifier per seat, same order
        config: Event configuration shared by all tickets

    Returns:
        List of ticket records, one per seat

    Raises:
        IdentifierCountMismatchError: if the sequences differ in length
        ConfigurationError: if a seat has no category and the event has no default
    """
    if len(seats) != len(ticket_ids):
        raise IdentifierCountMismatchError(len(seats), len(ticket_ids))

    if not config.category and any(not seat.category for seat in seats):
        raise ConfigurationError(
            ['category'],
            "Seats without a category need a default event category",
        )

    records = [
        build_ticket_record(seat, ticket_id, config)
        for seat, ticket_id in zip(seats, ticket_ids)
    ]

    logger.debug(f"[BATCH] Assembled {len(records)} ticket records")
    return records
