"""Manual seat specification (no seating export)."""

import logging
from typing import List, Optional

from django.conf import settings

from apps.ticketing.exceptions import ValidationError
from apps.ticketing.types import MANUAL_STATUS, ManualSeat, SeatDescriptor

logger = logging.getLogger(__name__)

DEFAULT_MAX_MANUAL_TICKETS = 1000


def get_max_manual_tickets() -> int:
    return getattr(settings, 'TICKETING', {}).get('MAX_MANUAL_TICKETS', DEFAULT_MAX_MANUAL_TICKETS)


def build_manual_seats(count: int, line1: Optional[str] = '', line2: Optional[str] = '') -> List[SeatDescriptor]:
    """
    Build ``count`` identical manual seats.
    
    Args:
        count: Number of tickets to print
        line1: Printed in the area position ("Zeile 1")
        line2: Printed instead of row and seat ("Zeile 2")
    
    Returns:
        List of manual seat descriptors with no category of their own
    """
    max_tickets = get_max_manual_tickets()
    if count < 1 or count > max_tickets:
        raise ValidationError(f"Ticket count must be between 1 and {max_tickets}, got {count}")
    
    seat = SeatDescriptor(
        category='',
        status=MANUAL_STATUS,
        area=(line1 or '').strip() or None,
        kind=ManualSeat(custom_line=(line2 or '').strip() or None),
    )
    logger.debug(f"[SEATING] Built {count} manual seats")
    return [seat] * count
