"""CSV export of generated tickets (ids.csv) for box-office reconciliation."""

import csv
import io
import logging
from typing import Sequence

from apps.ticketing.types import TicketRecord

from .columns import EXPORT_HEADERS, record_to_row

logger = logging.getLogger(__name__)

CSV_FILENAME = 'ids.csv'


def export_to_csv(records: Sequence[TicketRecord]) -> str:
    """
    Flatten ticket records to comma separated text.
    
    Values containing a comma, a double quote or a line break are quoted,
    with inner quotes doubled. The header row is always written.
    
    Args:
        records: Ticket records in print order
    
    Returns:
        CSV text with ``\\n`` line endings
    """
    output = io.StringIO()
    writer = csv.writer(output, delimiter=',', quotechar='"', quoting=csv.QUOTE_MINIMAL, lineterminator='\n')
    
    writer.writerow(EXPORT_HEADERS)
    for record in records:
        writer.writerow(record_to_row(record))
    
    logger.info(f"[EXPORT] Exported {len(records)} tickets to CSV")
    return output.getvalue()
