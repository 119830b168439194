"""Excel export of generated tickets (ids.xlsx)."""

import logging
from io import BytesIO
from typing import Sequence

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter

from apps.ticketing.types import TicketRecord

from .columns import EXPORT_HEADERS, record_to_row

logger = logging.getLogger(__name__)

EXCEL_FILENAME = 'ids.xlsx'

COLUMN_WIDTHS = {
    'ID': 38,
    'Artist': 24,
    'Date': 12,
    'StartTime': 10,
    'Venue': 24,
    'Category': 20,
    'Seat': 32,
    'Area': 18,
    'Row': 8,
    'SeatNumber': 12,
    'StaticText': 40,
}


def export_to_excel(records: Sequence[TicketRecord]) -> BytesIO:
    """
    Export ticket records to an Excel file.
    
    Args:
        records: Ticket records in print order
        
    Returns:
        BytesIO object with Excel file content
    """
    workbook = Workbook()
    worksheet = workbook.active
    worksheet.title = "Tickets"
    
    _setup_excel_headers(worksheet)
    
    for row_idx, record in enumerate(records, start=2):
        for col_idx, value in enumerate(record_to_row(record), start=1):
            worksheet.cell(row=row_idx, column=col_idx, value=value)
    
    _adjust_excel_column_widths(worksheet)
    worksheet.freeze_panes = 'A2'
    
    output = BytesIO()
    workbook.save(output)
    output.seek(0)
    
    logger.info(f"[EXPORT] Exported {len(records)} tickets to Excel")
    
    return output


def _setup_excel_headers(worksheet):
    """Setup Excel worksheet headers with styling."""
    header_fill = PatternFill(start_color="366092", end_color="366092", fill_type="solid")
    header_font = Font(bold=True, color="FFFFFF")
    
    for col_idx, header in enumerate(EXPORT_HEADERS, start=1):
        cell = worksheet.cell(row=1, column=col_idx, value=header)
        cell.fill = header_fill
        cell.font = header_font
        cell.alignment = Alignment(horizontal='center', vertical='center')


def _adjust_excel_column_widths(worksheet):
    for col_idx, header in enumerate(EXPORT_HEADERS, start=1):
        worksheet.column_dimensions[get_column_letter(col_idx)].width = COLUMN_WIDTHS.get(header, 15)
