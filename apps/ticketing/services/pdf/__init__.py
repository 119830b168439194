"""Ticket PDF rendering: page layout, pagination and layout test overlay."""

from .page_layout import build_page_blocks, render_page, seat_line_text
from .paginator import TicketDocument, document_filename, paginate, partition, render_document
from .overlay import LAYOUT_TEST_FILENAME, load_configured_template, overlay

__all__ = [
    'build_page_blocks',
    'render_page',
    'seat_line_text',
    'TicketDocument',
    'document_filename',
    'paginate',
    'partition',
    'render_document',
    'LAYOUT_TEST_FILENAME',
    'load_configured_template',
    'overlay',
]
