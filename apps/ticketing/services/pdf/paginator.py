"""
Batch paginator.

Splits the ticket records into consecutive groups of at most
``MAX_PER_DOCUMENT`` and renders one PDF per group, one A7 page per ticket,
in input order. Documents are independent, so they may be rendered in a
thread pool; the result list always follows group order.
"""

import io
import logging
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from django.conf import settings
from reportlab.pdfgen import canvas as pdf_canvas

from apps.ticketing.exceptions import DocumentEncodingError
from apps.ticketing.types import TicketRecord

from .constants import MAX_PER_DOCUMENT, PAGE_HEIGHT, PAGE_SIZE
from .page_layout import build_page_blocks, render_page

logger = logging.getLogger(__name__)


def document_filename(index: int) -> str:
    """``tickets-001.pdf`` for the first document (0-based index)."""
    return f"tickets-{index + 1:03d}.pdf"


@dataclass(frozen=True)
class TicketDocument:
    index: int
    content: bytes
    ticket_ids: Tuple[str, ...]

    @property
    def filename(self) -> str:
        return document_filename(self.index)

    @property
    def page_count(self) -> int:
        return len(self.ticket_ids)


def get_max_per_document() -> int:
    return getattr(settings, 'TICKETING', {}).get('MAX_PER_DOCUMENT', MAX_PER_DOCUMENT)


def partition(records: Sequence[TicketRecord], size: int) -> List[List[TicketRecord]]:
    """Consecutive groups of ``size`` records; the last one may be shorter."""
    if size < 1:
        raise ValueError(f"Group size must be positive, got {size}")
    return [list(records[start:start + size]) for start in range(0, len(records), size)]


def render_document(
    records: Sequence[TicketRecord],
    qr_images: Dict[str, bytes],
    include_qr: bool = True,
) -> bytes:
    """Render one PDF with one page per record, in record order."""
    buffer = io.BytesIO()
    # invariant mode: no timestamps or random document ids
    pdf = pdf_canvas.Canvas(buffer, pagesize=PAGE_SIZE, invariant=1)
    if records:
        pdf.setTitle(f"{records[0].artist} - {records[0].date}")
    
    for record in records:
        qr_image = qr_images.get(record.id) if include_qr else None
        blocks = build_page_blocks(record, qr_image, include_qr)
        render_page(pdf, blocks, page_height=PAGE_HEIGHT)
        pdf.showPage()
    
    pdf.save()
    return buffer.getvalue()


def _render_group(
    index: int,
    group: Sequence[TicketRecord],
    qr_images: Dict[str, bytes],
    include_qr: bool,
) -> TicketDocument:
    ticket_ids = tuple(record.id for record in group)
    try:
        content = render_document(group, qr_images, include_qr)
    except Exception as e:
        logger.error(f"❌ [PDF] Document {index + 1} failed: {e}", exc_info=True)
        raise DocumentEncodingError(index, ticket_ids, str(e)) from e
    
    logger.debug(f"[PDF] Rendered {document_filename(index)} with {len(group)} pages")
    return TicketDocument(index=index, content=content, ticket_ids=ticket_ids)


def paginate(
    records: Sequence[TicketRecord],
    qr_images: Optional[Dict[str, bytes]] = None,
    include_qr: bool = True,
    max_per_document: Optional[int] = None,
    max_workers: int = 1,
) -> List[TicketDocument]:
    """
    Render ticket records into fixed-capacity PDF documents.
    
    Args:
        records: Ticket records in print order
        qr_images: Ticket id to PNG bytes; missing ids only lose their QR code
        include_qr: Whether QR codes are printed
        max_per_document: Page cap per document (defaults to TICKETING['MAX_PER_DOCUMENT'])
        max_workers: Documents rendered in parallel
    
    Returns:
        ``ceil(len(records) / max_per_document)`` documents in group order
    
    Raises:
        DocumentEncodingError: naming the group that failed
    """
    if max_per_document is None:
        max_per_document = get_max_per_document()
    qr_images = qr_images or {}
    groups = partition(records, max_per_document)
    
    start_time = time.time()
    
    def render(indexed_group):
        index, group = indexed_group
        return _render_group(index, group, qr_images, include_qr)
    
    if max_workers <= 1 or len(groups) <= 1:
        documents = [render(item) for item in enumerate(groups)]
    else:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            documents = list(executor.map(render, enumerate(groups)))
    
    duration_ms = int((time.time() - start_time) * 1000)
    logger.info(
        f"✅ [PDF] Rendered {len(records)} tickets into {len(documents)} documents in {duration_ms}ms"
    )
    return documents
