"""
Ticket batch pipeline.

Runs one generation end to end: validate the event, allocate identifiers,
assemble the ticket records, render QR codes and PDF documents, export the
id table and (optionally) compose the layout test against a template.
The result can be packed into a ZIP archive or written to disk.
"""

import io
import logging
import time
import zipfile
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from django.conf import settings

from apps.ticketing.exceptions import EmptySeatingError
from apps.ticketing.qr_generator import generate_qr_images
from apps.ticketing.types import EventConfig, SeatDescriptor, TicketRecord
from core.utils import get_output_folder_name

from .exporters import CSV_FILENAME, EXCEL_FILENAME, export_to_csv, export_to_excel
from .identifiers import allocate_ids
from .pdf import LAYOUT_TEST_FILENAME, TicketDocument, paginate
from .pdf.overlay import overlay
from .ticket_assembler import assemble_tickets

logger = logging.getLogger(__name__)

TICKETS_DIRNAME = 'tickets'


@dataclass(frozen=True)
class TicketBatchResult:
    """Everything one generation run produced."""
    records: List[TicketRecord]
    documents: List[TicketDocument]
    csv_text: str
    excel_bytes: Optional[bytes] = None
    layout_test: Optional[bytes] = None
    artist: str = ''
    date: str = ''

    @property
    def ticket_count(self) -> int:
        return len(self.records)

    @property
    def document_count(self) -> int:
        return len(self.documents)

    @property
    def folder_name(self) -> str:
        return get_output_folder_name(self.artist, self.date)


def _ticketing_setting(name: str, default):
    return getattr(settings, 'TICKETING', {}).get(name, default)


def generate_ticket_batch(
    seats: Sequence[SeatDescriptor],
    config: EventConfig,
    template_pdf: Optional[bytes] = None,
    max_per_document: Optional[int] = None,
    include_excel: Optional[bool] = None,
    id_allocator: Callable[[int], List[str]] = allocate_ids,
    qr_workers: Optional[int] = None,
    pdf_workers: Optional[int] = None,
) -> TicketBatchResult:
    """
    Generate all ticket documents for one batch.

    Args:
        seats: Seat descriptors in print order
        config: Event configuration shared by all tickets
        template_pdf: Optional template; enables the layout test output
        max_per_document: Page cap per document (defaults to the setting)
        include_excel: Also export ids.xlsx (defaults to the setting)
        id_allocator: Returns ``count`` unique identifiers
        qr_workers: Threads used for QR rendering
        pdf_workers: Threads used for document rendering

    Returns:
        TicketBatchResult

    Raises:
        ConfigurationError: required event fields are empty
        EmptySeatingError: there are no seats
        TicketingError: QR, document or overlay failure
    """
    config.validate()
    if not seats:
        raise EmptySeatingError()

    start_time = time.time()
    logger.info(f"[BATCH] Generating {len(seats)} tickets for {config.artist} on {config.date}")

    ticket_ids = id_allocator(len(seats))
    records = assemble_tickets(seats, ticket_ids, config)

    qr_images = {}
    if config.include_qr_code:
        qr_images = generate_qr_images([record.id for record in records], max_workers=qr_workers)

    if pdf_workers is None:
        pdf_workers = _ticketing_setting('PDF_WORKERS', 1)
    documents = paginate(
        records,
        qr_images=qr_images,
        include_qr=config.include_qr_code,
        max_per_document=max_per_document,
        max_workers=pdf_workers,
    )

    csv_text = export_to_csv(records)

    if include_excel is None:
        include_excel = _ticketing_setting('INCLUDE_EXCEL_EXPORT', False)
    excel_bytes = export_to_excel(records).getvalue() if include_excel else None

    layout_test = None
    if template_pdf and documents:
        layout_test = overlay(documents[0].content, template_pdf)

    elapsed = time.time() - start_time
    logger.info(
        f"✅ [BATCH] Generated {len(records)} tickets in {len(documents)} documents "
        f"in {elapsed:.2f}s"
    )

    return TicketBatchResult(
        records=records,
        documents=documents,
        csv_text=csv_text,
        excel_bytes=excel_bytes,
        layout_test=layout_test,
        artist=config.artist,
        date=config.date,
    )


def _batch_files(result: TicketBatchResult):
    """(relative path, bytes) pairs making up a batch output tree."""
    for document in result.documents:
        yield f"{TICKETS_DIRNAME}/{document.filename}", document.content
    yield CSV_FILENAME, result.csv_text.encode('utf-8')
    if result.excel_bytes is not None:
        yield EXCEL_FILENAME, result.excel_bytes
    if result.layout_test is not None:
        yield LAYOUT_TEST_FILENAME, result.layout_test


def build_archive(result: TicketBatchResult) -> bytes:
    """Pack the batch output into a ZIP archive."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, 'w', compression=zipfile.ZIP_DEFLATED) as archive:
        for path, content in _batch_files(result):
            archive.writestr(path, content)
    return buffer.getvalue()


def write_batch_to_directory(result: TicketBatchResult, base_dir) -> Path:
    """
    Write the batch output under ``<base_dir>/<Artist>_<Date>/``.

    Returns:
        Path of the batch folder
    """
    output_dir = Path(base_dir) / result.folder_name
    for path, content in _batch_files(result):
        target = output_dir / path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(content)

    logger.info(f"[BATCH] Wrote {result.document_count} documents to {output_dir}")
    return output_dir
