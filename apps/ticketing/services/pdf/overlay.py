"""
Layout test overlay.

Draws the first page of a rendered ticket document on top of the first page
of the printer's template PDF so the ticket text can be checked against the
pre-printed card. The output page takes the ticket's size; the template is
anchored at the top edge and never rescaled.
"""

import io
import logging
from pathlib import Path
from typing import Optional

from django.conf import settings
from pypdf import PageObject, PdfReader, PdfWriter, Transformation
from pypdf.errors import PdfReadError

from apps.ticketing.exceptions import OverlayError

logger = logging.getLogger(__name__)

LAYOUT_TEST_FILENAME = 'layout-test.pdf'


def _first_page(pdf_bytes: bytes, label: str) -> PageObject:
    try:
        pages = PdfReader(io.BytesIO(pdf_bytes)).pages
        page_count = len(pages)
    except (PdfReadError, ValueError, KeyError) as e:
        raise OverlayError(f"The {label} PDF could not be read: {e}") from e
    if page_count == 0:
        raise OverlayError(f"The {label} PDF has no pages")
    return pages[0]


def overlay(ticket_pdf: bytes, template_pdf: bytes) -> bytes:
    """
    Compose the layout test page.
    
    Args:
        ticket_pdf: A rendered ticket document (only page 1 is used)
        template_pdf: The template document (only page 1 is used)
    
    Returns:
        Single page PDF bytes
    
    Raises:
        OverlayError: if either input is unreadable or empty
    """
    ticket_page = _first_page(ticket_pdf, 'ticket')
    template_page = _first_page(template_pdf, 'template')
    
    ticket_box = ticket_page.mediabox
    template_box = template_page.mediabox
    width = float(ticket_box.width)
    height = float(ticket_box.height)
    
    output_page = PageObject.create_blank_page(width=width, height=height)
    
    # Template top edge onto the output top edge, unscaled
    output_page.merge_transformed_page(
        template_page,
        Transformation().translate(
            tx=-float(template_box.left),
            ty=height - float(template_box.top),
        ),
    )
    # Ticket at true size from the origin
    output_page.merge_transformed_page(
        ticket_page,
        Transformation().translate(
            tx=-float(ticket_box.left),
            ty=-float(ticket_box.bottom),
        ),
    )
    
    writer = PdfWriter()
    writer.add_page(output_page)
    buffer = io.BytesIO()
    writer.write(buffer)
    
    logger.info(
        f"✅ [PDF] Layout test created - template {float(template_box.width):.2f} x "
        f"{float(template_box.height):.2f} pt, ticket {width:.2f} x {height:.2f} pt"
    )
    return buffer.getvalue()


def load_configured_template() -> Optional[bytes]:
    """
    Read the template configured in TICKETING['TEMPLATE_PATH'].
    
    Returns:
        Template PDF bytes, or None when no template is configured or the
        file does not exist (layout tests are then unavailable)
    """
    template_path = getattr(settings, 'TICKETING', {}).get('TEMPLATE_PATH')
    if not template_path:
        return None
    
    path = Path(template_path)
    if not path.is_file():
        logger.info(f"[PDF] Template {path} not found, layout test unavailable")
        return None
    return path.read_bytes()
