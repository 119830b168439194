"""
Single ticket page layout.

A page is a top-down stack of blocks: artist, date and venue, start time,
category, optional area, optional seat line, optional QR code and the
wrapped footer text. ``build_page_blocks`` decides which blocks exist for a
record; ``render_page`` folds over them with a running vertical cursor, each
block drawing itself below the previous one and returning the new cursor.
Absent fields produce no block, so no blank space is reserved for them.
"""

import io
import logging
from dataclasses import dataclass
from functools import reduce
from typing import Callable, List, Optional, Sequence, Tuple, Union

from reportlab.lib.utils import ImageReader, simpleSplit

from apps.ticketing.types import TicketRecord

from .constants import (
    BODY_FONT,
    BODY_FONT_SIZE,
    DATE_VENUE_SEPARATOR,
    FIRST_BASELINE_OFFSET,
    FOOTER_FONT,
    FOOTER_FONT_SIZE,
    FOOTER_GAP,
    FOOTER_LEADING,
    FOOTER_WIDTH,
    LINE_PITCH,
    PAGE_HEIGHT,
    QR_GAP,
    QR_SIZE,
    QR_X,
    START_TIME_SUFFIX,
    TEXT_MARGIN,
    TITLE_FONT,
    TITLE_FONT_SIZE,
    TITLE_FONT_SIZE_LONG,
    TITLE_LENGTH_THRESHOLD,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TextLine:
    text: str
    font: str = BODY_FONT
    size: float = BODY_FONT_SIZE
    pitch: float = LINE_PITCH

    def draw(self, canvas, cursor: float) -> float:
        baseline = cursor - self.pitch
        canvas.setFont(self.font, self.size)
        canvas.drawString(TEXT_MARGIN, baseline, self.text)
        return baseline


@dataclass(frozen=True)
class QRImage:
    png: bytes
    size: float = QR_SIZE
    gap: float = QR_GAP

    def draw(self, canvas, cursor: float) -> float:
        bottom = cursor - self.gap - self.size
        canvas.drawImage(
            ImageReader(io.BytesIO(self.png)),
            QR_X,
            bottom,
            width=self.size,
            height=self.size,
        )
        return bottom


@dataclass(frozen=True)
class WrappedText:
    lines: Tuple[str, ...]
    font: str = FOOTER_FONT
    size: float = FOOTER_FONT_SIZE
    leading: float = FOOTER_LEADING
    gap: float = FOOTER_GAP

    def draw(self, canvas, cursor: float) -> float:
        if not self.lines:
            return cursor
        canvas.setFont(self.font, self.size)
        baseline = cursor - self.gap
        for index, line in enumerate(self.lines):
            if index:
                baseline -= self.leading
            canvas.drawString(TEXT_MARGIN, baseline, line)
        return baseline


Block = Union[TextLine, QRImage, WrappedText]
LayoutStep = Callable[[TicketRecord, Optional[bytes], bool], Optional[Block]]


def title_font_size(artist: str) -> int:
    """One size smaller for long artist names so they fit the card."""
    if len(artist) > TITLE_LENGTH_THRESHOLD:
        return TITLE_FONT_SIZE_LONG
    return TITLE_FONT_SIZE


def seat_line_text(record: TicketRecord) -> Optional[str]:
    """Manual custom line, else ``Reihe <row>, Platz <seat>`` with absent parts omitted."""
    if record.custom_line:
        return record.custom_line
    parts = []
    if record.row:
        parts.append(f"Reihe {record.row}")
    if record.seat_number:
        parts.append(f"Platz {record.seat_number}")
    return ', '.join(parts) or None


def wrap_text(text: str, width: float = FOOTER_WIDTH) -> Tuple[str, ...]:
    return tuple(simpleSplit(text, FOOTER_FONT, FOOTER_FONT_SIZE, width))


def _artist_step(record, qr_image, include_qr):
    return TextLine(record.artist, font=TITLE_FONT, size=title_font_size(record.artist))


def _date_venue_step(record, qr_image, include_qr):
    return TextLine(f"{record.date}{DATE_VENUE_SEPARATOR}{record.venue}")


def _start_time_step(record, qr_image, include_qr):
    return TextLine(f"{record.start_time}{START_TIME_SUFFIX}")


def _category_step(record, qr_image, include_qr):
    return TextLine(record.category)


def _area_step(record, qr_image, include_qr):
    if record.area and record.area.strip():
        return TextLine(record.area.strip())
    return None


def _seat_step(record, qr_image, include_qr):
    text = seat_line_text(record)
    return TextLine(text) if text else None


def _qr_step(record, qr_image, include_qr):
    if not include_qr:
        return None
    if qr_image is None:
        logger.warning(f"[PDF] No QR image for ticket {record.id}, page rendered without it")
        return None
    return QRImage(qr_image)


def _footer_step(record, qr_image, include_qr):
    return WrappedText(wrap_text(record.static_text))


PAGE_STEPS: Sequence[LayoutStep] = (
    _artist_step,
    _date_venue_step,
    _start_time_step,
    _category_step,
    _area_step,
    _seat_step,
    _qr_step,
    _footer_step,
)


def build_page_blocks(
    record: TicketRecord,
    qr_image: Optional[bytes] = None,
    include_qr: bool = True,
) -> List[Block]:
    """
    Decide the ordered blocks of one ticket page.
    
    Args:
        record: Ticket to lay out
        qr_image: PNG bytes for this ticket's QR code, if one was generated
        include_qr: Whether QR codes are printed in this batch
    
    Returns:
        Blocks in top-down order; absent fields are left out entirely
    """
    blocks = (step(record, qr_image, include_qr) for step in PAGE_STEPS)
    return [block for block in blocks if block is not None]


def top_cursor(page_height: float = PAGE_HEIGHT) -> float:
    """Cursor such that the first text line lands on the first baseline."""
    return page_height - FIRST_BASELINE_OFFSET + LINE_PITCH


def render_page(canvas, blocks: Sequence[Block], page_height: float = PAGE_HEIGHT) -> float:
    """
    Draw blocks top-down on the current canvas page.
    
    Returns:
        Final cursor position (lowest baseline or image edge drawn)
    """
    return reduce(lambda cursor, block: block.draw(canvas, cursor), blocks, top_cursor(page_height))
