"""
QR code generator for printed tickets.

Each ticket carries a QR code encoding its bare identifier, which the
box office scans against ids.csv at the door.

Usage:
    from apps.ticketing.qr_generator import generate_qr_image, generate_qr_images
    
    # Single ticket
    png_bytes = generate_qr_image(ticket_id)
    
    # Whole batch (parallel, fail fast)
    images = generate_qr_images(ticket_ids)
"""

import io
import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Optional

import qrcode
from django.conf import settings

from apps.ticketing.exceptions import QRGenerationError

logger = logging.getLogger(__name__)

DEFAULT_BOX_SIZE = 10
DEFAULT_WORKERS = 4


def _ticketing_setting(name: str, default):
    return getattr(settings, 'TICKETING', {}).get(name, default)


def generate_qr_image(ticket_id: str, box_size: Optional[int] = None) -> bytes:
    """
    Generate QR code image as PNG bytes.
    
    Args:
        ticket_id: Unique ticket identifier (encoded as-is)
        box_size: Pixels per QR module (defaults to TICKETING['QR_BOX_SIZE'])
        
    Returns:
        PNG image as bytes
    
    Raises:
        QRGenerationError: if the QR library fails for this identifier
    """
    if box_size is None:
        box_size = _ticketing_setting('QR_BOX_SIZE', DEFAULT_BOX_SIZE)
    
    try:
        qr = qrcode.QRCode(
            version=None,
            error_correction=qrcode.constants.ERROR_CORRECT_M,
            box_size=box_size,
            border=1,
        )
        qr.add_data(ticket_id)
        qr.make(fit=True)
        
        img = qr.make_image(fill_color="black", back_color="white")
        
        # In-memory PNG, no disk I/O
        buffer = io.BytesIO()
        img.save(buffer, format='PNG')
        return buffer.getvalue()
        
    except Exception as e:
        logger.error(f"❌ [QR] Error generating QR for ticket {ticket_id}: {e}")
        raise QRGenerationError(ticket_id, str(e)) from e


def generate_qr_images(ticket_ids: List[str], max_workers: Optional[int] = None) -> Dict[str, bytes]:
    """
    Generate QR codes for multiple tickets in parallel.
    
    Args:
        ticket_ids: Identifiers in seat order
        max_workers: Number of parallel workers (defaults to TICKETING['QR_WORKERS'])
        
    Returns:
        Dict mapping ticket id to PNG bytes, in ``ticket_ids`` order
    
    Raises:
        QRGenerationError: on the first identifier that fails
    """
    if max_workers is None:
        max_workers = _ticketing_setting('QR_WORKERS', DEFAULT_WORKERS)
    
    start_time = time.time()
    
    if max_workers <= 1 or len(ticket_ids) <= 1:
        images = [generate_qr_image(ticket_id) for ticket_id in ticket_ids]
    else:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            # map() yields results in submission order and re-raises the first failure
            images = list(executor.map(generate_qr_image, ticket_ids))
    
    duration_ms = int((time.time() - start_time) * 1000)
    logger.info(f"✅ [QR] Generated {len(images)} QR codes in {duration_ms}ms")
    
    return dict(zip(ticket_ids, images))
