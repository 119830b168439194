"""Decode uploaded seating exports of unknown encoding."""

import codecs
import logging
from typing import Tuple

logger = logging.getLogger(__name__)

# Words every real export contains; used to tell a good decode from garbage
CONTENT_MARKERS = ('Reihe', 'Platz', 'Sitzplatz')


def _looks_like_seating(text: str) -> bool:
    return any(marker in text for marker in CONTENT_MARKERS)


def _guess(raw: bytes) -> Tuple[str, str]:
    """
    Guess the encoding of a seating export.
    
    Box-office exports come as UTF-16 LE, UTF-8 or Latin-1. A UTF-16 byte
    order mark wins; otherwise UTF-16 LE and then strict UTF-8 are accepted
    only if the decoded text contains a seating marker word. Latin-1 is the fallback
    since it decodes any byte sequence.
    
    Args:
        raw: File contents
    
    Returns:
        Tuple of (encoding name, decoded text)
    """
    if raw.startswith(codecs.BOM_UTF16_LE) or raw.startswith(codecs.BOM_UTF16_BE):
        return 'utf-16', raw.decode('utf-16', errors='replace')
    
    text = raw.decode('utf-16-le', errors='replace')
    if _looks_like_seating(text):
        return 'utf-16-le', text
    
    try:
        text = raw.decode('utf-8')
    except UnicodeDecodeError:
        pass
    else:
        if _looks_like_seating(text):
            return 'utf-8', text
    
    return 'latin-1', raw.decode('latin-1')


def detect_encoding(raw: bytes) -> Tuple[str, str]:
    """Decode a seating export, returning (encoding name, text)."""
    encoding, text = _guess(raw)
    logger.info(f"[SEATING] Decoded {len(raw)} bytes as {encoding}")
    return encoding, text


def decode_seating_bytes(raw: bytes) -> str:
    """Decode an uploaded seating export to text."""
    return detect_encoding(raw)[1]
