"""Seating export parsing - modular implementation."""

from .seating_parser import (
    RejectedRecord,
    RejectionReason,
    SeatingParseResult,
    parse_seating,
    parse_seating_report,
)
from .description_parser import extract_aggregate_count, parse_description
from .category_parser import extract_category
from .normalizer import normalize_seating_text
from .encoding_detector import decode_seating_bytes, detect_encoding
from .manual_seating import build_manual_seats

__all__ = [
    # Parser
    'parse_seating',
    'parse_seating_report',
    'SeatingParseResult',
    'RejectedRecord',
    'RejectionReason',
    # Field decomposition
    'parse_description',
    'extract_aggregate_count',
    'extract_category',
    'normalize_seating_text',
    # Input collaborators
    'decode_seating_bytes',
    'detect_encoding',
    'build_manual_seats',
]
