"""Text normalization applied before seating records are tokenized."""

import re

_WHITESPACE_RUN = re.compile(r'\s+')


def normalize_seating_text(text: str) -> str:
    """
    Clean raw seating export content.
    
    Removes NUL bytes (left over from UTF-16 exports read with the wrong
    codec) and a leading byte order mark, and folds CRLF and bare CR line
    endings into LF.
    
    Args:
        text: Decoded file contents
    
    Returns:
        Cleaned text using ``\\n`` line endings only
    """
    if not text:
        return ''
    
    cleaned = text.replace('\x00', '')
    if cleaned.startswith('\ufeff'):
        cleaned = cleaned[1:]
    return cleaned.replace('\r\n', '\n').replace('\r', '\n')


def collapse_whitespace(text: str) -> str:
    """Collapse internal whitespace runs to one space and trim the ends."""
    return _WHITESPACE_RUN.sub(' ', text).strip()
