"""Utility functions shared across the ticket printing apps."""

import re

_INVALID_PATH_CHARS = re.compile(r'[<>:"/\\|?*]')
_WHITESPACE = re.compile(r'\s+')
_REPEATED_UNDERSCORES = re.compile(r'_+')


def sanitize_folder_name(name):
    """
    Make a string safe to use as a single path component.
    
    Reserved characters and whitespace become underscores, runs of
    underscores are collapsed.
    
    Example:
        'Max Mustermann: Live/2025' -> 'Max_Mustermann_Live_2025'
    """
    name = _INVALID_PATH_CHARS.sub('_', name or '')
    name = _WHITESPACE.sub('_', name)
    return _REPEATED_UNDERSCORES.sub('_', name)


def get_output_folder_name(artist, date):
    """Folder name for a generated batch: ``<Artist>_<Date>``."""
    return f"{sanitize_folder_name(artist)}_{sanitize_folder_name(date)}"
