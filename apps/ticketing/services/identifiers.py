"""Ticket identifier allocation."""

import uuid
from typing import List


def allocate_ids(count: int) -> List[str]:
    """Return ``count`` random UUID4 strings, one per seat."""
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    return [str(uuid.uuid4()) for _ in range(count)]
