"""Exceptions raised by the ticket printing services."""

from typing import Iterable, Optional


class TicketingError(Exception):
    """Base class for every ticket printing error."""
    pass


class PreconditionError(TicketingError):
    """The operation was rejected before producing any output."""
    pass


class ConfigurationError(PreconditionError):
    """Event configuration is missing required fields."""
    
    def __init__(self, missing_fields: Iterable[str], message: Optional[str] = None):
        self.missing_fields = list(missing_fields)
        if message is None:
            message = f"Missing required event fields: {', '.join(self.missing_fields)}"
        super().__init__(message)


class IdentifierCountMismatchError(PreconditionError):
    """Identifiers and seat descriptors cannot be paired one to one."""
    
    def __init__(self, descriptor_count: int, identifier_count: int):
        self.descriptor_count = descriptor_count
        self.identifier_count = identifier_count
        super().__init__(
            f"Got {identifier_count} identifiers for {descriptor_count} seats"
        )


class EmptySeatingError(PreconditionError):
    """No seats to generate tickets for."""
    
    def __init__(self, message: str = "No seats found. Upload a seating file or configure manual seats first."):
        super().__init__(message)


class ValidationError(PreconditionError):
    """Invalid request parameters (ticket counts, uploads)."""
    pass


class QRGenerationError(TicketingError):
    """The QR provider failed for one identifier."""
    
    def __init__(self, ticket_id: str, reason: str):
        self.ticket_id = ticket_id
        super().__init__(f"Failed to generate QR code for ID {ticket_id}: {reason}")


class DocumentEncodingError(TicketingError):
    """A single ticket document could not be rendered."""
    
    def __init__(self, group_index: int, ticket_ids: Iterable[str], reason: str):
        self.group_index = group_index
        self.ticket_ids = tuple(ticket_ids)
        super().__init__(
            f"Failed to render document {group_index + 1} "
            f"({len(self.ticket_ids)} tickets): {reason}"
        )


class OverlayError(TicketingError):
    """The layout test overlay could not be composed."""
    pass
