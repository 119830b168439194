"""
Value types shared by the ticket printing services.

All types are frozen dataclasses: a parsed seat, an assembled ticket or an
event configuration is never mutated once built. Configuration updates go
through ``EventConfig.with_changes`` which returns a new value.
"""

from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, List, Mapping, Optional, Union

from .exceptions import ConfigurationError

MANUAL_STATUS = 'manual'


@dataclass(frozen=True)
class ParsedSeat:
    """Seat position recovered from a seating export."""
    row: Optional[str] = None
    seat_number: Optional[str] = None


@dataclass(frozen=True)
class ManualSeat:
    """Manually configured ticket carrying a free second text line."""
    custom_line: Optional[str] = None


SeatKind = Union[ParsedSeat, ManualSeat]


@dataclass(frozen=True)
class SeatDescriptor:
    """
    One physical or logical seat.

    ``status == 'manual'`` holds exactly when ``kind`` is a ``ManualSeat``.
    Aggregate seats (Stapelplätze) are parsed seats without area, row or
    seat number.
    """
    category: str
    status: str
    area: Optional[str] = None
    kind: SeatKind = field(default_factory=ParsedSeat)

    def __post_init__(self):
        if isinstance(self.kind, ManualSeat) != (self.status == MANUAL_STATUS):
            raise ValueError(
                f"Seat status {self.status!r} does not match seat kind {type(self.kind).__name__}"
            )

    @classmethod
    def from_fields(
        cls,
        area: Optional[str],
        row: Optional[str],
        seat_number: Optional[str],
        category: str,
        status: str,
    ) -> 'SeatDescriptor':
        """
        Build a descriptor from flat fields, picking the kind from the status tag.

        A ``manual`` status turns the seat field into the custom line and
        drops the row.
        """
        if status == MANUAL_STATUS:
            kind = ManualSeat(custom_line=seat_number)
        else:
            kind = ParsedSeat(row=row, seat_number=seat_number)
        return cls(category=category, status=status, area=area, kind=kind)

    @property
    def is_manual(self) -> bool:
        return isinstance(self.kind, ManualSeat)

    @property
    def row(self) -> Optional[str]:
        return self.kind.row if isinstance(self.kind, ParsedSeat) else None

    @property
    def seat_number(self) -> Optional[str]:
        return self.kind.seat_number if isinstance(self.kind, ParsedSeat) else None

    @property
    def custom_line(self) -> Optional[str]:
        return self.kind.custom_line if isinstance(self.kind, ManualSeat) else None

    def to_dict(self) -> Dict[str, Optional[str]]:
        """Flat representation; manual seats keep their custom line in ``seat``."""
        return {
            'area': self.area,
            'row': self.row,
            'seat': self.custom_line if self.is_manual else self.seat_number,
            'category': self.category,
            'status': self.status,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'SeatDescriptor':
        return cls.from_fields(
            area=data.get('area') or None,
            row=data.get('row') or None,
            seat_number=data.get('seat') or None,
            category=data.get('category') or '',
            status=data.get('status') or '',
        )


FALSE_FLAG_VALUES = ('false', '0', 'no', 'off', '')


def _as_flag(value: Any, default: bool) -> bool:
    """Read a JSON or form flag; strings like "false" and "0" are False."""
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() not in FALSE_FLAG_VALUES
    return bool(value)


@dataclass(frozen=True)
class EventConfig:
    """Event level data printed identically on every ticket of a batch."""
    artist: str = ''
    date: str = ''
    start_time: str = ''
    venue: str = ''
    category: str = ''
    static_text: str = ''
    include_qr_code: bool = True

    REQUIRED_FIELDS = ('artist', 'date', 'start_time', 'venue', 'static_text')

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'EventConfig':
        """
        Build a config from either the nested ticket-config.json layout
        (``{"event": {...}, "staticText": ..., "includeQrCode": ...}``)
        or a flat snake_case mapping.
        """
        event = data.get('event')
        if isinstance(event, Mapping):
            source = dict(event)
            source.setdefault('staticText', data.get('staticText', data.get('static_text', '')))
            source.setdefault('includeQrCode', data.get('includeQrCode', data.get('include_qr_code', True)))
        else:
            source = dict(data)

        def pick(snake: str, camel: str, default: Any = '') -> Any:
            if snake in source:
                return source[snake]
            return source.get(camel, default)

        include_qr = pick('include_qr_code', 'includeQrCode', True)
        return cls(
            artist=str(pick('artist', 'artist') or '').strip(),
            date=str(pick('date', 'date') or '').strip(),
            start_time=str(pick('start_time', 'startTime') or '').strip(),
            venue=str(pick('venue', 'venue') or '').strip(),
            category=str(pick('category', 'category') or '').strip(),
            static_text=str(pick('static_text', 'staticText') or '').strip(),
            include_qr_code=_as_flag(include_qr, default=True),
        )

    def validate(self) -> 'EventConfig':
        """Raise ``ConfigurationError`` listing every empty required field."""
        missing = [name for name in self.REQUIRED_FIELDS if not getattr(self, name)]
        if missing:
            raise ConfigurationError(missing)
        return self

    def with_changes(self, **changes) -> 'EventConfig':
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class TicketRecord:
    """One fully resolved, print-ready ticket."""
    id: str
    artist: str
    date: str
    start_time: str
    venue: str
    category: str
    static_text: str
    formatted_seat: Optional[str] = None
    area: Optional[str] = None
    row: Optional[str] = None
    seat_number: Optional[str] = None
    custom_line: Optional[str] = None


def seats_to_dicts(seats: List[SeatDescriptor]) -> List[Dict[str, Optional[str]]]:
    return [seat.to_dict() for seat in seats]


def seats_from_dicts(items: List[Mapping[str, Any]]) -> List[SeatDescriptor]:
    return [SeatDescriptor.from_dict(item) for item in items]
