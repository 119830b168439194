"""
Tests for ticket assembly and the shared value types.
"""

from django.test import SimpleTestCase

from apps.ticketing.exceptions import ConfigurationError, IdentifierCountMismatchError
from apps.ticketing.services.seating import build_manual_seats, parse_seating
from apps.ticketing.services.ticket_assembler import assemble_tickets, format_seat
from apps.ticketing.types import EventConfig, ManualSeat, SeatDescriptor, seats_from_dicts, seats_to_dicts

from .helpers import SEATING_EXPORT, make_config, sequential_ids


class AssembleTicketsTestCase(SimpleTestCase):
    
    def test_parsed_seats(self):
        seats = parse_seating(SEATING_EXPORT)
        
        records = assemble_tickets(seats, sequential_ids(len(seats)), make_config())
        
        self.assertEqual([record.id for record in records], sequential_ids(5))
        first = records[0]
        self.assertEqual(first.artist, 'Max Mustermann')
        self.assertEqual(first.formatted_seat, 'Tribüne K, Reihe 8, Platz 1')
        self.assertEqual(first.area, 'Tribüne K')
        self.assertEqual(first.row, '8')
        self.assertEqual(first.seat_number, '1')
        self.assertIsNone(first.custom_line)
        self.assertEqual(records[2].category, 'Stehplatz Innenraum')
        self.assertIsNone(records[2].formatted_seat)
    
    def test_manual_seats_use_event_category(self):
        seats = build_manual_seats(2, 'Stehplatz', 'Freie Platzwahl')
        
        records = assemble_tickets(seats, sequential_ids(2), make_config(category='Stehplatz'))
        
        for record in records:
            self.assertEqual(record.category, 'Stehplatz')
            self.assertEqual(record.custom_line, 'Freie Platzwahl')
            self.assertEqual(record.area, 'Stehplatz')
            self.assertIsNone(record.row)
            self.assertIsNone(record.seat_number)
            self.assertIsNone(record.formatted_seat)
    
    def test_custom_line_and_row_are_exclusive(self):
        seats = parse_seating(SEATING_EXPORT) + build_manual_seats(2, 'A', 'B')
        
        records = assemble_tickets(seats, sequential_ids(len(seats)), make_config())
        
        for record in records:
            self.assertFalse(record.custom_line and (record.row or record.seat_number))
    
    def test_identifier_count_mismatch(self):
        seats = parse_seating(SEATING_EXPORT)
        
        with self.assertRaises(IdentifierCountMismatchError) as ctx:
            assemble_tickets(seats, sequential_ids(4), make_config())
        
        self.assertEqual(ctx.exception.descriptor_count, 5)
        self.assertEqual(ctx.exception.identifier_count, 4)
    
    def test_missing_category_fallback(self):
        seats = build_manual_seats(1)
        
        with self.assertRaises(ConfigurationError) as ctx:
            assemble_tickets(seats, sequential_ids(1), make_config(category=''))
        
        self.assertEqual(ctx.exception.missing_fields, ['category'])
    
    def test_format_seat(self):
        self.assertEqual(format_seat('Parkett', '3', '12'), 'Parkett, Reihe 3, Platz 12')
        self.assertEqual(format_seat(None, '3', None), 'Reihe 3')
        self.assertIsNone(format_seat(None, None, None))


class EventConfigTestCase(SimpleTestCase):
    
    def test_from_nested_config_file_layout(self):
        config = EventConfig.from_dict({
            'seatingFile': 'Sitzplan.csv',
            'includeQrCode': False,
            'event': {
                'artist': 'Max Mustermann',
                'date': '01.05.2025',
                'startTime': '20:00',
                'venue': 'Stadthalle',
                'category': 'Sitzplatz',
            },
            'staticText': 'Keine Rückgabe',
        })
        
        self.assertEqual(config.start_time, '20:00')
        self.assertEqual(config.static_text, 'Keine Rückgabe')
        self.assertFalse(config.include_qr_code)
    
    def test_include_qr_code_from_strings(self):
        for value, expected in [('false', False), ('0', False), ('', False), ('FALSE', False),
                                ('true', True), ('1', True), (None, True)]:
            with self.subTest(value=value):
                config = EventConfig.from_dict({**make_config().to_dict(), 'include_qr_code': value})
                self.assertIs(config.include_qr_code, expected)
    
    def test_from_flat_dict_round_trip(self):
        config = make_config()
        self.assertEqual(EventConfig.from_dict(config.to_dict()), config)
    
    def test_validate_lists_missing_fields(self):
        with self.assertRaises(ConfigurationError) as ctx:
            EventConfig(artist='X').validate()
        
        self.assertEqual(ctx.exception.missing_fields, ['date', 'start_time', 'venue', 'static_text'])
    
    def test_with_changes_returns_new_value(self):
        config = make_config()
        changed = config.with_changes(venue='Arena')
        
        self.assertEqual(changed.venue, 'Arena')
        self.assertEqual(config.venue, 'Stadthalle Kassel')


class SeatDescriptorTestCase(SimpleTestCase):
    
    def test_status_must_match_kind(self):
        with self.assertRaises(ValueError):
            SeatDescriptor(category='', status='manual')
        with self.assertRaises(ValueError):
            SeatDescriptor(category='', status='frei', kind=ManualSeat('x'))
    
    def test_dict_round_trip(self):
        seats = parse_seating(SEATING_EXPORT) + build_manual_seats(1, 'Zeile 1', 'Zeile 2')
        
        self.assertEqual(seats_from_dicts(seats_to_dicts(seats)), seats)
