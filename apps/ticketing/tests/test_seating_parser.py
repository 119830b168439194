"""
Tests for the seating export parser.
"""

from django.test import SimpleTestCase

from apps.ticketing.services.seating import (
    RejectionReason,
    extract_aggregate_count,
    extract_category,
    normalize_seating_text,
    parse_description,
    parse_seating,
    parse_seating_report,
)
from apps.ticketing.types import ManualSeat, ParsedSeat

from .helpers import SEATING_EXPORT


class SeatingParserTestCase(SimpleTestCase):
    """Parsing of complete exports."""
    
    def test_single_seat_line(self):
        seats = parse_seating('" Tribüne K  Reihe 8   Platz 1","1:Sitzplatz","frei","-","-"')
        
        self.assertEqual(len(seats), 1)
        seat = seats[0]
        self.assertEqual(seat.area, 'Tribüne K')
        self.assertEqual(seat.row, '8')
        self.assertEqual(seat.seat_number, '1')
        self.assertEqual(seat.category, 'Sitzplatz')
        self.assertEqual(seat.status, 'frei')
        self.assertIsInstance(seat.kind, ParsedSeat)
    
    def test_aggregate_line_expands(self):
        seats = parse_seating(
            '"Innenraum Stehplatz Reihe Tisch Platz (10 Stapelplätze)","2:Stehplatz Innenraum","frei","-","-"'
        )
        
        self.assertEqual(len(seats), 10)
        for seat in seats:
            self.assertIsNone(seat.area)
            self.assertIsNone(seat.row)
            self.assertIsNone(seat.seat_number)
            self.assertEqual(seat.category, 'Stehplatz Innenraum')
            self.assertEqual(seat.status, 'frei')
    
    def test_large_aggregate(self):
        seats = parse_seating(
            '"Innenraum Stehplatz  Reihe  Tisch  Platz (100 Stapelplätze)","2:Stehplatz Innenraum","frei","-","-"'
        )
        self.assertEqual(len(seats), 100)
    
    def test_category_without_colon(self):
        seats = parse_seating('"Parkett Reihe 3 Platz 12","Sitzplatz","frei"')
        
        self.assertEqual(seats[0].category, 'Sitzplatz')
        self.assertEqual(seats[0].area, 'Parkett')
    
    def test_empty_input(self):
        self.assertEqual(parse_seating(''), [])
    
    def test_whitespace_only_input(self):
        self.assertEqual(parse_seating('   \n  \r\n\t\n'), [])
    
    def test_order_follows_input(self):
        seats = parse_seating(SEATING_EXPORT)
        
        self.assertEqual(len(seats), 5)
        self.assertEqual([seat.seat_number for seat in seats[:2]], ['1', '2'])
        self.assertEqual([seat.category for seat in seats[2:]], ['Stehplatz Innenraum'] * 3)
    
    def test_parse_is_deterministic(self):
        self.assertEqual(parse_seating(SEATING_EXPORT), parse_seating(SEATING_EXPORT))
    
    def test_extra_fields_are_ignored(self):
        seats = parse_seating('"Loge Reihe 1 Platz 4","1:Loge","frei","x","y","z","w"')
        self.assertEqual(len(seats), 1)
        self.assertEqual(seats[0].category, 'Loge')
    
    def test_manual_status_becomes_manual_seat(self):
        seats = parse_seating('"Block A Reihe 2 Platz 3","1:Sitzplatz","manual"')
        
        seat = seats[0]
        self.assertIsInstance(seat.kind, ManualSeat)
        self.assertEqual(seat.custom_line, '3')
        self.assertIsNone(seat.row)
        self.assertEqual(seat.area, 'Block A')
    
    def test_markers_are_case_insensitive(self):
        seats = parse_seating(
            '"Parkett REIHE 3 PLATZ 4","1:Sitzplatz","frei"\n'
            '"(3 STAPELPLÄTZE)","2:Steh","frei"\n'
        )
        
        self.assertEqual(
            [(seat.area, seat.row, seat.seat_number, seat.category) for seat in seats],
            [('Parkett', '3', '4', 'Sitzplatz')] + [(None, None, None, 'Steh')] * 3
        )
    
    def test_utf16_leftovers_are_cleaned(self):
        text = '\ufeff"Rang Reihe 1 Platz 1","1:Sitzplatz","frei"'
        text = '\x00'.join(text)
        
        seats = parse_seating(text)
        
        self.assertEqual(len(seats), 1)
        self.assertEqual(seats[0].area, 'Rang')


class SeatingRejectionTestCase(SimpleTestCase):
    """Malformed lines are skipped with a reason."""
    
    def test_too_few_fields(self):
        result = parse_seating_report('"Parkett Reihe 1 Platz 1","1:Sitzplatz"')
        
        self.assertEqual(result.seats, [])
        self.assertEqual(result.rejected_count, 1)
        self.assertEqual(result.rejections[0].reason, RejectionReason.TOO_FEW_FIELDS)
    
    def test_empty_fields(self):
        result = parse_seating_report(
            '"","1:Sitzplatz","frei"\n'
            '"Parkett Reihe 1 Platz 1","","frei"\n'
            '"Parkett Reihe 1 Platz 2","1:Sitzplatz",""\n'
        )
        
        self.assertEqual(
            [rejection.reason for rejection in result.rejections],
            [
                RejectionReason.EMPTY_DESCRIPTION,
                RejectionReason.EMPTY_CATEGORY,
                RejectionReason.EMPTY_STATUS,
            ]
        )
        self.assertEqual([rejection.line_number for rejection in result.rejections], [1, 2, 3])
    
    def test_line_of_empty_fields_is_rejected(self):
        result = parse_seating_report(',,\n"Parkett Reihe 1 Platz 1","1:Sitzplatz","frei"\n\n')
        
        self.assertEqual(len(result.seats), 1)
        self.assertEqual(result.rejected_count, 1)
        self.assertEqual(result.rejections[0].reason, RejectionReason.EMPTY_DESCRIPTION)
        self.assertEqual(result.rejections[0].line_number, 1)
    
    def test_bad_lines_do_not_stop_parsing(self):
        result = parse_seating_report(
            'Kopfzeile ohne Felder\n'
            '"Parkett Reihe 1 Platz 1","1:Sitzplatz","frei"\n'
            '"kaputt"\n'
            '"Parkett Reihe 1 Platz 2","1:Sitzplatz","frei"\n'
        )
        
        self.assertEqual([seat.seat_number for seat in result.seats], ['1', '2'])
        self.assertEqual(result.rejected_count, 2)


class DescriptionParserTestCase(SimpleTestCase):
    """Field level helpers."""
    
    def test_area_is_text_before_row(self):
        position = parse_description('Oberer  Rang   links Reihe 12 Platz 7')
        
        self.assertEqual(position.area, 'Oberer Rang links')
        self.assertEqual(position.row, '12')
        self.assertEqual(position.seat_number, '7')
    
    def test_seat_without_row_has_no_area(self):
        position = parse_description('Loge Platz 7')
        
        self.assertIsNone(position.area)
        self.assertIsNone(position.row)
        self.assertEqual(position.seat_number, '7')
    
    def test_marker_without_count_decomposes_to_nothing(self):
        position = parse_description('Stapelplätze Reihe 1 Platz 2')
        
        self.assertIsNone(position.area)
        self.assertIsNone(position.row)
        self.assertIsNone(position.seat_number)
        self.assertEqual(
            parse_description('STAPELPLÄTZE Reihe 1 Platz 2'),
            parse_description('Stapelplätze Reihe 1 Platz 2')
        )
    
    def test_aggregate_count(self):
        self.assertEqual(extract_aggregate_count('Stehplatz (250 Stapelplätze)'), 250)
        self.assertIsNone(extract_aggregate_count('Parkett Reihe 1 Platz 1'))
    
    def test_extract_category(self):
        self.assertEqual(extract_category('2:Stehplatz Innenraum'), 'Stehplatz Innenraum')
        self.assertEqual(extract_category('3: Loge: Premium'), 'Loge: Premium')
        self.assertEqual(extract_category('Sitzplatz'), 'Sitzplatz')
    
    def test_normalize_line_endings(self):
        self.assertEqual(normalize_seating_text('a\r\nb\rc\n'), 'a\nb\nc\n')
