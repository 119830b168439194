"""
Print the seats parsed from a seating export.

Usage:
    python manage.py parse_seating Sitzplan.csv
    python manage.py parse_seating Sitzplan.csv -v 2  # also list skipped lines
"""

from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from apps.ticketing.services.seating import detect_encoding, parse_seating_report


class Command(BaseCommand):
    help = 'Parse a seating export and print every seat'

    def add_arguments(self, parser):
        parser.add_argument('seating_file', help='Seating export (UTF-16LE, UTF-8 or Latin-1)')

    def handle(self, *args, **options):
        path = Path(options['seating_file'])
        if not path.exists():
            raise CommandError(f'Seating file not found: {path}')

        encoding, text = detect_encoding(path.read_bytes())
        result = parse_seating_report(text)

        self.stdout.write(f'Encoding: {encoding}')
        self.stdout.write(self.style.SUCCESS(f'Found {len(result.seats)} seats'))

        for index, seat in enumerate(result.seats, start=1):
            self.stdout.write(
                f'{index:>5}. Area: {seat.area or "-"}, Row: {seat.row or "-"}, '
                f'Seat: {seat.seat_number or seat.custom_line or "-"}, '
                f'Category: {seat.category}, Status: {seat.status}'
            )

        if result.rejected_count:
            self.stdout.write(self.style.WARNING(f'Skipped {result.rejected_count} lines'))
            if options['verbosity'] >= 2:
                for rejection in result.rejections:
                    self.stdout.write(f'  - line {rejection.line_number}: {rejection.reason.value}')
