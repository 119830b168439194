"""
Generate printable tickets from a seating export or a manual count.

Reads the event from a ticket-config.json file:

    {
        "seatingFile": "Sitzplan.csv",
        "includeQrCode": true,
        "event": {"artist": ..., "date": ..., "startTime": ..., "venue": ..., "category": ...},
        "staticText": "..."
    }

and writes ``<output-dir>/<Artist>_<Date>/`` with ``tickets/tickets-NNN.pdf``,
``ids.csv`` and, optionally, ``ids.xlsx`` and ``layout-test.pdf``.

Usage:
    python manage.py generate_tickets --config ticket-config.json
    python manage.py generate_tickets --config ticket-config.json --seating Sitzplan.csv --xlsx
    python manage.py generate_tickets --config ticket-config.json --manual-count 50 --line1 "Stehplatz" --line2 "Freie Platzwahl"
"""

import argparse
import json
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from apps.ticketing.exceptions import TicketingError
from apps.ticketing.services.batch_service import generate_ticket_batch, write_batch_to_directory
from apps.ticketing.services.pdf import load_configured_template
from apps.ticketing.services.seating import build_manual_seats, detect_encoding, parse_seating_report
from apps.ticketing.types import EventConfig


class Command(BaseCommand):
    help = 'Generate ticket PDFs and the id table for one event'

    def add_arguments(self, parser):
        parser.add_argument('--config', required=True, help='Path to ticket-config.json')
        parser.add_argument('--seating', help='Seating export (defaults to seatingFile from the config)')
        parser.add_argument('--manual-count', type=int, help='Generate N manual tickets instead of parsing seats')
        parser.add_argument('--line1', default='', help='First free text line of manual tickets')
        parser.add_argument('--line2', default='', help='Second free text line of manual tickets')
        parser.add_argument('--output-dir', default='output', help='Base output directory')
        parser.add_argument('--template', help='Template PDF for the layout test')
        parser.add_argument(
            '--xlsx',
            action=argparse.BooleanOptionalAction,
            default=None,
            help="Export ids.xlsx (defaults to TICKETING['INCLUDE_EXCEL_EXPORT'])"
        )
        parser.add_argument('--workers', type=int, help='Parallel QR code workers')
        parser.add_argument('--max-per-document', type=int, help='Tickets per PDF document')

    def handle(self, *args, **options):
        config_path = Path(options['config'])
        raw_config = self._load_json(config_path)
        config = EventConfig.from_dict(raw_config)

        if options['manual_count'] is not None:
            seats = self._manual_seats(options)
        else:
            seating_path = self._seating_path(options['seating'], raw_config, config_path)
            seats = self._parsed_seats(seating_path)

        template_pdf = self._template(options['template'])

        try:
            result = generate_ticket_batch(
                seats,
                config,
                template_pdf=template_pdf,
                max_per_document=options['max_per_document'],
                include_excel=options['xlsx'],
                qr_workers=options['workers'],
            )
        except TicketingError as e:
            raise CommandError(str(e))

        output_dir = write_batch_to_directory(result, options['output_dir'])

        self.stdout.write(
            self.style.SUCCESS(
                f'✅ Generated {result.ticket_count} tickets in {result.document_count} documents'
            )
        )
        self.stdout.write(f'📁 Output: {output_dir}')
        if result.layout_test is not None:
            self.stdout.write('🖨️  Layout test written')

    def _load_json(self, path):
        try:
            with open(path, encoding='utf-8') as handle:
                return json.load(handle)
        except FileNotFoundError:
            raise CommandError(f'Config file not found: {path}')
        except json.JSONDecodeError as e:
            raise CommandError(f'Invalid config file {path}: {e}')

    def _seating_path(self, option, raw_config, config_path):
        name = option or raw_config.get('seatingFile')
        if not name:
            raise CommandError('No seating file given. Use --seating or --manual-count.')
        path = Path(name)
        if not path.is_absolute() and not path.exists():
            # relative to the config file
            path = config_path.parent / path
        if not path.exists():
            raise CommandError(f'Seating file not found: {name}')
        return path

    def _parsed_seats(self, path):
        encoding, text = detect_encoding(path.read_bytes())
        result = parse_seating_report(text)
        self.stdout.write(f'🎫 {len(result.seats)} seats read from {path.name} ({encoding})')
        if result.rejected_count:
            self.stdout.write(self.style.WARNING(f'⚠️  Skipped {result.rejected_count} malformed lines'))
        return result.seats

    def _manual_seats(self, options):
        try:
            return build_manual_seats(options['manual_count'], options['line1'], options['line2'])
        except TicketingError as e:
            raise CommandError(str(e))

    def _template(self, option):
        if not option:
            return load_configured_template()
        path = Path(option)
        if not path.exists():
            raise CommandError(f'Template not found: {option}')
        return path.read_bytes()
