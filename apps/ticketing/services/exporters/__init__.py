"""Tabular exports of generated tickets."""

from .columns import EXPORT_HEADERS
from .csv_exporter import CSV_FILENAME, export_to_csv
from .csv_importer import import_from_csv
from .excel_exporter import EXCEL_FILENAME, export_to_excel

__all__ = [
    'EXPORT_HEADERS',
    'CSV_FILENAME',
    'EXCEL_FILENAME',
    'export_to_csv',
    'export_to_excel',
    'import_from_csv',
]
