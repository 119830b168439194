"""
Ticket printing system.

Turns a seating export (or a manual seat specification) into printable
A7 ticket PDFs with one QR code per seat, batched into documents of at most
twenty pages, plus a flat ids.csv for box-office reconciliation.
"""
