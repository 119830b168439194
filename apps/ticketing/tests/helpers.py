"""Shared test data for the ticketing tests."""

import io

from reportlab.pdfgen import canvas as pdf_canvas

from apps.ticketing.types import EventConfig, TicketRecord

SEATING_EXPORT = (
    '" Tribüne K  Reihe 8   Platz 1","1:Sitzplatz","frei","-","-"\r\n'
    '" Tribüne K  Reihe 8   Platz 2","1:Sitzplatz","frei","-","-"\r\n'
    '"Innenraum Stehplatz Reihe Tisch Platz (3 Stapelplätze)","2:Stehplatz Innenraum","frei","-","-"\r\n'
)


def make_config(**overrides):
    values = dict(
        artist='Max Mustermann',
        date='01.05.2025',
        start_time='20:00',
        venue='Stadthalle Kassel',
        category='Sitzplatz',
        static_text='Einlass 1 Stunde vor Beginn. Keine Rückgabe.',
        include_qr_code=True,
    )
    values.update(overrides)
    return EventConfig(**values)


def make_record(index=0, **overrides):
    values = dict(
        id=f'ticket-{index:04d}',
        artist='Max Mustermann',
        date='01.05.2025',
        start_time='20:00',
        venue='Stadthalle Kassel',
        category='Sitzplatz',
        static_text='Einlass 1 Stunde vor Beginn.',
        formatted_seat=f'Block-{index:02d}, Reihe 1, Platz {index + 1}',
        area=f'Block-{index:02d}',
        row='1',
        seat_number=str(index + 1),
    )
    values.update(overrides)
    return TicketRecord(**values)


def sequential_ids(count):
    return [f'id-{index:04d}' for index in range(count)]


def make_template_pdf(width=300, height=400, text='TEMPLATE'):
    buffer = io.BytesIO()
    pdf = pdf_canvas.Canvas(buffer, pagesize=(width, height))
    pdf.setFont('Helvetica', 10)
    pdf.drawString(10, height - 10, text)
    pdf.showPage()
    pdf.save()
    return buffer.getvalue()
