"""Page geometry and typography of the A7 ticket card (PDF points)."""

# A7 (74mm x 105mm)
PAGE_WIDTH = 209.76
PAGE_HEIGHT = 297.64
PAGE_SIZE = (PAGE_WIDTH, PAGE_HEIGHT)

MAX_PER_DOCUMENT = 20

TEXT_MARGIN = 20
FIRST_BASELINE_OFFSET = 53  # from the top edge
LINE_PITCH = 16

TITLE_FONT = 'Helvetica-Bold'
TITLE_FONT_SIZE = 12
TITLE_FONT_SIZE_LONG = 10
TITLE_LENGTH_THRESHOLD = 21

BODY_FONT = 'Helvetica'
BODY_FONT_SIZE = 10

DATE_VENUE_SEPARATOR = '     '
START_TIME_SUFFIX = ' Uhr'

QR_X = 18
QR_SIZE = 60
QR_GAP = 8

FOOTER_FONT = 'Helvetica-Oblique'
FOOTER_FONT_SIZE = 8
FOOTER_LEADING = 10
FOOTER_GAP = 12
FOOTER_WIDTH = PAGE_WIDTH - 2 * TEXT_MARGIN
