import io
import textwrap
from datetime import date, timedelta

import pdfplumber
from reportlab.lib.pagesizes import A4, landscape
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

from catering.domain.Period import Period
from catering.domain.errors import MenuSourceError
from catering.logic.weeks.dates import menu_key
from catering.utilities.constants import DAY_NAMES


def extract_text(data: bytes, layout: bool = True) -> str:
    """Extract plain text from PDF bytes, one page after another.

    ``layout=True`` keeps the horizontal spacing of table cells, which the
    day-block splitter relies on. Each page is dedented so only indentation
    relative to the leftmost text survives, not the page margin.
    """
    try:
        with pdfplumber.open(io.BytesIO(data)) as pdf:
            pages = [textwrap.dedent(page.extract_text(layout=layout) or "") for page in pdf.pages]
    except Exception as e:
        raise MenuSourceError(f"could not extract text from PDF: {e}") from e
    return "\n".join(pages)


def generate_pdf_for_week(week_start: date, entries: dict):
    """Generate a PDF table: Day / Breakfast / Brunch / Lunch / Dinner for one menu week."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=landscape(A4),
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    elements = [
        Paragraph(f"Menu – Week commencing {week_start.strftime('%A %d %B %Y')}", styles["Title"]),
        Spacer(1, 16),
    ]

    periods = list(Period)
    data = [["Day"] + [p.value.capitalize() for p in periods]]
    for offset, day_name in enumerate(DAY_NAMES):
        day = week_start + timedelta(days=offset)
        data.append(
            [f"{day_name} ({day.strftime('%d.%m.%Y')})"]
            + [entries.get(menu_key(day, p.value), "-") for p in periods]
        )

    table = Table(data, repeatRows=1)
    table.setStyle(TableStyle([
        ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#4CAF50")),
        ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
        ("ALIGN", (0,0), (-1,-1), "CENTER"),
        ("VALIGN", (0,0), (-1,-1), "MIDDLE"),
        ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
        ("FONTSIZE", (0,0), (-1,0), 12),
        ("BOTTOMPADDING", (0,0), (-1,0), 10),
        ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
    ]))

    elements.append(table)
    doc.build(elements)
    return buf.getvalue()
