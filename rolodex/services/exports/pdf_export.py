# rolodex/services/exports/pdf_export.py
from __future__ import annotations

import io
from typing import Iterable, List
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from rolodex.domain.entities.person import PersonResponse

# Same columns as the list view
PDF_HEADER = (
    "Person Name", "Email", "Date of Birth", "Age", "Gender",
    "Country", "Address", "Receive News Letters",
)


def _row(p: PersonResponse) -> List[str]:
    return [
        p.person_name or "",
        p.email or "",
        p.date_of_birth.strftime("%d %b %Y") if p.date_of_birth else "",
        "" if p.age is None else str(p.age),
        p.gender or "",
        p.country or "",
        p.address or "",
        "Yes" if p.receive_news_letters else "No",
    ]


def persons_pdf(
    persons: Iterable[PersonResponse],
    *,
    margin_pt: float = 20.0,
    title: str = "Persons",
) -> io.BytesIO:
    """Landscape A4 table; the header row repeats on every page."""
    out = io.BytesIO()
    doc = SimpleDocTemplate(
        out,
        pagesize=landscape(A4),
        leftMargin=margin_pt,
        rightMargin=margin_pt,
        topMargin=margin_pt,
        bottomMargin=margin_pt,
        title=title,
    )
    styles = getSampleStyleSheet()
    cell = styles["BodyText"]

    data = [list(PDF_HEADER)]
    for p in persons:
        # Paragraph wraps long addresses instead of overflowing the column
        data.append([Paragraph(escape(v), cell) if v else "" for v in _row(p)])

    table = Table(data, repeatRows=1)
    table.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
        ("VALIGN", (0, 0), (-1, -1), "TOP"),
    ]))

    doc.build([Paragraph(title, styles["Title"]), Spacer(1, 12), table])
    out.seek(0)
    return out
