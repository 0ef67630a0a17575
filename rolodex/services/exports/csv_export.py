# rolodex/services/exports/csv_export.py
from __future__ import annotations

import csv
import io
from typing import Iterable

from rolodex.domain.entities.person import PersonResponse

CSV_HEADER = ("PersonName", "Email", "DateOfBirth", "Country")


def persons_csv(persons: Iterable[PersonResponse]) -> io.BytesIO:
    """Header row plus one row per person; birth date as yyyy-mm-dd or blank."""
    text = io.StringIO(newline="")
    writer = csv.writer(text, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for p in persons:
        writer.writerow([
            p.person_name or "",
            p.email or "",
            p.date_of_birth.isoformat() if p.date_of_birth else "",
            p.country or "",
        ])

    out = io.BytesIO(text.getvalue().encode("utf-8"))
    out.seek(0)
    return out
