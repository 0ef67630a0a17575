# rolodex/services/exports/excel_export.py
from __future__ import annotations

import io
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Optional, Tuple

from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter

from rolodex.domain.entities.person import PersonResponse

LIGHT_GRAY = "FFD3D3D3"


@dataclass(frozen=True)
class ExcelColumn:
    header: str
    value: Callable[[PersonResponse], Optional[str]]


_NAME = ExcelColumn("Person Name", lambda p: p.person_name)
_EMAIL = ExcelColumn("Person Email", lambda p: p.email)
_DOB = ExcelColumn("Date of Birth", lambda p: p.date_of_birth.isoformat() if p.date_of_birth else None)
_COUNTRY = ExcelColumn("Country", lambda p: p.country)


class ExcelColumnSet(Enum):
    """Which columns the persons workbook carries."""
    FULL = (_NAME, _EMAIL, _DOB, _COUNTRY)
    WITHOUT_COUNTRY = (_NAME, _EMAIL, _DOB)

    @property
    def columns(self) -> Tuple[ExcelColumn, ...]:
        return self.value

    @classmethod
    def parse(cls, name: Optional[str]) -> "ExcelColumnSet":
        if not name:
            return cls.FULL
        return cls[name.strip().upper()]


def persons_excel(
    persons: Iterable[PersonResponse],
    column_set: ExcelColumnSet = ExcelColumnSet.FULL,
    *,
    sheet_name: str = "PersonsSheet",
) -> io.BytesIO:
    """
    One worksheet: bold light-gray header row, one row per person,
    column widths fitted to the longest value.
    """
    cols = column_set.columns
    wb = Workbook()
    ws = wb.active
    ws.title = sheet_name

    bold = Font(bold=True)
    fill = PatternFill(fill_type="solid", start_color=LIGHT_GRAY, end_color=LIGHT_GRAY)
    for c, col in enumerate(cols, start=1):
        cell = ws.cell(row=1, column=c, value=col.header)
        cell.font = bold
        cell.fill = fill

    widths = [len(col.header) for col in cols]
    for r, person in enumerate(persons, start=2):
        for c, col in enumerate(cols, start=1):
            value = col.value(person)
            ws.cell(row=r, column=c, value=value)
            if value:
                widths[c - 1] = max(widths[c - 1], len(str(value)))

    for c, width in enumerate(widths, start=1):
        ws.column_dimensions[get_column_letter(c)].width = width + 2

    out = io.BytesIO()
    wb.save(out)
    out.seek(0)
    return out
