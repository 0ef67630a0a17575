# rolodex/services/countries/service.py
from __future__ import annotations

import io
from typing import List, Optional
from uuid import UUID, uuid4

from openpyxl import load_workbook
from sqlalchemy.orm import Session

from rolodex.common.logging import get_logger
from rolodex.common.settings import get_settings
from rolodex.common.strings.text import cell_text
from rolodex.database.repos._mapping import to_country_response
from rolodex.database.repos.countries_repo import SqlAlchemyCountriesRepo
from rolodex.domain.dataclasses.reports import CountryImportReport
from rolodex.domain.entities.country import CountryResponse
from rolodex.domain.errors import DuplicateError, NullRequestError, ValidationError
from rolodex.domain.ports.stores import CountriesStorePort
from rolodex.services.schemas.countries import CountryAddRequest
from rolodex.services.validation import parse_model, validate_model

log = get_logger(__name__)


class CountriesService:
    """Country record store: add, list, lookup and spreadsheet import."""

    def __init__(self, db: Session, repo: Optional[CountriesStorePort] = None):
        self.db = db
        self.repo = repo or SqlAlchemyCountriesRepo(db)
        self.cfg = get_settings()

    def add_country(self, request: Optional[CountryAddRequest]) -> CountryResponse:
        if request is None:
            raise NullRequestError("country_add_request")
        request = validate_model(request)

        if self.repo.get_by_name(request.country_name) is not None:
            raise DuplicateError("Given country name already exists")

        row = self.repo.add(country_name=request.country_name, country_id=uuid4())
        log.info("Country added id=%s name=%r", row.id, row.country_name)
        return to_country_response(row)

    def get_all_countries(self) -> List[CountryResponse]:
        return [to_country_response(r) for r in self.repo.list_all()]

    def get_country_by_id(self, country_id: Optional[UUID]) -> Optional[CountryResponse]:
        if country_id is None:
            return None
        row = self.repo.get(country_id)
        return to_country_response(row) if row else None

    # ---------------------------------------------------------------------
    # Spreadsheet import
    # ---------------------------------------------------------------------

    def upload_countries_from_excel(self, data: bytes) -> int:
        """Import the workbook and return how many countries were inserted."""
        return self.import_countries_from_excel(data).inserted

    def import_countries_from_excel(self, data: bytes, *, atomic: bool = False) -> CountryImportReport:
        """
        Read country names from column A of the configured worksheet, rows 2..n
        (row 1 is the header).

        Blank cells, names already stored and names repeated earlier in the file
        are skipped. A name that breaks the field rules is recorded on the report.
        With atomic=False the valid rows are still inserted; with atomic=True any
        invalid row rejects the whole file before anything is written.
        """
        report = CountryImportReport()
        report.start()

        names = self._read_column(data)
        seen = set(self.repo.names())
        to_insert: List[str] = []

        for offset, value in enumerate(names):
            report.rows += 1
            name = cell_text(value)
            if name is None:
                report.blank += 1
                continue
            if name in seen:
                report.skipped += 1
                continue
            try:
                parse_model(CountryAddRequest, {"country_name": name})
            except ValidationError as e:
                report.errors += 1
                report.add_error(f"row {offset + 2}", str(e))
                continue
            seen.add(name)
            to_insert.append(name)

        if atomic and report.errors:
            report.stop()
            messages = report.messages()
            log.warning("Country import rejected: %d invalid row(s)", report.errors)
            raise ValidationError(messages[0], messages)

        for name in to_insert:
            self.repo.add(country_name=name, country_id=uuid4())
            report.inserted += 1

        report.stop()
        log.info(
            "Country import: rows=%d inserted=%d skipped=%d blank=%d errors=%d",
            report.rows, report.inserted, report.skipped, report.blank, report.errors,
        )
        return report

    def _read_column(self, data: bytes) -> List[object]:
        sheet_name = self.cfg.export.country_sheet_name
        try:
            wb = load_workbook(filename=io.BytesIO(data), data_only=True)
        except Exception as e:
            raise ValidationError("Not a valid xlsx workbook") from e
        try:
            if sheet_name not in wb.sheetnames:
                raise ValidationError(f"Worksheet '{sheet_name}' not found")
            ws = wb[sheet_name]
            return [row[0] if row else None for row in ws.iter_rows(min_row=2, max_col=1, values_only=True)]
        finally:
            wb.close()
