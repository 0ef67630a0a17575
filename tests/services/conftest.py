# tests/services/conftest.py
from __future__ import annotations

import io
from datetime import date
from typing import Iterable, Optional

import pytest
from openpyxl import Workbook
from starlette.testclient import TestClient

from rolodex.services.api.app import create_app
from rolodex.services.api.deps import transactional_session
from rolodex.services.countries.service import CountriesService
from rolodex.services.persons.service import PersonsService

TODAY = date(2024, 6, 15)


@pytest.fixture()
def countries_service(db) -> CountriesService:
    return CountriesService(db)


@pytest.fixture()
def persons_service(db) -> PersonsService:
    # pinned "today" keeps ages deterministic
    return PersonsService(db, today=TODAY)


@pytest.fixture()
def app(db):
    """
    App whose `transactional_session` dependency yields the per-test Session.
    All requests in one test share it (POST -> GET works) and the outer
    transaction is rolled back afterwards.
    """
    app = create_app()

    def _override():
        yield db

    app.dependency_overrides[transactional_session] = _override
    try:
        yield app
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def api_client(app):
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client


def build_countries_workbook(
    names: Iterable[Optional[str]],
    *,
    sheet: str = "Countries",
    header: str = "CountryName",
) -> bytes:
    """Workbook with `header` in A1 and one name per row from A2."""
    wb = Workbook()
    ws = wb.active
    ws.title = sheet
    ws.cell(row=1, column=1, value=header)
    for i, name in enumerate(names, start=2):
        ws.cell(row=i, column=1, value=name)
    buf = io.BytesIO()
    wb.save(buf)
    return buf.getvalue()


@pytest.fixture()
def countries_workbook():
    return build_countries_workbook
