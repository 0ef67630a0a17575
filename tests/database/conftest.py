# tests/database/conftest.py
from __future__ import annotations

import pytest

from rolodex.database.repos.countries_repo import SqlAlchemyCountriesRepo
from rolodex.database.repos.persons_repo import SqlAlchemyPersonsRepo


@pytest.fixture()
def countries_repo(db) -> SqlAlchemyCountriesRepo:
    return SqlAlchemyCountriesRepo(db)


@pytest.fixture()
def persons_repo(db) -> SqlAlchemyPersonsRepo:
    return SqlAlchemyPersonsRepo(db)
