# tests/conftest.py
from __future__ import annotations
import os

# Point the app at SQLite before any rolodex module reads settings
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session
from testcontainers.postgres import PostgresContainer

from rolodex.common.settings import get_settings
from rolodex.database.core.main import make_engine
from rolodex.database.models import Base  # <-- imports the models/metadata


@pytest.fixture(scope="session")
def _database_url():
    """
    SQLite in-memory by default. USE_TESTCONTAINERS=1 runs the suite against
    a throwaway PostgreSQL container instead.
    """
    cfg = get_settings()
    if not cfg.use_testcontainers:
        yield "sqlite://"
        return
    with PostgresContainer(cfg.test_db_image) as pg:
        # testcontainers hands back a psycopg2 URL; we ship psycopg (v3)
        yield pg.get_connection_url().replace("psycopg2", "psycopg")


@pytest.fixture(scope="session")
def db_engine(_database_url) -> Engine:
    engine = make_engine(_database_url)

    # Skip Alembic here; just create tables from models
    Base.metadata.create_all(bind=engine)

    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db(db_engine) -> Session:
    """
    Per-test SQLAlchemy Session bound to an outer transaction that is rolled
    back after the test, so nothing leaks between tests.
    """
    connection = db_engine.connect()
    trans = connection.begin()
    session = Session(bind=connection, future=True, expire_on_commit=False, autoflush=False)
    try:
        yield session
    finally:
        session.close()
        trans.rollback()
        connection.close()


@pytest.fixture()
def fresh_settings(monkeypatch):
    """
    Clear the cached Settings before and after a test so env overrides set via
    monkeypatch are picked up (and don't leak).
    """
    get_settings.cache_clear()
    yield monkeypatch
    monkeypatch.undo()
    get_settings.cache_clear()
