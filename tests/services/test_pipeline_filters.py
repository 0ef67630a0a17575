# tests/services/test_pipeline_filters.py
from __future__ import annotations

import pytest

from rolodex.common.settings import get_settings
from rolodex.domain.enums import PersonField, SortOrder
from rolodex.services.api.deps import get_persons_service
from rolodex.services.api.filters import persons_list_query


# ---- response headers ----

def test_list_view_headers(api_client):
    r = api_client.get("/persons/index")
    assert r.headers["X-Custom-Key"] == "Custom-Value"
    assert r.headers["Controller-Key"] == "Controller-Value"
    assert r.headers["Some-Key"] == "Some-Value"
    assert "Last-Modified" in r.headers


def test_global_header_on_every_route(api_client):
    r = api_client.get("/healthz")
    assert r.status_code == 200
    assert r.json()["ok"] is True
    assert r.headers["Some-Key"] == "Some-Value"
    # persons-only headers stay on the persons routes
    assert "Controller-Key" not in r.headers


def test_route_header_only_on_marked_route(api_client):
    assert "my-key" not in api_client.get("/persons/index").headers
    assert "X-Custom-Key" not in api_client.get("/persons/create").headers


# ---- list query normalizer ----

def test_defaults():
    q = persons_list_query(None, None, None, None)
    assert q.search_by is None
    assert q.sort_by is PersonField.person_name
    assert q.sort_order is SortOrder.asc


def test_unknown_search_by_becomes_person_name():
    q = persons_list_query("Password", "x", None, None)
    assert q.search_by is PersonField.person_name
    assert q.search_string == "x"


def test_search_by_must_be_offered_in_dropdown():
    # age is sortable, not searchable
    assert persons_list_query("age", "3", None, None).search_by is PersonField.person_name
    assert persons_list_query("CountryID", "us", None, None).search_by is PersonField.country


def test_sort_values_are_parsed():
    q = persons_list_query(None, None, "DateOfBirth", "desc")
    assert q.sort_by is PersonField.date_of_birth
    assert q.sort_order is SortOrder.desc
    assert persons_list_query(None, None, None, "bogus").sort_order is SortOrder.asc


def test_toggled_order():
    q = persons_list_query(None, None, "person_name", "ASC")
    assert q.toggled_order(PersonField.person_name) is SortOrder.desc
    assert q.toggled_order(PersonField.email) is SortOrder.asc


# ---- exception handler ----

class _Exploding:
    def get_filtered_persons(self, *a, **kw):
        raise RuntimeError("boom")


@pytest.fixture()
def exploding_client(app, api_client):
    app.dependency_overrides[get_persons_service] = lambda: _Exploding()
    yield api_client


def test_unhandled_error_shows_message_in_development(fresh_settings, exploding_client):
    fresh_settings.setenv("APP_ENV", "development")
    get_settings.cache_clear()
    r = exploding_client.get("/persons/index")
    assert r.status_code == 500
    assert r.text == "boom"


def test_unhandled_error_hidden_outside_development(fresh_settings, exploding_client):
    fresh_settings.setenv("APP_ENV", "production")
    get_settings.cache_clear()
    r = exploding_client.get("/persons/index")
    assert r.status_code == 500
    assert "boom" not in r.text
