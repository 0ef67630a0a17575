# rolodex/services/api/filters.py
"""
Request-pipeline hooks:
  - response_header / header_route: per-route and per-router response headers
  - persons_list_query: list-view query normalizer (dependency)
  - global header + request timing middleware
  - centralized exception handler
"""
from __future__ import annotations

import time
from typing import Callable, Optional, Tuple, Type

from fastapi import FastAPI, Query, Request, Response
from fastapi.responses import PlainTextResponse
from fastapi.routing import APIRoute

from rolodex.common.logging import get_logger
from rolodex.common.settings import get_settings
from rolodex.domain.dataclasses.list_query import SEARCH_FIELDS, PersonsListQuery
from rolodex.domain.enums import PersonField, SortOrder

log = get_logger(__name__)

Header = Tuple[str, str]

_HEADERS_ATTR = "__response_headers__"


# ---------------------------------------------------------------------------
# Response headers
# ---------------------------------------------------------------------------

def response_header(key: str, value: str) -> Callable:
    """
    Mark an endpoint so `key: value` is set on its response once the endpoint
    has returned. Must sit below the @router.<method> decorator(s).
    """
    def mark(endpoint: Callable) -> Callable:
        headers = list(getattr(endpoint, _HEADERS_ATTR, ()))
        headers.append((key, value))
        setattr(endpoint, _HEADERS_ATTR, headers)
        return endpoint
    return mark


class HeaderRoute(APIRoute):
    """APIRoute that applies router-wide and endpoint-marked headers after the handler."""
    default_headers: Tuple[Header, ...] = ()

    def get_route_handler(self) -> Callable:
        handler = super().get_route_handler()
        headers = list(self.default_headers) + list(getattr(self.endpoint, _HEADERS_ATTR, ()))
        if not headers:
            return handler

        name = self.name

        async def route_handler(request: Request) -> Response:
            log.debug("response_header %s - before", name)
            response = await handler(request)
            for key, value in headers:
                response.headers[key] = value
            log.debug("response_header %s - after", name)
            return response

        return route_handler


def header_route(*headers: Header) -> Type[HeaderRoute]:
    """Route class for an APIRouter whose every response carries `headers`."""
    return type("HeaderRoute", (HeaderRoute,), {"default_headers": tuple(headers)})


# ---------------------------------------------------------------------------
# List-view query normalizer
# ---------------------------------------------------------------------------

def persons_list_query(
    search_by: Optional[str] = Query(None, alias="searchBy"),
    search_string: Optional[str] = Query(None, alias="searchString"),
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    sort_order: Optional[str] = Query(None, alias="sortOrder"),
) -> PersonsListQuery:
    """
    - searchBy: empty stays empty (no filtering); anything not offered in the
      search dropdown falls back to person_name
    - sortBy / sortOrder: default to settings (person_name / ASC)
    """
    cfg = get_settings()

    field: Optional[PersonField] = None
    if search_by and search_by.strip():
        field = PersonField.parse(search_by)
        if field is None or field.value not in SEARCH_FIELDS:
            log.info("searchBy actual value %r, using %s", search_by, PersonField.person_name.value)
            field = PersonField.person_name

    if sort_by and sort_by.strip():
        sort_field = PersonField.parse(sort_by)
    else:
        sort_field = PersonField.parse(cfg.default_sort_by)

    try:
        order = SortOrder(sort_order or cfg.default_sort_order)
    except ValueError:
        order = SortOrder.asc

    return PersonsListQuery(
        search_by=field,
        search_string=search_string,
        sort_by=sort_field,
        sort_order=order,
    )


# ---------------------------------------------------------------------------
# Middleware + exception handler
# ---------------------------------------------------------------------------

def install_pipeline(app: FastAPI) -> None:
    cfg = get_settings()
    header_key = cfg.api.global_header_key
    header_value = cfg.api.global_header_value

    @app.middleware("http")
    async def global_header(request: Request, call_next):
        response = await call_next(request)
        if header_key:
            response.headers[header_key] = header_value
        return response

    @app.middleware("http")
    async def request_timing(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        log.info("%s %s -> %s (%.1f ms)", request.method, request.url.path, response.status_code, elapsed_ms)
        return response

    app.add_exception_handler(Exception, handle_exception)


async def handle_exception(request: Request, exc: Exception) -> Response:
    log.error(
        "Unhandled exception on %s %s\n%s\n%s",
        request.method, request.url.path, type(exc).__name__, exc,
    )
    if get_settings().is_development:
        return PlainTextResponse(str(exc), status_code=500)
    return PlainTextResponse("Internal Server Error", status_code=500)
