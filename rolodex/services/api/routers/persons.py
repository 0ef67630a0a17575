# rolodex/services/api/routers/persons.py
from __future__ import annotations

from datetime import datetime
from http import HTTPStatus
from typing import Annotated, List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import RedirectResponse, Response, StreamingResponse

from rolodex.common.logging import get_logger
from rolodex.common.settings import get_settings
from rolodex.domain.dataclasses.list_query import PersonsListQuery
from rolodex.domain.enums import Gender, PersonField
from rolodex.domain.errors import NotFoundError, ValidationError
from rolodex.services.api.deps import (
    get_countries_service,
    get_persons_service,
    require_auth_cookie,
)
from rolodex.services.api.filters import header_route, persons_list_query, response_header
from rolodex.services.api.templating import templates
from rolodex.services.countries.service import CountriesService
from rolodex.services.exports import ExcelColumnSet, persons_csv, persons_excel, persons_pdf
from rolodex.services.persons.service import PersonsService
from rolodex.services.schemas import PersonAddRequest, PersonForm, PersonUpdateRequest
from rolodex.services.validation import parse_model

cfg = get_settings()
log = get_logger(__name__)
router = APIRouter(
    tags=["persons"],
    route_class=header_route(("Controller-Key", "Controller-Value")),
)

# Columns of the list view (and the PDF), in display order
LIST_COLUMNS = [
    PersonField.person_name,
    PersonField.email,
    PersonField.date_of_birth,
    PersonField.age,
    PersonField.gender,
    PersonField.country,
    PersonField.address,
    PersonField.receive_news_letters,
]


# ---- helpers ----

def _parse_id(raw: Optional[str]) -> Optional[UUID]:
    try:
        return UUID(str(raw))
    except (TypeError, ValueError):
        return None


def _to_index() -> RedirectResponse:
    return RedirectResponse(url="/persons/index", status_code=HTTPStatus.SEE_OTHER)


def _render_form(
    request: Request,
    template: str,
    countries: CountriesService,
    form: PersonForm,
    *,
    errors: Optional[List[str]] = None,
    person_id: Optional[UUID] = None,
) -> Response:
    return templates.TemplateResponse(
        request,
        template,
        {
            "form": form,
            "person_id": person_id,
            "countries": countries.get_all_countries(),
            "genders": list(Gender),
            "errors": errors or [],
        },
    )


# ---- list ----

@router.get("/")
@router.get("/persons")
@router.get("/persons/index")
@response_header("X-Custom-Key", "Custom-Value")
def index(
    request: Request,
    query: PersonsListQuery = Depends(persons_list_query),
    persons: PersonsService = Depends(get_persons_service),
) -> Response:
    log.info("Persons index")
    log.debug("list query %r", query)

    found = persons.get_filtered_persons(query.search_by, query.search_string)
    ordered = persons.get_sorted_persons(found, query.sort_by, query.sort_order)

    response = templates.TemplateResponse(
        request,
        "persons/index.html",
        {"persons": ordered, "query": query, "columns": LIST_COLUMNS},
    )
    response.headers["Last-Modified"] = datetime.now().strftime("%Y-%m-%d %H:%M")
    return response


# ---- create ----

@router.get("/persons/create")
@response_header("my-key", "my-value")
def create_form(
    request: Request,
    countries: CountriesService = Depends(get_countries_service),
) -> Response:
    return _render_form(request, "persons/create.html", countries, PersonForm())


@router.post("/persons/create")
def create_submit(
    request: Request,
    form: Annotated[PersonForm, Form()],
    persons: PersonsService = Depends(get_persons_service),
    countries: CountriesService = Depends(get_countries_service),
) -> Response:
    try:
        persons.add_person(parse_model(PersonAddRequest, form.model_dump()))
    except ValidationError as e:
        return _render_form(request, "persons/create.html", countries, form, errors=e.errors)
    return _to_index()


# ---- edit ----

@router.get("/persons/edit/{person_id}", dependencies=[Depends(require_auth_cookie)])
def edit_form(
    request: Request,
    person_id: str,
    persons: PersonsService = Depends(get_persons_service),
    countries: CountriesService = Depends(get_countries_service),
) -> Response:
    person = persons.get_person_by_id(_parse_id(person_id))
    if person is None:
        return _to_index()
    return _render_form(
        request, "persons/edit.html", countries, PersonForm.from_person(person), person_id=person.id,
    )


@router.post("/persons/edit/{person_id}", dependencies=[Depends(require_auth_cookie)])
def edit_submit(
    request: Request,
    person_id: str,
    form: Annotated[PersonForm, Form()],
    persons: PersonsService = Depends(get_persons_service),
    countries: CountriesService = Depends(get_countries_service),
) -> Response:
    person = persons.get_person_by_id(_parse_id(person_id))
    if person is None:
        return _to_index()

    try:
        persons.update_person(parse_model(PersonUpdateRequest, {**form.model_dump(), "id": person.id}))
    except ValidationError as e:
        return _render_form(
            request, "persons/edit.html", countries, form, errors=e.errors, person_id=person.id,
        )
    except NotFoundError:
        log.info("Person %s removed before update, nothing saved", person.id)
    return _to_index()


# ---- delete ----

@router.get("/persons/delete/{person_id}")
def delete_confirm(
    request: Request,
    person_id: str,
    persons: PersonsService = Depends(get_persons_service),
) -> Response:
    person = persons.get_person_by_id(_parse_id(person_id))
    if person is None:
        return _to_index()
    return templates.TemplateResponse(request, "persons/delete.html", {"person": person})


@router.post("/persons/delete/{person_id}")
def delete_submit(
    person_id: str,
    persons: PersonsService = Depends(get_persons_service),
) -> Response:
    pid = _parse_id(person_id)
    if pid is None or persons.get_person_by_id(pid) is None:
        return _to_index()
    persons.delete_person(pid)
    return _to_index()


# ---- exports ----

def _download(buf, media_type: str, filename: str) -> StreamingResponse:
    return StreamingResponse(
        buf,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/persons/PersonsPDF")
def persons_pdf_export(persons: PersonsService = Depends(get_persons_service)) -> Response:
    buf = persons_pdf(persons.get_all_persons(), margin_pt=cfg.export.pdf_margin_pt)
    return Response(
        content=buf.getvalue(),
        media_type="application/pdf",
        headers={"Content-Disposition": f'inline; filename="{cfg.export.pdf_filename}"'},
    )


@router.get("/persons/PersonsCVS")
def persons_csv_export(persons: PersonsService = Depends(get_persons_service)) -> Response:
    buf = persons_csv(persons.get_all_persons())
    return _download(buf, "application/octet-stream", cfg.export.csv_filename)


@router.get("/persons/PersonsExcel")
def persons_excel_export(persons: PersonsService = Depends(get_persons_service)) -> Response:
    buf = persons_excel(
        persons.get_all_persons(),
        ExcelColumnSet.parse(cfg.export.excel_column_set),
        sheet_name=cfg.export.excel_sheet_name,
    )
    return _download(buf, "application/vnd.ms-excel", cfg.export.excel_filename)
