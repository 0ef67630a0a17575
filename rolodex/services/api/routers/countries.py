# rolodex/services/api/routers/countries.py
from __future__ import annotations

from pathlib import PurePath
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from fastapi.responses import Response

from rolodex.common.logging import get_logger
from rolodex.domain.errors import ValidationError
from rolodex.services.api.deps import get_countries_service
from rolodex.services.api.templating import templates
from rolodex.services.countries.service import CountriesService

log = get_logger(__name__)
router = APIRouter(prefix="/countries", tags=["countries"])

TEMPLATE = "countries/upload.html"


def _render(request: Request, *, message: Optional[str] = None, error: Optional[str] = None, details=()) -> Response:
    return templates.TemplateResponse(
        request,
        TEMPLATE,
        {"message": message, "error": error, "details": list(details)},
    )


@router.get("/UploadFromExcel")
def upload_form(request: Request) -> Response:
    return _render(request)


@router.post("/UploadFromExcel")
def upload_submit(
    request: Request,
    excel_file: Optional[UploadFile] = File(None, alias="excelFile"),
    atomic: bool = Form(False),
    countries: CountriesService = Depends(get_countries_service),
) -> Response:
    if excel_file is None or not excel_file.filename:
        return _render(request, error="Please Select an Excel file")

    if PurePath(excel_file.filename).suffix.lower() != ".xlsx":
        return _render(request, error="Unsupported file, it must be an xlsx file!")

    data = excel_file.file.read()
    if not data:
        return _render(request, error="Please Select an Excel file")

    try:
        report = countries.import_countries_from_excel(data, atomic=atomic)
    except ValidationError as e:
        log.info("Country upload rejected: %s", e)
        return _render(request, error=str(e), details=e.errors[1:])

    return _render(
        request,
        message=f"{report.inserted} Countries Uploaded",
        details=report.messages(),
    )
