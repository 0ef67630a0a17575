# tests/services/test_countries_api.py
from __future__ import annotations

XLSX = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _upload(api_client, filename, content, **data):
    return api_client.post(
        "/countries/UploadFromExcel",
        files={"excelFile": (filename, content, XLSX)},
        data=data,
    )


def test_upload_form(api_client):
    r = api_client.get("/countries/UploadFromExcel")
    assert r.status_code == 200
    assert 'name="excelFile"' in r.text


def test_upload_inserts_and_reports_count(api_client, countries_service, countries_workbook):
    r = _upload(api_client, "countries.xlsx", countries_workbook(["USA", "Canada", None, "USA"]))
    assert r.status_code == 200
    assert "2 Countries Uploaded" in r.text
    assert {c.country_name for c in countries_service.get_all_countries()} == {"USA", "Canada"}


def test_upload_extension_is_case_insensitive(api_client, countries_workbook):
    r = _upload(api_client, "COUNTRIES.XLSX", countries_workbook(["USA"]))
    assert "1 Countries Uploaded" in r.text


def test_upload_without_file(api_client, countries_service):
    r = api_client.post("/countries/UploadFromExcel", data={"atomic": "false"})
    assert r.status_code == 200
    assert "Please Select an Excel file" in r.text
    assert countries_service.get_all_countries() == []


def test_upload_empty_file(api_client):
    r = _upload(api_client, "countries.xlsx", b"")
    assert "Please Select an Excel file" in r.text


def test_upload_wrong_extension(api_client, countries_workbook):
    r = _upload(api_client, "countries.csv", countries_workbook(["USA"]))
    assert "Unsupported file, it must be an xlsx file!" in r.text


def test_upload_missing_sheet(api_client, countries_workbook):
    r = _upload(api_client, "countries.xlsx", countries_workbook(["USA"], sheet="Sheet1"))
    assert r.status_code == 200
    assert "Worksheet" in r.text


def test_atomic_upload_rejects_bad_file(api_client, countries_service, countries_workbook):
    r = _upload(api_client, "countries.xlsx", countries_workbook(["USA", "x" * 41]), atomic="true")
    assert r.status_code == 200
    assert "row 3" in r.text
    assert countries_service.get_all_countries() == []
