from uuid import uuid4

from rolodex.database.models import Country


def test_add_get_and_lookup_by_name(db, countries_repo):
    cid = uuid4()
    row = countries_repo.add(country_name="USA", country_id=cid)
    assert row.id == cid

    assert countries_repo.get(cid).country_name == "USA"
    assert countries_repo.get_by_name("USA").id == cid
    # exact, case-sensitive match
    assert countries_repo.get_by_name("usa") is None
    assert countries_repo.get(uuid4()) is None


def test_generated_id_names_and_count(db, countries_repo):
    row = countries_repo.add(country_name="Canada")
    assert row.id is not None
    countries_repo.add(country_name="UK")

    assert countries_repo.names() == {"Canada", "UK"}
    assert countries_repo.count() == 2
    assert {c.country_name for c in countries_repo.list_all()} == {"Canada", "UK"}


def test_service_object_columns_are_filled(db, countries_repo):
    row = countries_repo.add(country_name="India")
    db.refresh(row)
    assert isinstance(row, Country)
    assert row.date_created is not None
    assert row.meta_data is None
