from datetime import date
from uuid import uuid4

import pytest

from rolodex.domain.enums import Gender, PersonField, SortOrder
from rolodex.domain.errors import NotFoundError, NullRequestError, ValidationError
from rolodex.services.schemas import CountryAddRequest, PersonAddRequest, PersonUpdateRequest


@pytest.fixture()
def usa(countries_service):
    return countries_service.add_country(CountryAddRequest(country_name="USA"))


@pytest.fixture()
def canada(countries_service):
    return countries_service.add_country(CountryAddRequest(country_name="Canada"))


def _add(persons_service, name, **kw):
    kw.setdefault("email", f"{name.lower()}@example.com")
    return persons_service.add_person(PersonAddRequest(person_name=name, **kw))


# ---- add ----

def test_add_person_none(persons_service):
    with pytest.raises(NullRequestError):
        persons_service.add_person(None)


def test_add_person_invalid_request(persons_service):
    with pytest.raises(ValidationError) as ei:
        persons_service.add_person(PersonAddRequest.model_construct(person_name=None, email="a@example.com"))
    assert str(ei.value) == "Person Name can't be blank"

    with pytest.raises(ValidationError) as ei:
        persons_service.add_person(PersonAddRequest.model_construct(person_name="Ann", email="nope"))
    assert str(ei.value) == "Invalid Email"


def test_add_person_returns_full_projection(persons_service, usa):
    resp = _add(
        persons_service, "Ann",
        date_of_birth=date(1994, 6, 15), gender=Gender.female, country_id=usa.id,
        address="1 Main St", receive_news_letters=True,
    )
    assert resp.id is not None
    assert resp.country == "USA"
    assert resp.country_id == usa.id
    assert resp.gender == "Female"
    # service "today" is pinned to 2024-06-15
    assert resp.age == 30

    assert persons_service.get_person_by_id(resp.id) == resp
    assert resp in persons_service.get_all_persons()


def test_add_person_unknown_country(persons_service):
    with pytest.raises(ValidationError) as ei:
        _add(persons_service, "Ann", gender=Gender.female, country_id=uuid4())
    assert str(ei.value) == "Given country doesn't exist"
    assert persons_service.get_all_persons() == []


def test_add_person_without_optional_fields(persons_service):
    resp = _add(persons_service, "Bo")
    assert resp.age is None
    assert resp.country is None
    assert resp.gender is None


# ---- get ----

def test_get_by_id_none_or_unknown(persons_service):
    assert persons_service.get_all_persons() == []
    assert persons_service.get_person_by_id(None) is None
    assert persons_service.get_person_by_id(uuid4()) is None


# ---- filter / sort ----

def test_filtered_and_sorted(persons_service, usa, canada):
    _add(persons_service, "mary", country_id=usa.id)
    _add(persons_service, "Rahman", country_id=canada.id)
    _add(persons_service, "Scott")

    found = persons_service.get_filtered_persons(PersonField.person_name, "ma")
    assert {p.person_name for p in found} == {"mary", "Rahman"}

    ordered = persons_service.get_sorted_persons(found, PersonField.person_name, SortOrder.desc)
    assert [p.person_name for p in ordered] == ["Rahman", "mary"]

    by_country = persons_service.get_filtered_persons("CountryID", "can")
    assert [p.person_name for p in by_country] == ["Rahman"]


def test_filter_with_empty_inputs_returns_all(persons_service):
    _add(persons_service, "Ann")
    _add(persons_service, "Bo")
    assert len(persons_service.get_filtered_persons(None, "x")) == 2
    assert len(persons_service.get_filtered_persons(PersonField.email, "")) == 2


def test_sort_with_bad_order_falls_back_to_ascending(persons_service):
    people = [_add(persons_service, n) for n in ("b", "a")]
    got = persons_service.get_sorted_persons(people, PersonField.person_name, "sideways")
    assert [p.person_name for p in got] == ["a", "b"]


# ---- update ----

def _update_req(resp, **kw):
    data = dict(
        id=resp.id,
        person_name=resp.person_name,
        email=resp.email,
        date_of_birth=resp.date_of_birth,
        gender=resp.gender,
        country_id=resp.country_id,
        address=resp.address,
        receive_news_letters=resp.receive_news_letters,
    )
    data.update(kw)
    return PersonUpdateRequest(**data)


def test_update_person_none(persons_service):
    with pytest.raises(NullRequestError):
        persons_service.update_person(None)


def test_update_person_overwrites_fields(persons_service, usa, canada):
    resp = _add(persons_service, "Ann", gender=Gender.female, country_id=usa.id)

    updated = persons_service.update_person(
        _update_req(resp, person_name="Annie", country_id=canada.id, receive_news_letters=True)
    )
    assert updated.id == resp.id
    assert updated.person_name == "Annie"
    assert updated.country == "Canada"
    assert updated.receive_news_letters is True
    assert persons_service.get_person_by_id(resp.id) == updated


def test_update_requires_gender_and_country(persons_service):
    resp = _add(persons_service, "Ann")
    req = PersonUpdateRequest.model_construct(
        id=resp.id, person_name="Ann", email="ann@example.com", gender=None, country_id=None,
    )
    with pytest.raises(ValidationError) as ei:
        persons_service.update_person(req)
    assert str(ei.value) == "A gender must be selected"


def test_update_null_name_keeps_stored_record(persons_service, usa):
    resp = _add(persons_service, "Ann", gender=Gender.female, country_id=usa.id)
    req = PersonUpdateRequest.model_construct(
        id=resp.id, person_name=None, email="ann@example.com", gender=Gender.female, country_id=usa.id,
    )
    with pytest.raises(ValidationError) as ei:
        persons_service.update_person(req)
    assert str(ei.value) == "Person Name can't be blank"
    assert persons_service.get_person_by_id(resp.id).person_name == "Ann"


def test_update_unknown_country(persons_service, usa):
    resp = _add(persons_service, "Ann", gender=Gender.female, country_id=usa.id)
    with pytest.raises(ValidationError) as ei:
        persons_service.update_person(_update_req(resp, country_id=uuid4()))
    assert str(ei.value) == "Given country doesn't exist"
    assert persons_service.get_person_by_id(resp.id).country == "USA"


def test_update_unknown_id(persons_service, usa):
    resp = _add(persons_service, "Ann", gender=Gender.female, country_id=usa.id)
    with pytest.raises(NotFoundError):
        persons_service.update_person(_update_req(resp, id=uuid4()))


# ---- delete ----

def test_delete_person(persons_service):
    resp = _add(persons_service, "Ann")
    assert persons_service.delete_person(resp.id) is True
    assert persons_service.get_person_by_id(resp.id) is None
    assert persons_service.delete_person(resp.id) is False


def test_delete_unknown_id_leaves_store_unchanged(persons_service):
    ann = _add(persons_service, "Ann")
    bob = _add(persons_service, "Bob")

    assert persons_service.delete_person(uuid4()) is False
    assert {p.id for p in persons_service.get_all_persons()} == {ann.id, bob.id}


def test_delete_person_none(persons_service):
    with pytest.raises(NullRequestError):
        persons_service.delete_person(None)
