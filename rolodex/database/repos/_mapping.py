# rolodex/database/repos/_mapping.py
from __future__ import annotations

from datetime import date
from typing import Optional

from rolodex.database.models.country import Country as DBCountry
from rolodex.database.models.person import Person as DBPerson
from rolodex.domain.entities.country import CountryResponse
from rolodex.domain.entities.person import PersonResponse, compute_age
from rolodex.domain.enums import Gender


def to_country_response(row: DBCountry) -> CountryResponse:
    return CountryResponse(id=row.id, country_name=row.country_name)


def to_person_response(row: DBPerson, *, today: Optional[date] = None) -> PersonResponse:
    gender = row.gender.value if isinstance(row.gender, Gender) else row.gender
    return PersonResponse(
        id=row.id,
        person_name=row.person_name,
        email=row.email,
        date_of_birth=row.date_of_birth,
        gender=gender,
        country_id=row.country_id,
        country=row.country.country_name if row.country is not None else None,
        address=row.address,
        receive_news_letters=bool(row.receive_news_letters),
        age=compute_age(row.date_of_birth, today),
    )
