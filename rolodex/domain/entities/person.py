# rolodex/domain/entities/person.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional
from uuid import UUID

DAYS_PER_YEAR = Decimal("365.25")


def compute_age(date_of_birth: Optional[date], today: Optional[date] = None) -> Optional[int]:
    """
    Age in years: (today - date_of_birth).days / 365.25, rounded half-up.
    None when there is no birth date.
    """
    if date_of_birth is None:
        return None
    today = today or date.today()
    years = Decimal((today - date_of_birth).days) / DAYS_PER_YEAR
    return int(years.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class PersonResponse:
    """
    Read projection of a Person:
      - `country` is the denormalized country name (None if no/unknown country)
      - `age` is derived from date_of_birth at projection time
    Equality compares every field.
    """
    id: UUID
    person_name: Optional[str]
    email: Optional[str]
    date_of_birth: Optional[date] = None
    gender: Optional[str] = None
    country_id: Optional[UUID] = None
    country: Optional[str] = None
    address: Optional[str] = None
    receive_news_letters: bool = False
    age: Optional[int] = None
