# rolodex/services/schemas/forms.py
from __future__ import annotations

from pydantic import BaseModel

from rolodex.domain.entities.person import PersonResponse


class PersonForm(BaseModel):
    """
    Raw HTML form post for create/edit. Everything arrives as text; the field
    rules run afterwards through PersonAddRequest / PersonUpdateRequest so a bad
    post re-renders the form instead of failing with 422.
    """
    person_name: str = ""
    email: str = ""
    date_of_birth: str = ""
    gender: str = ""
    country_id: str = ""
    address: str = ""
    receive_news_letters: bool = False

    @classmethod
    def from_person(cls, p: PersonResponse) -> "PersonForm":
        return cls(
            person_name=p.person_name or "",
            email=p.email or "",
            date_of_birth=p.date_of_birth.isoformat() if p.date_of_birth else "",
            gender=p.gender or "",
            country_id=str(p.country_id) if p.country_id else "",
            address=p.address or "",
            receive_news_letters=p.receive_news_letters,
        )
