# rolodex/services/schemas/persons.py
from __future__ import annotations

from datetime import date
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.networks import validate_email
from pydantic_core import PydanticCustomError

from rolodex.domain.enums import Gender


def _empty_to_none(v):
    # HTML forms post "" for untouched inputs
    if isinstance(v, str) and not v.strip():
        return None
    return v


# ---------- Requests ----------

class PersonAddRequest(BaseModel):
    """
    Add contract: name + email required, everything else optional.
    Field rules live here; PersonsService re-runs them on every call.
    """
    model_config = ConfigDict(validate_default=True)

    person_name: Optional[str] = Field(default=None, max_length=40)
    email: Optional[str] = Field(default=None, max_length=50)
    date_of_birth: Optional[date] = None
    gender: Optional[Gender] = None
    country_id: Optional[UUID] = None
    address: Optional[str] = Field(default=None, max_length=200)
    receive_news_letters: bool = False

    @field_validator("date_of_birth", "gender", "country_id", "address", mode="before")
    @classmethod
    def _blank_is_none(cls, v):
        return _empty_to_none(v)

    @field_validator("person_name", mode="before")
    @classmethod
    def _name_required(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            raise ValueError("Person Name can't be blank")
        return v

    @field_validator("email", mode="before")
    @classmethod
    def _email_required(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            raise ValueError("Email can't be blank")
        return v

    @field_validator("email", mode="after")
    @classmethod
    def _email_syntax(cls, v: str) -> str:
        try:
            validate_email(v)
        except PydanticCustomError:
            raise ValueError("Invalid Email") from None
        return v


class PersonUpdateRequest(PersonAddRequest):
    """Update contract: identity plus every add rule; gender and country become required."""
    id: UUID

    @field_validator("gender", mode="after")
    @classmethod
    def _gender_required(cls, v):
        if v is None:
            raise ValueError("A gender must be selected")
        return v

    @field_validator("country_id", mode="after")
    @classmethod
    def _country_required(cls, v):
        if v is None:
            raise ValueError("A country must be selected")
        return v

