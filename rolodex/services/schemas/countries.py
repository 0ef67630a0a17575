# rolodex/services/schemas/countries.py
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CountryAddRequest(BaseModel):
    model_config = ConfigDict(validate_default=True)

    country_name: Optional[str] = Field(default=None, max_length=40)

    @field_validator("country_name", mode="before")
    @classmethod
    def _required(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            raise ValueError("Country Name can't be blank")
        return v
