# rolodex/domain/entities/country.py
from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class CountryResponse:
    """Read projection of a Country. Equality is by value."""
    id: UUID
    country_name: str
