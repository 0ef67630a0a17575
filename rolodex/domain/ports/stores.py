from __future__ import annotations
from typing import List, Optional, Protocol
from uuid import UUID


class CountryRow(Protocol):
    id: UUID
    country_name: str


class PersonRow(Protocol):
    id: UUID
    person_name: Optional[str]
    email: Optional[str]
    country_id: Optional[UUID]


class CountriesStorePort(Protocol):
    def add(self, *, country_name: str, country_id: Optional[UUID] = None) -> CountryRow: ...
    def list_all(self) -> List[CountryRow]: ...
    def get(self, country_id: UUID) -> Optional[CountryRow]: ...
    def get_by_name(self, country_name: str) -> Optional[CountryRow]: ...
    def names(self) -> set[str]: ...


class PersonsStorePort(Protocol):
    def add(self, **fields) -> PersonRow: ...
    def list_all(self) -> List[PersonRow]: ...
    def get(self, person_id: UUID) -> Optional[PersonRow]: ...
    def update(self, person_id: UUID, **fields) -> PersonRow: ...
    def delete(self, person_id: UUID) -> bool: ...
