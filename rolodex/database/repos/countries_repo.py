from __future__ import annotations
from typing import Optional, List
from uuid import UUID

from sqlalchemy import select, func
from sqlalchemy.orm import Session

from rolodex.database.models.country import Country as DBCountry


class SqlAlchemyCountriesRepo:
    def __init__(self, session: Session) -> None:
        self.db = session

    def add(self, *, country_name: str, country_id: Optional[UUID] = None) -> DBCountry:
        obj = DBCountry(id=country_id, country_name=country_name) if country_id else DBCountry(country_name=country_name)
        self.db.add(obj)
        self.db.flush()  # ensure id + surface unique violations here
        return obj

    def list_all(self) -> List[DBCountry]:
        return self.db.execute(select(DBCountry)).scalars().all()

    def get(self, country_id: UUID) -> Optional[DBCountry]:
        return self.db.get(DBCountry, country_id)

    def get_by_name(self, country_name: str) -> Optional[DBCountry]:
        stmt = select(DBCountry).where(DBCountry.country_name == country_name).limit(1)
        return self.db.execute(stmt).scalars().first()

    def names(self) -> set[str]:
        return set(self.db.execute(select(DBCountry.country_name)).scalars().all())

    def count(self) -> int:
        return int(self.db.execute(select(func.count()).select_from(DBCountry)).scalar_one())
