from __future__ import annotations
from typing import Any, Optional, List
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from rolodex.database.models.person import Person as DBPerson
from rolodex.domain.errors import NotFoundError

# Columns a caller may set through add()/update(); id is never replaced
MUTABLE_FIELDS = (
    "person_name",
    "email",
    "date_of_birth",
    "gender",
    "country_id",
    "address",
    "receive_news_letters",
)


class SqlAlchemyPersonsRepo:
    def __init__(self, session: Session) -> None:
        self.db = session

    # -------- Persons (CRUD) --------

    def add(self, *, person_id: Optional[UUID] = None, **fields: Any) -> DBPerson:
        values = {k: fields[k] for k in MUTABLE_FIELDS if k in fields}
        obj = DBPerson(id=person_id, **values) if person_id else DBPerson(**values)
        self.db.add(obj)
        self.db.flush()
        # load the country relationship for the fresh row
        self.db.refresh(obj)
        return obj

    def list_all(self) -> List[DBPerson]:
        return self.db.execute(select(DBPerson)).unique().scalars().all()

    def get(self, person_id: UUID) -> Optional[DBPerson]:
        return self.db.get(DBPerson, person_id)

    def update(self, person_id: UUID, **fields: Any) -> DBPerson:
        obj = self.get(person_id)
        if not obj:
            raise NotFoundError("Given person id doesn't exist")
        for k in MUTABLE_FIELDS:
            if k in fields:
                setattr(obj, k, fields[k])
        self.db.flush()
        self.db.refresh(obj)
        return obj

    def delete(self, person_id: UUID) -> bool:
        obj = self.get(person_id)
        if not obj:
            return False
        self.db.delete(obj)
        self.db.flush()
        return True
