# rolodex/database/models/person.py
from __future__ import annotations

from datetime import date
from typing import Optional, TYPE_CHECKING
from uuid import UUID as UUID_t

from sqlalchemy import Boolean, Date, Enum as SAEnum, ForeignKey, Index, String, Uuid, false
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rolodex.database.core.main import Base
from rolodex.database.core.service_object import ServiceObject
from rolodex.domain.enums import Gender

if TYPE_CHECKING:
    from .country import Country


def _country_fk() -> str:
    schema = Base.metadata.schema
    return f"{schema}.countries.id" if schema else "countries.id"


class Person(ServiceObject, Base):
    """
    Person record. `country` is loaded eagerly so read projections can carry
    the country name without a second query.
    """
    __tablename__ = "persons"
    __table_args__ = (
        Index("ix_persons_person_name", "person_name"),
        Index("ix_persons_country_id", "country_id"),
    )

    person_name: Mapped[Optional[str]] = mapped_column(String(40))
    email: Mapped[Optional[str]] = mapped_column(String(50))
    date_of_birth: Mapped[Optional[date]] = mapped_column(Date)
    gender: Mapped[Optional[Gender]] = mapped_column(
        SAEnum(
            Gender,
            name="gender_option",
            values_callable=lambda e: [m.value for m in e],
            length=10,
        ),
        nullable=True,
    )
    country_id: Mapped[Optional[UUID_t]] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey(_country_fk(), ondelete="SET NULL"),
        nullable=True,
    )
    address: Mapped[Optional[str]] = mapped_column(String(200))
    receive_news_letters: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default=false())

    country: Mapped[Optional["Country"]] = relationship(
        "Country",
        back_populates="persons",
        lazy="joined",
    )

    def __repr__(self) -> str:
        return f"<Person id={self.id} name={self.person_name!r}>"
