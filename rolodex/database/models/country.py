# rolodex/database/models/country.py
from __future__ import annotations

from typing import List, TYPE_CHECKING

from sqlalchemy import String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from rolodex.database.core.main import Base
from rolodex.database.core.service_object import ServiceObject

if TYPE_CHECKING:
    from .person import Person


class Country(ServiceObject, Base):
    """
    Reference data; created once (form or spreadsheet import), never edited.
    Names are unique (exact match, case-sensitive).
    """
    __tablename__ = "countries"
    __table_args__ = (
        UniqueConstraint("country_name", name="uq_countries_country_name"),
    )

    country_name: Mapped[str] = mapped_column(String(40), nullable=False)

    persons: Mapped[List["Person"]] = relationship(
        "Person",
        back_populates="country",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Country id={self.id} name={self.country_name!r}>"
