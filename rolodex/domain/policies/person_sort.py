# rolodex/domain/policies/person_sort.py
from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List, Optional

from rolodex.domain.entities.person import PersonResponse
from rolodex.domain.enums.person_field import PersonField
from rolodex.domain.enums.sort_order import SortOrder

SortKey = Callable[[PersonResponse], Any]


def _nullable(value: Any) -> tuple:
    # None sorts before any value (ascending)
    return (value is not None, value)


def _text(value: Optional[str]) -> tuple:
    return _nullable(value.casefold() if value is not None else None)


SORTABLE: Dict[PersonField, SortKey] = {
    PersonField.person_name: lambda p: _text(p.person_name),
    PersonField.email: lambda p: _text(p.email),
    PersonField.date_of_birth: lambda p: _nullable(p.date_of_birth),
    PersonField.age: lambda p: _nullable(p.age),
    PersonField.gender: lambda p: _text(p.gender),
    PersonField.country: lambda p: _text(p.country),
    PersonField.address: lambda p: _text(p.address),
    PersonField.receive_news_letters: lambda p: bool(p.receive_news_letters),
}


def sort_persons(
    persons: Iterable[PersonResponse],
    field: PersonField | str | None,
    order: SortOrder | str = SortOrder.asc,
) -> List[PersonResponse]:
    """
    Order persons by `field`. Unknown/empty field keeps the input order.
    Sorting is stable, so equal keys keep their input order in both directions.
    """
    persons = list(persons)
    if isinstance(field, str) and not isinstance(field, PersonField):
        field = PersonField.parse(field)
    if field is None:
        return persons
    key = SORTABLE.get(field)
    if key is None:
        return persons
    order = SortOrder(order) if not isinstance(order, SortOrder) else order
    return sorted(persons, key=key, reverse=order is SortOrder.desc)
