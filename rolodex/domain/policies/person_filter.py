# rolodex/domain/policies/person_filter.py
from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Optional, Sequence

from rolodex.common.strings.text import blank, contains_ci
from rolodex.domain.entities.person import PersonResponse
from rolodex.domain.enums.person_field import PersonField

# Each accessor returns the text forms a search string may match.
# An empty tuple means "no value" and never matches a non-empty search.
TextForms = Callable[[PersonResponse], Sequence[str]]


def _one(value: Optional[str]) -> Sequence[str]:
    return (value,) if value is not None else ()


def _date_forms(p: PersonResponse) -> Sequence[str]:
    d = p.date_of_birth
    if d is None:
        return ()
    return (d.strftime("%d %m %Y"), d.strftime("%d %B %Y"), d.isoformat())


SEARCHABLE: Dict[PersonField, TextForms] = {
    PersonField.person_name: lambda p: _one(p.person_name),
    PersonField.email: lambda p: _one(p.email),
    PersonField.date_of_birth: _date_forms,
    PersonField.gender: lambda p: _one(p.gender),
    PersonField.country: lambda p: _one(p.country),
    PersonField.address: lambda p: _one(p.address),
}


def filter_persons(
    persons: Iterable[PersonResponse],
    field: PersonField | str | None,
    search_text: Optional[str],
) -> List[PersonResponse]:
    """
    Keep persons whose `field` contains `search_text` (case-insensitive).

    - empty search text, empty field, or a field that isn't searchable -> all persons
    - a person with no value for the field is excluded once a search text is given
    """
    persons = list(persons)
    if isinstance(field, str) and not isinstance(field, PersonField):
        field = PersonField.parse(field)
    if field is None or blank(search_text):
        return persons
    forms = SEARCHABLE.get(field)
    if forms is None:
        return persons
    needle = search_text.strip()
    return [p for p in persons if any(contains_ci(text, needle) for text in forms(p))]
