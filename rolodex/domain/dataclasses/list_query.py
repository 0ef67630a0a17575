# rolodex/domain/dataclasses/list_query.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from rolodex.domain.enums import PersonField, SortOrder

# Fields offered in the list view's "search by" dropdown, in display order
SEARCH_FIELDS: Dict[str, str] = {
    f.value: f.label
    for f in (
        PersonField.person_name,
        PersonField.email,
        PersonField.date_of_birth,
        PersonField.gender,
        PersonField.country,
        PersonField.address,
    )
}


@dataclass
class PersonsListQuery:
    """
    Normalized list-view parameters. Built once per request and passed both
    to the services (filter + sort) and to the template (current selections).
    """
    search_by: Optional[PersonField] = None
    search_string: Optional[str] = None
    sort_by: Optional[PersonField] = PersonField.person_name
    sort_order: SortOrder = SortOrder.asc
    search_fields: Dict[str, str] = field(default_factory=lambda: dict(SEARCH_FIELDS))

    def toggled_order(self, column: PersonField) -> SortOrder:
        """Order a column header link should request next."""
        if self.sort_by == column and self.sort_order is SortOrder.asc:
            return SortOrder.desc
        return SortOrder.asc
