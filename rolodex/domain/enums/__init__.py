from rolodex.domain.enums.gender import Gender
from rolodex.domain.enums.sort_order import SortOrder
from rolodex.domain.enums.person_field import PersonField
__all__ = [
    "Gender",
    "SortOrder",
    "PersonField",
]
