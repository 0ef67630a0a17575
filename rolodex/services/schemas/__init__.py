from rolodex.services.schemas.countries import (
    CountryAddRequest,
)
from rolodex.services.schemas.forms import PersonForm
from rolodex.services.schemas.persons import (
    PersonAddRequest,
    PersonUpdateRequest,
)
__all__ = [
    "CountryAddRequest",
    "PersonAddRequest",
    "PersonUpdateRequest",
    "PersonForm",
]
