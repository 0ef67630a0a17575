# rolodex/database/models/__init__.py

from rolodex.database.core.main import Base
from rolodex.database.models.country import Country
from rolodex.database.models.person import Person

__all__ = [
    "Base",
    "Country",
    "Person",
]
