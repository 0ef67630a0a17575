from __future__ import annotations

from enum import StrEnum
from typing import Optional

# Legacy / display spellings accepted on the query string
_ALIASES = {
    "personname": "person_name",
    "name": "person_name",
    "dateofbirth": "date_of_birth",
    "dob": "date_of_birth",
    "countryid": "country",
    "country_id": "country",
    "country_name": "country",
    "receivenewsletters": "receive_news_letters",
    "newsletter": "receive_news_letters",
}


class PersonField(StrEnum):
    person_name = "person_name"
    email = "email"
    date_of_birth = "date_of_birth"
    age = "age"
    gender = "gender"
    country = "country"
    address = "address"
    receive_news_letters = "receive_news_letters"

    @classmethod
    def parse(cls, name: Optional[str]) -> Optional["PersonField"]:
        """Resolve a query-string field name; None for empty or unknown names."""
        if not name or not name.strip():
            return None
        key = name.strip().lower()
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            return None

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    PersonField.person_name: "Person Name",
    PersonField.email: "Email",
    PersonField.date_of_birth: "Date of Birth",
    PersonField.age: "Age",
    PersonField.gender: "Gender",
    PersonField.country: "Country",
    PersonField.address: "Address",
    PersonField.receive_news_letters: "Receive News Letters",
}
