from __future__ import annotations
from enum import StrEnum

class Gender(StrEnum):
    male = "Male"
    female = "Female"
    other = "Other"

    @classmethod
    def _missing_(cls, value):
        # accept "male", "MALE", ...
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.strip().lower():
                    return member
        return None
