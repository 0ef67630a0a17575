from __future__ import annotations
from enum import StrEnum

class SortOrder(StrEnum):
    asc = "ASC"
    desc = "DESC"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            v = value.strip().upper()
            for member in cls:
                if member.value == v:
                    return member
        return None
