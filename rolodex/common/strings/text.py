# rolodex/common/strings/text.py
from __future__ import annotations

from typing import Any, List, Optional


def csv_to_list(v: str | List[str] | None) -> List[str]:
    if v is None:
        return []
    if isinstance(v, list):
        return [s.strip() for s in v if s and str(s).strip()]
    return [s.strip() for s in str(v).split(",") if s.strip()]


def cell_text(value: Any) -> Optional[str]:
    """
    Spreadsheet cell -> trimmed text, or None when the cell is empty/blank.
    Numbers and dates are stringified the way they display.
    """
    if value is None:
        return None
    s = str(value).strip()
    return s or None


def contains_ci(haystack: Optional[str], needle: str) -> bool:
    """Case-insensitive substring test; a missing haystack never matches."""
    if haystack is None:
        return False
    return needle.casefold() in haystack.casefold()


def blank(s: Optional[str]) -> bool:
    return s is None or not s.strip()
