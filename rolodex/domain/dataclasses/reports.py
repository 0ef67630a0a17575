# rolodex/domain/dataclasses/reports.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Tuple


@dataclass
class BaseReport:
    """Common report base:
    - timing: started_at / finished_at
    - error capture: error_details
    - helpers: start(), stop(), add_error()
    """
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None
    # Each tuple is (subject, message), e.g. ("row 7", "...")
    error_details: List[Tuple[str, str]] = field(default_factory=list)

    def start(self) -> None:
        if self.started_at is None:
            self.started_at = datetime.now()

    def stop(self) -> None:
        self.finished_at = datetime.now()

    def add_error(self, subject: str, message: str) -> None:
        self.error_details.append((subject, message))


@dataclass
class CountryImportReport(BaseReport):
    rows: int = 0         # data rows read (header excluded)
    inserted: int = 0
    blank: int = 0        # empty cells
    skipped: int = 0      # name already stored or repeated earlier in the file
    errors: int = 0

    def messages(self) -> List[str]:
        return [f"{subject}: {message}" for subject, message in self.error_details]
