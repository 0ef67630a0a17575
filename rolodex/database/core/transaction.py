# rolodex/database/core/transaction.py
from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy.orm import Session

from rolodex.database.core.main import new_session


@contextmanager
def session_scope(db: Optional[Session] = None) -> Iterator[Session]:
    """
    One transaction outside a request (scripts, seed loader).
    Commits on normal exit, rolls back if an exception escapes. A session
    created here is closed afterwards; a passed-in one is left open.
    """
    owned = db is None
    session = new_session() if owned else db
    try:
        with session.begin():
            yield session
    finally:
        if owned:
            session.close()
