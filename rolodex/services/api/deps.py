# rolodex/services/api/deps.py
from __future__ import annotations
from typing import Generator
from fastapi import Depends, HTTPException, Request
from http import HTTPStatus
from sqlalchemy.orm import Session

from rolodex.common.logging import get_logger
from rolodex.common.settings import get_settings
from rolodex.database.core.main import new_session
from rolodex.services.countries.service import CountriesService
from rolodex.services.persons.service import PersonsService

log = get_logger(__name__)


def get_db() -> Generator[Session, None, None]:
    db = new_session()
    try:
        yield db
    finally:
        db.close()


def transactional_session(db: Session = Depends(get_db)) -> Generator[Session, None, None]:
    """
    Request-scoped transaction. Any repo/service using this session
    participates in the same transaction.

    Usage in routers:
      def endpoint(session: Session = Depends(transactional_session)):
          ...
    """
    # Using the Session.begin() context ensures COMMIT on normal exit,
    # and ROLLBACK if an exception bubbles out.
    with db.begin():
        yield db


def get_persons_service(db: Session = Depends(transactional_session)) -> PersonsService:
    return PersonsService(db)


def get_countries_service(db: Session = Depends(transactional_session)) -> CountriesService:
    return CountriesService(db)


def require_auth_cookie(request: Request) -> None:
    """Reject with 401 unless the configured auth cookie carries the expected value."""
    auth = get_settings().auth
    if not auth.enabled:
        return
    if request.cookies.get(auth.cookie_name) != auth.cookie_value:
        log.info("Auth cookie missing or wrong on %s %s", request.method, request.url.path)
        raise HTTPException(status_code=HTTPStatus.UNAUTHORIZED)
