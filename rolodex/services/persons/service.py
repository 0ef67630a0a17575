# rolodex/services/persons/service.py
from __future__ import annotations

from datetime import date
from typing import Iterable, List, Optional
from uuid import UUID, uuid4

from sqlalchemy.orm import Session

from rolodex.common.logging import get_logger
from rolodex.database.repos._mapping import to_person_response
from rolodex.database.repos.countries_repo import SqlAlchemyCountriesRepo
from rolodex.database.repos.persons_repo import SqlAlchemyPersonsRepo
from rolodex.domain.entities.person import PersonResponse
from rolodex.domain.enums import PersonField, SortOrder
from rolodex.domain.errors import NullRequestError, ValidationError
from rolodex.domain.policies.person_filter import filter_persons
from rolodex.domain.policies.person_sort import sort_persons
from rolodex.domain.ports.stores import CountriesStorePort, PersonsStorePort
from rolodex.services.schemas.persons import PersonAddRequest, PersonUpdateRequest
from rolodex.services.validation import validate_model

log = get_logger(__name__)


def _fields(request: PersonAddRequest) -> dict:
    return dict(
        person_name=request.person_name,
        email=request.email,
        date_of_birth=request.date_of_birth,
        gender=request.gender,
        country_id=request.country_id,
        address=request.address,
        receive_news_letters=request.receive_news_letters,
    )


class PersonsService:
    """
    Person record store. Validation runs on every add/update, reads come back
    as PersonResponse projections (country name + age filled in).
    """

    def __init__(
        self,
        db: Session,
        repo: Optional[PersonsStorePort] = None,
        *,
        countries: Optional[CountriesStorePort] = None,
        today: Optional[date] = None,
    ):
        self.db = db
        self.repo = repo or SqlAlchemyPersonsRepo(db)
        self.countries = countries or SqlAlchemyCountriesRepo(db)
        # pinned "today" for age computation (tests); None means date.today()
        self.today = today

    def _project(self, row) -> PersonResponse:
        return to_person_response(row, today=self.today)

    def _check_country(self, country_id: Optional[UUID]) -> None:
        if country_id is not None and self.countries.get(country_id) is None:
            raise ValidationError("Given country doesn't exist")

    # -------- Commands --------

    def add_person(self, request: Optional[PersonAddRequest]) -> PersonResponse:
        if request is None:
            raise NullRequestError("person_add_request")
        request = validate_model(request)
        self._check_country(request.country_id)
        log.debug("add_person %r", request)

        row = self.repo.add(person_id=uuid4(), **_fields(request))
        log.info("Person added id=%s", row.id)
        return self._project(row)

    def update_person(self, request: Optional[PersonUpdateRequest]) -> PersonResponse:
        if request is None:
            raise NullRequestError("person_update_request")
        request = validate_model(request)
        self._check_country(request.country_id)
        log.debug("update_person %r", request)

        # repo raises NotFoundError for an unknown id
        row = self.repo.update(request.id, **_fields(request))
        log.info("Person updated id=%s", row.id)
        return self._project(row)

    def delete_person(self, person_id: Optional[UUID]) -> bool:
        if person_id is None:
            raise NullRequestError("person_id")
        deleted = self.repo.delete(person_id)
        if deleted:
            log.info("Person deleted id=%s", person_id)
        else:
            log.info("Person delete skipped, id=%s not found", person_id)
        return deleted

    # -------- Queries --------

    def get_all_persons(self) -> List[PersonResponse]:
        return [self._project(r) for r in self.repo.list_all()]

    def get_person_by_id(self, person_id: Optional[UUID]) -> Optional[PersonResponse]:
        if person_id is None:
            return None
        row = self.repo.get(person_id)
        return self._project(row) if row else None

    def get_filtered_persons(
        self,
        search_by: PersonField | str | None,
        search_string: Optional[str],
    ) -> List[PersonResponse]:
        log.debug("get_filtered_persons search_by=%r search_string=%r", search_by, search_string)
        return filter_persons(self.get_all_persons(), search_by, search_string)

    def get_sorted_persons(
        self,
        persons: Iterable[PersonResponse],
        sort_by: PersonField | str | None,
        sort_order: SortOrder | str | None = SortOrder.asc,
    ) -> List[PersonResponse]:
        log.debug("get_sorted_persons sort_by=%r sort_order=%r", sort_by, sort_order)
        try:
            order = SortOrder(sort_order) if sort_order else SortOrder.asc
        except ValueError:
            order = SortOrder.asc
        return sort_persons(persons, sort_by, order)
