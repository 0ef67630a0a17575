# rolodex/database/seed.py
"""
Load the reference countries/persons fixtures into the configured database.

    python -m rolodex.database.seed [--dir PATH]

Rows whose id (or, for countries, name) already exists are left alone, so the
loader can be re-run safely.
"""
from __future__ import annotations

import argparse
import json
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Any, Dict, List
from uuid import UUID

from sqlalchemy.orm import Session

from rolodex.common.logging import get_logger
from rolodex.common.settings import get_settings
from rolodex.database.core.transaction import session_scope
from rolodex.database.repos.countries_repo import SqlAlchemyCountriesRepo
from rolodex.database.repos.persons_repo import SqlAlchemyPersonsRepo
from rolodex.domain.enums import Gender

log = get_logger(__name__)


@dataclass
class SeedResult:
    countries: int = 0
    persons: int = 0


def _load(path: Path) -> List[Dict[str, Any]]:
    with path.open("r", encoding="utf-8") as fh:
        return json.load(fh)


def _person_fields(raw: Dict[str, Any]) -> Dict[str, Any]:
    dob = raw.get("date_of_birth")
    gender = raw.get("gender")
    country_id = raw.get("country_id")
    return dict(
        person_name=raw.get("person_name"),
        email=raw.get("email"),
        date_of_birth=date.fromisoformat(dob) if dob else None,
        gender=Gender(gender) if gender else None,
        country_id=UUID(country_id) if country_id else None,
        address=raw.get("address"),
        receive_news_letters=bool(raw.get("receive_news_letters", False)),
    )


def seed(db: Session, seed_dir: Path) -> SeedResult:
    """Insert missing fixture rows using `db`; the caller owns the transaction."""
    result = SeedResult()
    countries = SqlAlchemyCountriesRepo(db)
    persons = SqlAlchemyPersonsRepo(db)

    names = countries.names()
    for raw in _load(seed_dir / "countries.json"):
        cid = UUID(raw["id"])
        if raw["country_name"] in names or countries.get(cid) is not None:
            continue
        countries.add(country_name=raw["country_name"], country_id=cid)
        names.add(raw["country_name"])
        result.countries += 1

    for raw in _load(seed_dir / "persons.json"):
        pid = UUID(raw["id"])
        if persons.get(pid) is not None:
            continue
        persons.add(person_id=pid, **_person_fields(raw))
        result.persons += 1

    log.info("Seeded countries=%d persons=%d from %s", result.countries, result.persons, seed_dir)
    return result


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Load rolodex seed data")
    parser.add_argument("--dir", type=Path, default=get_settings().seed_dir, help="directory holding countries.json/persons.json")
    args = parser.parse_args(argv)

    with session_scope() as db:
        seed(db, args.dir)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
