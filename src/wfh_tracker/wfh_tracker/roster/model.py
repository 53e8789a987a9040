from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Optional

from ..core.exceptions import RosterUnavailableError


@dataclass(frozen=True)
class Person:
    """Domain entity: one member of the organization.

    ``reports_to`` is the manager's display name as configured; ``manager_id``
    is the resolved stable id of that manager, or None when the name points
    outside the roster (the organizational top).
    """

    person_id: str
    full_name: str
    job_title: str
    area: str
    email: str
    reports_to: str
    manager_id: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "igg": self.person_id,
            "fullName": self.full_name,
            "jobTitle": self.job_title,
            "area": self.area,
            "email": self.email,
            "reportsTo": self.reports_to,
        }


def link_managers(people: Iterable[Person]) -> list[Person]:
    """Resolve every ``reports_to`` name into a ``manager_id``.

    Full names, emails and ids must each be unique: the hierarchy is keyed
    by name in the source data.
    """

    people = list(people)
    by_name: dict[str, Person] = {}
    seen_emails: set[str] = set()
    seen_ids: set[str] = set()
    for p in people:
        if p.full_name in by_name:
            raise RosterUnavailableError(f"Duplicate full name in roster: {p.full_name!r}")
        if p.email.lower() in seen_emails:
            raise RosterUnavailableError(f"Duplicate email in roster: {p.email!r}")
        if p.person_id in seen_ids:
            raise RosterUnavailableError(f"Duplicate id in roster: {p.person_id!r}")
        by_name[p.full_name] = p
        seen_emails.add(p.email.lower())
        seen_ids.add(p.person_id)

    out = []
    for p in people:
        manager = by_name.get(p.reports_to)
        out.append(replace(p, manager_id=manager.person_id if manager else None))
    return out
