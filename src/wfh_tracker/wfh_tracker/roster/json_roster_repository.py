from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, Sequence

from ..core.exceptions import RosterUnavailableError
from .model import Person
from .repository import RosterRepository

logger = logging.getLogger(__name__)

_REQUIRED = ("fullName", "email", "reportsTo")


def _to_person(raw: dict, index: int) -> Person:
    if not isinstance(raw, dict):
        raise RosterUnavailableError(f"Roster entry #{index} is not an object")
    missing = [k for k in _REQUIRED if not str(raw.get(k) or "").strip()]
    if missing:
        raise RosterUnavailableError(f"Roster entry #{index} is missing {', '.join(missing)}")
    email = str(raw["email"]).strip()
    return Person(
        person_id=str(raw.get("igg") or email),
        full_name=str(raw["fullName"]).strip(),
        job_title=str(raw.get("jobTitle") or ""),
        area=str(raw.get("area") or ""),
        email=email,
        reports_to=str(raw["reportsTo"]).strip(),
    )


class JsonRosterRepository(RosterRepository):
    """Roster loaded from a ``{"users": [...]}`` JSON file.

    The file is read on first use and kept for the life of the process.
    Passwords present in the file are ignored.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)
        self._people: Optional[list[Person]] = None

    def list_all(self) -> Sequence[Person]:
        if self._people is None:
            self._people = self._load()
        return list(self._people)

    def _load(self) -> list[Person]:
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except OSError as e:
            raise RosterUnavailableError(f"Cannot read roster {self._path}: {e}") from e
        except ValueError as e:
            raise RosterUnavailableError(f"Roster {self._path} is not valid JSON: {e}") from e

        users = data.get("users") if isinstance(data, dict) else data
        if not isinstance(users, list):
            raise RosterUnavailableError(f"Roster {self._path} has no 'users' list")

        people = [_to_person(raw, i) for i, raw in enumerate(users)]
        logger.info("Loaded %d people from %s", len(people), self._path)
        return people
