from __future__ import annotations

from typing import Optional, Sequence

from .model import Person, link_managers
from .repository import RosterRepository


def _name_key(p: Person) -> str:
    return p.full_name.casefold()


class RosterService:
    """Use case: expose the people list and derive the management tree.

    The roster is static for the life of the process, so the linked snapshot
    is computed once on first use.
    """

    def __init__(self, roster: RosterRepository):
        self._roster = roster
        self._people: Optional[list[Person]] = None

    def _snapshot(self) -> list[Person]:
        if self._people is None:
            self._people = link_managers(self._roster.list_all())
        return self._people

    def list_people(self) -> list[Person]:
        return sorted(self._snapshot(), key=_name_key)

    def get_by_email(self, email: str) -> Optional[Person]:
        email = (email or "").lower()
        return next((p for p in self._snapshot() if p.email.lower() == email), None)

    def get_by_name(self, full_name: str) -> Optional[Person]:
        return next((p for p in self._snapshot() if p.full_name == full_name), None)

    def find_roots(self) -> list[str]:
        """Every reports-to value that is not a person's name, first-encountered order."""

        roots: list[str] = []
        for p in self._snapshot():
            if p.manager_id is None and p.reports_to not in roots:
                roots.append(p.reports_to)
        return roots

    def find_root(self) -> Optional[str]:
        roots = self.find_roots()
        return roots[0] if roots else None

    def direct_reports(self, full_name: str) -> list[Person]:
        """People reporting to ``full_name``, in roster order.

        ``full_name`` may be a person or an external root name.
        """

        manager = self.get_by_name(full_name)
        if manager is not None:
            return [p for p in self._snapshot() if p.manager_id == manager.person_id]
        return [p for p in self._snapshot() if p.manager_id is None and p.reports_to == full_name]

    def is_manager(self, full_name: str) -> bool:
        return bool(self.direct_reports(full_name)) and self.get_by_name(full_name) is not None

    def list_areas(self) -> list[str]:
        return sorted({p.area for p in self._snapshot() if p.area})

    def build_tree(self, root: Optional[str] = None) -> list[dict]:
        """Nested ``{"person", "reports"}`` nodes under ``root`` (default: first root).

        Reports are sorted by display name. No root means no hierarchy: [].
        """

        root = root if root is not None else self.find_root()
        if root is None:
            return []

        seen: set[str] = set()

        def nodes(people: Sequence[Person]) -> list[dict]:
            out = []
            for p in sorted(people, key=_name_key):
                if p.person_id in seen:
                    continue
                seen.add(p.person_id)
                out.append({"person": p, "reports": nodes(self.direct_reports(p.full_name))})
            return out

        return nodes(self.direct_reports(root))
