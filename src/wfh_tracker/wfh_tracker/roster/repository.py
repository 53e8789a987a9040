from __future__ import annotations

from typing import Protocol, Sequence

from .model import Person


class RosterRepository(Protocol):
    """Read-only source of the people list, in configuration order."""

    def list_all(self) -> Sequence[Person]:
        raise NotImplementedError
