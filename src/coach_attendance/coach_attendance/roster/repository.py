from __future__ import annotations

from typing import Protocol, Sequence

from .model import RosterEntry


class RosterRepository(Protocol):
    def list_active(self, team_id: str) -> Sequence[RosterEntry]:
        """Active enrollments of the team, sorted by last name then first name."""

        raise NotImplementedError
