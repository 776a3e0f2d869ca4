from __future__ import annotations

from typing import Protocol, Sequence

from .model import Team


class TeamRepository(Protocol):
    def list_for_coach(self, coach_id: str) -> Sequence[Team]:
        """Active teams the coach runs at least one session for, ordered by name."""

        raise NotImplementedError
