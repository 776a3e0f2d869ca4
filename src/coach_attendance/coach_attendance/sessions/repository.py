from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import SessionDefinition


class SessionRepository(Protocol):
    def get_by_id(self, session_id: str) -> Optional[SessionDefinition]:
        raise NotImplementedError

    def list_for_teams(self, team_ids: Sequence[str]) -> Sequence[SessionDefinition]:
        """Session definitions of the given teams, ordered by start date."""

        raise NotImplementedError
