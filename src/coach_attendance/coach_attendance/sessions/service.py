from __future__ import annotations

from datetime import date
from typing import Sequence

from ..common.validators import require_non_empty
from ..teams.repository import TeamRepository
from .expander import expand_occurrences
from .model import Occurrence
from .repository import SessionRepository


class OccurrenceService:
    def __init__(self, sessions: SessionRepository, teams: TeamRepository):
        self._sessions = sessions
        self._teams = teams

    def upcoming_for_coach(self, coach_id: str, *, today: date) -> Sequence[Occurrence]:
        """Occurrences from ``today`` on for every team the coach works with."""

        coach_id = require_non_empty(coach_id, "Coach")
        teams = self._teams.list_for_coach(coach_id)
        if not teams:
            return []

        by_id = {t.team_id: t for t in teams}
        definitions = self._sessions.list_for_teams(list(by_id))
        return expand_occurrences(definitions, today=today, teams=by_id)
