from __future__ import annotations

from typing import Sequence

from ..common.validators import require_non_empty
from .model import Team
from .repository import TeamRepository


class TeamService:
    def __init__(self, teams: TeamRepository):
        self._teams = teams

    def my_teams(self, coach_id: str) -> Sequence[Team]:
        coach_id = require_non_empty(coach_id, "Coach")
        return self._teams.list_for_coach(coach_id)
