from __future__ import annotations

from datetime import date, time

import pytest

from src.coach_attendance.coach_attendance.core.exceptions import ValidationError
from src.coach_attendance.coach_attendance.sessions.model import SessionDefinition
from src.coach_attendance.coach_attendance.sessions.service import OccurrenceService
from src.coach_attendance.coach_attendance.teams.model import Team


class FakeTeams:
    def __init__(self, teams_by_coach: dict[str, list[Team]]):
        self._by_coach = teams_by_coach

    def list_for_coach(self, coach_id):
        return self._by_coach.get(coach_id, [])


class FakeSessions:
    def __init__(self, sessions: list[SessionDefinition]):
        self._sessions = sessions
        self.requested_team_ids = None

    def list_for_teams(self, team_ids):
        self.requested_team_ids = list(team_ids)
        return [s for s in self._sessions if s.team_id in team_ids]

    def get_by_id(self, session_id):
        return next((s for s in self._sessions if s.session_id == session_id), None)


def _session(session_id: str, team_id: str, weekday: str) -> SessionDefinition:
    return SessionDefinition(
        session_id=session_id,
        team_id=team_id,
        coach_id="coach-1",
        start_date=date(2025, 1, 1),
        end_date=date(2025, 1, 31),
        start_time=time(17, 0),
        end_time=time(18, 0),
        weekday=weekday,
    )


def test_upcoming_only_covers_coach_teams():
    teams = FakeTeams({"coach-1": [Team(team_id="team-a", name="Juvenil A", location="Campo 1")]})
    sessions = FakeSessions([_session("ses-a", "team-a", "lunes"), _session("ses-b", "team-b", "lunes")])

    svc = OccurrenceService(sessions, teams)
    occurrences = svc.upcoming_for_coach("coach-1", today=date(2025, 1, 20))

    assert sessions.requested_team_ids == ["team-a"]
    assert [o.id for o in occurrences] == ["ses-a_2025-01-20", "ses-a_2025-01-27"]
    assert occurrences[0].team_name == "Juvenil A"
    assert occurrences[0].location == "Campo 1"


def test_coach_without_teams_does_not_query_sessions():
    sessions = FakeSessions([_session("ses-a", "team-a", "lunes")])

    svc = OccurrenceService(sessions, FakeTeams({}))

    assert svc.upcoming_for_coach("coach-9", today=date(2025, 1, 1)) == []
    assert sessions.requested_team_ids is None


def test_blank_coach_is_rejected():
    svc = OccurrenceService(FakeSessions([]), FakeTeams({}))

    with pytest.raises(ValidationError):
        svc.upcoming_for_coach("  ", today=date(2025, 1, 1))
