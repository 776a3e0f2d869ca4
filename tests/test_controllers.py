from __future__ import annotations

from datetime import date, time

import pytest

from src.coach_attendance.coach_attendance.attendance.model import AttendanceMark, AttendanceReportRow
from src.coach_attendance.coach_attendance.container import wire
from src.coach_attendance.coach_attendance.core.exceptions import StoreError
from src.coach_attendance.coach_attendance.main import create_app
from src.coach_attendance.coach_attendance.roster.model import RosterEntry, Student
from src.coach_attendance.coach_attendance.sessions.model import SessionDefinition
from src.coach_attendance.coach_attendance.teams.model import Team

SESSION = SessionDefinition(
    session_id="ses-1",
    team_id="team-a",
    coach_id="coach-1",
    start_date=date(2025, 1, 1),
    end_date=date(2025, 1, 31),
    start_time=time(17, 0),
    end_time=time(18, 30),
    weekday="lunes",
)


class FakeTeams:
    def list_for_coach(self, coach_id):
        if coach_id == "coach-1":
            return [Team(team_id="team-a", name="Juvenil A", location="Campo 1")]
        return []


class FakeSessions:
    def get_by_id(self, session_id):
        return SESSION if session_id == "ses-1" else None

    def list_for_teams(self, team_ids):
        return [SESSION] if "team-a" in team_ids else []


class FakeRoster:
    def list_active(self, team_id):
        return [
            RosterEntry(enrollment_id="e1", team_id=team_id, student=Student("stu-1", "Ana", "Garcia")),
            RosterEntry(enrollment_id="e2", team_id=team_id, student=Student("stu-2", "Luis", "Perez")),
        ]


class FakeAttendance:
    def __init__(self):
        self.rows: dict[int, AttendanceMark] = {}
        self.fail = False

    def list_for_session_date(self, *, session_id, mark_date):
        if self.fail:
            raise StoreError("down")
        return [m for m in self.rows.values() if m.session_id == session_id and m.mark_date == mark_date]

    def find_mark(self, *, session_id, student_id, mark_date):
        if self.fail:
            raise StoreError("down")
        for m in self.rows.values():
            if (m.session_id, m.student_id, m.mark_date) == (session_id, student_id, mark_date):
                return m
        return None

    def create_mark(self, *, session_id, student_id, mark_date, assisted):
        mark_id = len(self.rows) + 1
        self.rows[mark_id] = AttendanceMark(mark_id, session_id, student_id, mark_date, assisted)
        return mark_id

    def update_assisted(self, *, mark_id, assisted):
        m = self.rows[mark_id]
        self.rows[mark_id] = AttendanceMark(m.mark_id, m.session_id, m.student_id, m.mark_date, assisted)

    def list_report_rows(self, *, start_date, end_date, team_id=None):
        return [
            AttendanceReportRow("ses-1", "team-a", "Juvenil A", m.student_id, "Ana", "Garcia", m.mark_date, m.assisted)
            for m in self.rows.values()
            if start_date <= m.mark_date <= end_date
        ]


@pytest.fixture()
def attendance_repo():
    return FakeAttendance()


@pytest.fixture()
def client(monkeypatch, attendance_repo):
    monkeypatch.setenv("APP_ENV", "testing")
    container = wire(
        teams_repo=FakeTeams(),
        sessions_repo=FakeSessions(),
        roster_repo=FakeRoster(),
        attendance_repo=attendance_repo,
    )
    app = create_app(container=container)
    return app.test_client()


def login(client, *, staff_id="coach-1", role="coach"):
    with client.session_transaction() as sess:
        sess["staff_id"] = staff_id
        sess["role"] = role


def test_requires_identity(client):
    assert client.get("/api/coach/occurrences").status_code == 401


def test_teams_for_coach(client):
    login(client)

    body = client.get("/api/coach/teams").get_json()

    assert [t["name"] for t in body["teams"]] == ["Juvenil A"]


def test_occurrences_with_explicit_today(client):
    login(client)

    resp = client.get("/api/coach/occurrences?today=2025-01-01")

    body = resp.get_json()
    assert resp.status_code == 200
    assert [o["id"] for o in body["occurrences"]] == [
        "ses-1_2025-01-06",
        "ses-1_2025-01-13",
        "ses-1_2025-01-20",
        "ses-1_2025-01-27",
    ]
    assert body["occurrences"][0]["location"] == "Campo 1"


def test_occurrences_rejects_bad_today(client):
    login(client)

    assert client.get("/api/coach/occurrences?today=01/01/2025").status_code == 400
    assert client.get("/api/coach/occurrences?today=2025-1-1").status_code == 400


def test_mark_then_read_attendance(client, attendance_repo):
    login(client)

    resp = client.put("/api/occurrences/ses-1_2025-01-06/attendance/stu-1", json={"assisted": True})
    assert resp.status_code == 200
    client.put("/api/occurrences/ses-1_2025-01-06/attendance/stu-1", json={"assisted": False})

    body = client.get("/api/occurrences/ses-1_2025-01-06/attendance").get_json()

    assert len(attendance_repo.rows) == 1
    assert body["students"][0]["assistance"]["assisted"] is False
    assert body["students"][0]["state"] == "absent"
    assert body["students"][1]["assistance"] is None
    assert body["counts"] == {"present": 0, "absent": 1, "marked": 1, "pending": 1, "total": 2}


def test_mark_requires_boolean(client):
    login(client)

    resp = client.put("/api/occurrences/ses-1_2025-01-06/attendance/stu-1", json={"assisted": "yes"})

    assert resp.status_code == 400


def test_mark_body_must_be_an_object(client):
    login(client)

    for body in ([True], "x", 1):
        resp = client.put("/api/occurrences/ses-1_2025-01-06/attendance/stu-1", json=body)
        assert resp.status_code == 400


def test_malformed_occurrence_id_is_bad_request(client):
    login(client)

    assert client.get("/api/occurrences/ses-1/attendance").status_code == 400
    assert client.put("/api/occurrences/ses-1/attendance/stu-1", json={"assisted": True}).status_code == 400


def test_unknown_session_is_not_found(client):
    login(client)

    assert client.get("/api/occurrences/ses-9_2025-01-06/attendance").status_code == 404


def test_store_failure_is_service_unavailable(client, attendance_repo):
    login(client)
    attendance_repo.fail = True

    resp = client.put("/api/occurrences/ses-1_2025-01-06/attendance/stu-1", json={"assisted": True})

    assert resp.status_code == 503


def test_reports_require_admin(client):
    login(client)

    assert client.get("/api/admin/attendance/stats").status_code == 403


def test_admin_stats_and_export(client):
    login(client)
    client.put("/api/occurrences/ses-1_2025-01-06/attendance/stu-1", json={"assisted": True})
    login(client, staff_id="admin-1", role="admin")

    stats = client.get("/api/admin/attendance/stats?start=2025-01-01&end=2025-01-31").get_json()
    export = client.get("/api/admin/attendance/export.csv?start=2025-01-01&end=2025-01-31")

    assert stats["total_sessions"] == 1
    assert stats["average_attendance"] == 100.0
    assert export.mimetype == "text/csv"
    assert export.get_data(as_text=True).splitlines()[1].startswith("2025-01-06,Juvenil A,ses-1,stu-1")


def test_admin_stats_rejects_inverted_range(client):
    login(client, staff_id="admin-1", role="admin")

    assert client.get("/api/admin/attendance/stats?start=2025-02-01&end=2025-01-01").status_code == 400
