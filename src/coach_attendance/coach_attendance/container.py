from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceLedger
from .database.connection import DBConfig, DatabaseConnection
from .reports.service import AttendanceReportService
from .roster.mysql_roster_repository import MySQLRosterRepository
from .roster.repository import RosterRepository
from .sessions.mysql_session_repository import MySQLSessionRepository
from .sessions.repository import SessionRepository
from .sessions.service import OccurrenceService
from .teams.mysql_team_repository import MySQLTeamRepository
from .teams.repository import TeamRepository
from .teams.service import TeamService


@dataclass(frozen=True)
class Container:
    teams_repo: TeamRepository
    sessions_repo: SessionRepository
    roster_repo: RosterRepository
    attendance_repo: AttendanceRepository

    team_service: TeamService
    occurrence_service: OccurrenceService
    attendance_ledger: AttendanceLedger
    report_service: AttendanceReportService


def wire(
    *,
    teams_repo: TeamRepository,
    sessions_repo: SessionRepository,
    roster_repo: RosterRepository,
    attendance_repo: AttendanceRepository,
) -> Container:
    return Container(
        teams_repo=teams_repo,
        sessions_repo=sessions_repo,
        roster_repo=roster_repo,
        attendance_repo=attendance_repo,
        team_service=TeamService(teams_repo),
        occurrence_service=OccurrenceService(sessions_repo, teams_repo),
        attendance_ledger=AttendanceLedger(attendance_repo, roster_repo, sessions_repo),
        report_service=AttendanceReportService(attendance_repo),
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return wire(
        teams_repo=MySQLTeamRepository(conn),
        sessions_repo=MySQLSessionRepository(conn),
        roster_repo=MySQLRosterRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
    )
