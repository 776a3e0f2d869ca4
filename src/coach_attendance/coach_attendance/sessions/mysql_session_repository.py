from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_time
from .model import SessionDefinition
from .repository import SessionRepository

_SESSION_COLUMNS = "sessionid, teamid, coachid, startdate, enddate, starttime, endtime, daysofweek, `repeat`"


def _to_definition(r: dict) -> SessionDefinition:
    return SessionDefinition(
        session_id=str(r["sessionid"]),
        team_id=str(r["teamid"]),
        coach_id=str(r["coachid"]),
        start_date=r["startdate"],
        end_date=r["enddate"],
        start_time=normalize_mysql_time(r["starttime"]),
        end_time=normalize_mysql_time(r["endtime"]),
        weekday=r["daysofweek"] or "",
        repeat=r.get("repeat") or "weekly",
    )


class MySQLSessionRepository(SessionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, session_id: str) -> Optional[SessionDefinition]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_SESSION_COLUMNS} FROM session WHERE sessionid=%s", (session_id,))
            r = fetchone(cur)
            return _to_definition(r) if r else None

    def list_for_teams(self, team_ids: Sequence[str]) -> Sequence[SessionDefinition]:
        if not team_ids:
            return []

        placeholders = ", ".join(["%s"] * len(team_ids))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_SESSION_COLUMNS}
                FROM session
                WHERE teamid IN ({placeholders})
                ORDER BY startdate ASC
                """,
                tuple(team_ids),
            )
            return [_to_definition(r) for r in fetchall(cur)]
