from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, nested
from .model import Team
from .repository import TeamRepository

_TEAM_COLUMNS = """
    t.teamid, t.name, t.description, t.isactive,
    sc.name AS school_name, sc.location AS school_location
"""


def _to_team(r: dict) -> Team:
    school = nested(r, "school") or {}
    return Team(
        team_id=str(r["teamid"]),
        name=r["name"],
        description=r.get("description"),
        is_active=bool(r.get("isactive", 1)),
        school_name=school.get("name"),
        location=school.get("location"),
    )


class MySQLTeamRepository(TeamRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_coach(self, coach_id: str) -> Sequence[Team]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_TEAM_COLUMNS}
                FROM team t
                LEFT JOIN school sc ON sc.schoolid = t.schoolid
                WHERE t.isactive = 1
                  AND t.teamid IN (SELECT s.teamid FROM session s WHERE s.coachid=%s)
                ORDER BY t.name ASC
                """,
                (coach_id,),
            )
            return [_to_team(r) for r in fetchall(cur)]
