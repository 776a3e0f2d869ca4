from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import RosterEntry, Student
from .repository import RosterRepository


class MySQLRosterRepository(RosterRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_active(self, team_id: str) -> Sequence[RosterEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT e.enrollmentid, e.teamid, e.isactive,
                       st.studentid, st.firstname, st.lastname, st.grade
                FROM enrollment e
                JOIN student st ON st.studentid = e.studentid
                WHERE e.teamid=%s AND e.isactive = 1
                ORDER BY st.lastname ASC, st.firstname ASC
                """,
                (team_id,),
            )
            rows = fetchall(cur)
            return [
                RosterEntry(
                    enrollment_id=str(r["enrollmentid"]),
                    team_id=str(r["teamid"]),
                    is_active=bool(r["isactive"]),
                    student=Student(
                        student_id=str(r["studentid"]),
                        first_name=r["firstname"],
                        last_name=r["lastname"],
                        grade=r.get("grade"),
                    ),
                )
                for r in rows
            ]
