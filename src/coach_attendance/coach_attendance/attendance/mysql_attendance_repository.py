from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceMark, AttendanceReportRow
from .repository import AttendanceRepository


def _to_mark(r: dict) -> AttendanceMark:
    return AttendanceMark(
        mark_id=int(r["id"]),
        session_id=str(r["sessionid"]),
        student_id=str(r["studentid"]),
        mark_date=r["date"],
        assisted=bool(r["assisted"]),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_session_date(self, *, session_id: str, mark_date: date) -> Sequence[AttendanceMark]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, sessionid, studentid, `date`, assisted
                FROM assistance
                WHERE sessionid=%s AND `date`=%s
                """,
                (session_id, mark_date),
            )
            return [_to_mark(r) for r in fetchall(cur)]

    def find_mark(self, *, session_id: str, student_id: str, mark_date: date) -> Optional[AttendanceMark]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, sessionid, studentid, `date`, assisted
                FROM assistance
                WHERE sessionid=%s AND studentid=%s AND `date`=%s
                LIMIT 1
                """,
                (session_id, student_id, mark_date),
            )
            r = fetchone(cur)
            return _to_mark(r) if r else None

    def create_mark(self, *, session_id: str, student_id: str, mark_date: date, assisted: bool) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO assistance(sessionid, studentid, `date`, assisted)
                VALUES(%s,%s,%s,%s)
                """,
                (session_id, student_id, mark_date, int(assisted)),
            )
            return int(cur.lastrowid)

    def update_assisted(self, *, mark_id: int, assisted: bool) -> None:
        # rowcount is 0 when the value is unchanged, so it is not checked.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE assistance SET assisted=%s WHERE id=%s", (int(assisted), int(mark_id)))

    def list_report_rows(
        self,
        *,
        start_date: date,
        end_date: date,
        team_id: Optional[str] = None,
    ) -> Sequence[AttendanceReportRow]:
        clauses = ["a.`date` BETWEEN %s AND %s"]
        params: list[object] = [start_date, end_date]
        if team_id is not None:
            clauses.append("s.teamid=%s")
            params.append(team_id)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT
                    a.sessionid, a.studentid, a.`date`, a.assisted,
                    s.teamid, t.name AS team_name,
                    st.firstname, st.lastname
                FROM assistance a
                JOIN session s ON s.sessionid = a.sessionid
                JOIN team t ON t.teamid = s.teamid
                JOIN student st ON st.studentid = a.studentid
                WHERE {where}
                ORDER BY a.`date` DESC, st.lastname ASC, st.firstname ASC
                """,
                tuple(params),
            )
            return [
                AttendanceReportRow(
                    session_id=str(r["sessionid"]),
                    team_id=str(r["teamid"]),
                    team_name=r["team_name"],
                    student_id=str(r["studentid"]),
                    first_name=r["firstname"],
                    last_name=r["lastname"],
                    mark_date=r["date"],
                    assisted=bool(r["assisted"]),
                )
                for r in fetchall(cur)
            ]
