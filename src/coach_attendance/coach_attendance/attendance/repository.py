from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceMark, AttendanceReportRow


class AttendanceRepository(Protocol):
    def list_for_session_date(self, *, session_id: str, mark_date: date) -> Sequence[AttendanceMark]:
        """All marks of one session on exactly ``mark_date``."""

        raise NotImplementedError

    def find_mark(self, *, session_id: str, student_id: str, mark_date: date) -> Optional[AttendanceMark]:
        """Point lookup on the (session, student, date) identity."""

        raise NotImplementedError

    def create_mark(self, *, session_id: str, student_id: str, mark_date: date, assisted: bool) -> int:
        """Insert a new mark and return its id."""

        raise NotImplementedError

    def update_assisted(self, *, mark_id: int, assisted: bool) -> None:
        raise NotImplementedError

    def list_report_rows(
        self,
        *,
        start_date: date,
        end_date: date,
        team_id: Optional[str] = None,
    ) -> Sequence[AttendanceReportRow]:
        raise NotImplementedError
