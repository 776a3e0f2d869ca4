from __future__ import annotations

import csv
import io
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.validators import require_date_range
from ..core.constants import REPORT_CSV_COLUMNS


@dataclass(frozen=True)
class DailyAttendance:
    date: date
    present: int
    absent: int

    @property
    def total(self) -> int:
        return self.present + self.absent

    def to_dict(self) -> dict:
        return {
            "date": self.date.strftime("%Y-%m-%d"),
            "present": self.present,
            "absent": self.absent,
            "total": self.total,
        }


@dataclass(frozen=True)
class AttendanceStats:
    total_sessions: int
    total_students: int
    average_attendance: float
    by_date: list[DailyAttendance] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "total_sessions": self.total_sessions,
            "total_students": self.total_students,
            "average_attendance": round(self.average_attendance, 2),
            "by_date": [d.to_dict() for d in self.by_date],
        }


class AttendanceReportService:
    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def build_stats(self, *, start: date, end: date, team_id: Optional[str] = None) -> AttendanceStats:
        """Aggregate recorded marks in ``[start, end]``.

        ``total_sessions`` counts distinct dates with at least one mark;
        ``average_attendance`` is the percentage of marks that are present.
        """

        require_date_range(start, end)
        rows = self._attendance.list_report_rows(start_date=start, end_date=end, team_id=team_id)

        per_date: dict[date, list[int]] = {}
        students: set[str] = set()
        present_total = 0

        for r in rows:
            counts = per_date.setdefault(r.mark_date, [0, 0])
            if r.assisted:
                counts[0] += 1
                present_total += 1
            else:
                counts[1] += 1
            students.add(r.student_id)

        by_date = [DailyAttendance(date=d, present=p, absent=a) for d, (p, a) in sorted(per_date.items())]
        average = (present_total / len(rows)) * 100 if rows else 0.0

        return AttendanceStats(
            total_sessions=len(per_date),
            total_students=len(students),
            average_attendance=average,
            by_date=by_date,
        )

    def export_csv(self, *, start: date, end: date, team_id: Optional[str] = None) -> str:
        require_date_range(start, end)
        rows = self._attendance.list_report_rows(start_date=start, end_date=end, team_id=team_id)

        buf = io.StringIO()
        writer = csv.writer(buf)
        writer.writerow(REPORT_CSV_COLUMNS)
        for r in rows:
            writer.writerow(
                [
                    r.mark_date.strftime("%Y-%m-%d"),
                    r.team_name,
                    r.session_id,
                    r.student_id,
                    r.last_name,
                    r.first_name,
                    "yes" if r.assisted else "no",
                ]
            )
        return buf.getvalue()
