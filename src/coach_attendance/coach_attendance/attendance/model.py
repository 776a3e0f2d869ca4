from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from ..core.enums import MarkState
from ..roster.model import Student


@dataclass(frozen=True)
class AttendanceMark:
    """Domain entity: one student's recorded presence on one session date.

    At most one mark exists per (session_id, student_id, mark_date).
    """

    mark_id: int
    session_id: str
    student_id: str
    mark_date: date
    assisted: bool

    def to_dict(self) -> dict:
        return {
            "id": self.mark_id,
            "session_id": self.session_id,
            "student_id": self.student_id,
            "date": self.mark_date.isoformat(),
            "assisted": self.assisted,
        }


@dataclass(frozen=True)
class StudentAttendance:
    """A roster student joined with their mark for one occurrence, if any."""

    student: Student
    assistance: Optional[AttendanceMark] = None

    @property
    def state(self) -> MarkState:
        if self.assistance is None:
            return MarkState.PENDING
        return MarkState.PRESENT if self.assistance.assisted else MarkState.ABSENT

    def to_dict(self) -> dict:
        out = self.student.to_dict()
        out["assistance"] = self.assistance.to_dict() if self.assistance else None
        out["state"] = self.state.value
        return out


@dataclass(frozen=True)
class AttendanceCounts:
    present: int
    absent: int
    total: int

    @property
    def marked(self) -> int:
        return self.present + self.absent

    @property
    def pending(self) -> int:
        return self.total - self.marked

    def to_dict(self) -> dict:
        return {
            "present": self.present,
            "absent": self.absent,
            "marked": self.marked,
            "pending": self.pending,
            "total": self.total,
        }


def count_attendance(rows: Iterable[StudentAttendance]) -> AttendanceCounts:
    """Derive the counts from a merged roster; never cached."""
    present = absent = total = 0
    for row in rows:
        total += 1
        state = row.state
        if state is MarkState.PRESENT:
            present += 1
        elif state is MarkState.ABSENT:
            absent += 1
    return AttendanceCounts(present=present, absent=absent, total=total)


@dataclass(frozen=True)
class AttendanceReportRow:
    """Read-model for reports/exports (one mark with its student and team)."""

    session_id: str
    team_id: str
    team_name: str
    student_id: str
    first_name: str
    last_name: str
    mark_date: date
    assisted: bool
