from __future__ import annotations

import itertools
from datetime import date

from src.coach_attendance.coach_attendance.attendance.model import (
    AttendanceMark,
    StudentAttendance,
    count_attendance,
)
from src.coach_attendance.coach_attendance.roster.model import Student


def _row(student_id: str, assisted=None) -> StudentAttendance:
    mark = None
    if assisted is not None:
        mark = AttendanceMark(
            mark_id=1,
            session_id="ses-1",
            student_id=student_id,
            mark_date=date(2025, 1, 6),
            assisted=assisted,
        )
    return StudentAttendance(student=Student(student_id=student_id, first_name="F", last_name="L"), assistance=mark)


def test_counts_separate_absent_from_pending():
    rows = [_row("a", True), _row("b", False), _row("c"), _row("d")]

    counts = count_attendance(rows)

    assert counts.present == 1
    assert counts.absent == 1
    assert counts.marked == 2
    assert counts.pending == 2
    assert counts.total == 4


def test_counts_of_empty_roster():
    counts = count_attendance([])

    assert counts.to_dict() == {"present": 0, "absent": 0, "marked": 0, "pending": 0, "total": 0}


def test_counts_always_add_up_to_total():
    for states in itertools.product([True, False, None], repeat=4):
        rows = [_row(str(i), s) for i, s in enumerate(states)]
        counts = count_attendance(rows)
        assert counts.present + counts.absent + counts.pending == counts.total == 4
