from __future__ import annotations

import logging
from typing import Sequence, Union

from ..common.validators import require_non_empty
from ..core.exceptions import NotFoundError
from ..roster.model import RosterEntry
from ..roster.repository import RosterRepository
from ..sessions.model import OccurrenceKey
from ..sessions.repository import SessionRepository
from .model import AttendanceMark, StudentAttendance
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

OccurrenceRef = Union[str, OccurrenceKey]


def as_occurrence_key(occurrence: OccurrenceRef) -> OccurrenceKey:
    """Single entry point for turning an occurrence id into its key (read and write paths)."""
    if isinstance(occurrence, OccurrenceKey):
        return occurrence
    return OccurrenceKey.parse(occurrence)


class AttendanceLedger:
    """Present/absent marks per student per occurrence date.

    Store errors (:class:`StoreError`) propagate unchanged; there is no retry
    here. ``set_mark`` is check-then-write and not atomic: two concurrent calls
    for the same student and occurrence race and the last write wins.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        roster: RosterRepository,
        sessions: SessionRepository,
    ):
        self._attendance = attendance
        self._roster = roster
        self._sessions = sessions

    def get_marks_for_occurrence(self, occurrence: OccurrenceRef) -> Sequence[AttendanceMark]:
        key = as_occurrence_key(occurrence)
        return self._attendance.list_for_session_date(session_id=key.session_id, mark_date=key.occurrence_date)

    @staticmethod
    def merge_roster(
        roster: Sequence[RosterEntry],
        marks: Sequence[AttendanceMark],
    ) -> list[StudentAttendance]:
        by_student = {m.student_id: m for m in marks}
        return [StudentAttendance(student=e.student, assistance=by_student.get(e.student_id)) for e in roster]

    def roster_for_occurrence(self, occurrence: OccurrenceRef) -> list[StudentAttendance]:
        key = as_occurrence_key(occurrence)
        definition = self._sessions.get_by_id(key.session_id)
        if definition is None:
            raise NotFoundError(f"Session {key.session_id} not found")

        roster = self._roster.list_active(definition.team_id)
        marks = self.get_marks_for_occurrence(key)
        return self.merge_roster(roster, marks)

    def set_mark(self, occurrence: OccurrenceRef, student_id: str, assisted: bool) -> AttendanceMark:
        key = as_occurrence_key(occurrence)
        student_id = require_non_empty(student_id, "Student")
        assisted = bool(assisted)

        existing = self._attendance.find_mark(
            session_id=key.session_id,
            student_id=student_id,
            mark_date=key.occurrence_date,
        )
        if existing:
            self._attendance.update_assisted(mark_id=existing.mark_id, assisted=assisted)
            mark_id = existing.mark_id
        else:
            mark_id = self._attendance.create_mark(
                session_id=key.session_id,
                student_id=student_id,
                mark_date=key.occurrence_date,
                assisted=assisted,
            )

        logger.info("Marked student %s %s for %s", student_id, "present" if assisted else "absent", key)
        return AttendanceMark(
            mark_id=mark_id,
            session_id=key.session_id,
            student_id=student_id,
            mark_date=key.occurrence_date,
            assisted=assisted,
        )
