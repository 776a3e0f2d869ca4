from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Student:
    student_id: str
    first_name: str
    last_name: str
    grade: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "student_id": self.student_id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "grade": self.grade,
        }


@dataclass(frozen=True)
class RosterEntry:
    """A student's enrollment in a team, independent of any occurrence."""

    enrollment_id: str
    team_id: str
    student: Student
    is_active: bool = True

    @property
    def student_id(self) -> str:
        return self.student.student_id
