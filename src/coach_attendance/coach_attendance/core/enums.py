from __future__ import annotations

from enum import Enum, IntEnum


class Role(str, Enum):
    """User role stored in the Flask session."""

    ADMIN = "admin"
    COACH = "coach"


class Weekday(IntEnum):
    """Day of week numbered from Sunday, as stored in session definitions."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @classmethod
    def of(cls, value) -> "Weekday":
        # date.weekday() is Monday=0
        return cls((value.weekday() + 1) % 7)


class OccurrenceStatus(str, Enum):
    SCHEDULED = "scheduled"


class MarkState(str, Enum):
    """Presence state of a student for one occurrence."""

    PRESENT = "present"
    ABSENT = "absent"
    PENDING = "pending"
