from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional

from ..common.datetime_utils import parse_iso_date
from ..core.enums import OccurrenceStatus
from ..core.exceptions import MalformedOccurrenceIdError


@dataclass(frozen=True)
class SessionDefinition:
    """Domain entity: a weekly recurring commitment of a team.

    ``start_date``/``end_date`` are inclusive calendar bounds. ``weekday`` is the
    raw label as stored (e.g. ``"lunes"``, ``"Monday"``).
    """

    session_id: str
    team_id: str
    coach_id: str
    start_date: date
    end_date: date
    start_time: time
    end_time: time
    weekday: str
    repeat: str = "weekly"


@dataclass(frozen=True)
class OccurrenceKey:
    """Identity of one occurrence: the session plus the calendar date.

    Encoded as ``{session_id}_{YYYY-MM-DD}`` only at the edges (URLs, JSON).
    """

    session_id: str
    occurrence_date: date

    SEPARATOR = "_"

    def encode(self) -> str:
        return f"{self.session_id}{self.SEPARATOR}{self.occurrence_date.isoformat()}"

    @classmethod
    def parse(cls, value: str) -> "OccurrenceKey":
        # The date never contains an underscore, so the last one is the separator.
        session_id, sep, date_part = (value or "").rpartition(cls.SEPARATOR)
        if not sep:
            raise MalformedOccurrenceIdError(f"Occurrence id {value!r} has no '{cls.SEPARATOR}' separator")
        if not session_id:
            raise MalformedOccurrenceIdError(f"Occurrence id {value!r} has an empty session id")
        try:
            occurrence_date = parse_iso_date(date_part)
        except ValueError as exc:
            raise MalformedOccurrenceIdError(f"Occurrence id {value!r} has an invalid date {date_part!r}") from exc
        return cls(session_id=session_id, occurrence_date=occurrence_date)

    def __str__(self) -> str:
        return self.encode()


@dataclass(frozen=True)
class Occurrence:
    """One concrete dated instance of a SessionDefinition (computed, never stored)."""

    key: OccurrenceKey
    team_id: str
    team_name: str
    starts_at: datetime
    ends_at: datetime
    location: Optional[str] = None
    status: OccurrenceStatus = OccurrenceStatus.SCHEDULED

    @property
    def id(self) -> str:
        return self.key.encode()

    @property
    def session_id(self) -> str:
        return self.key.session_id

    @property
    def occurrence_date(self) -> date:
        return self.key.occurrence_date

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "session_id": self.session_id,
            "team_id": self.team_id,
            "team_name": self.team_name,
            "occurrence_date": self.occurrence_date.isoformat(),
            "starts_at": self.starts_at.isoformat(),
            "ends_at": self.ends_at.isoformat(),
            "location": self.location,
            "status": self.status.value,
        }
