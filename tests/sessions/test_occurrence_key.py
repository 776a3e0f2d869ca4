from __future__ import annotations

from datetime import date, datetime, time

import pytest

from src.coach_attendance.coach_attendance.core.exceptions import MalformedOccurrenceIdError, ValidationError
from src.coach_attendance.coach_attendance.sessions.model import Occurrence, OccurrenceKey


@pytest.mark.parametrize(
    "session_id",
    ["ses-1", "3f2c9a4e-77b1-4a0e-9d0e-1c2b3a4d5e6f", "team_a_monday", "_leading"],
)
def test_round_trip_recovers_session_and_date(session_id):
    key = OccurrenceKey(session_id=session_id, occurrence_date=date(2025, 1, 6))

    encoded = key.encode()
    parsed = OccurrenceKey.parse(encoded)

    assert encoded == f"{session_id}_2025-01-06"
    assert parsed == key


def test_split_happens_at_last_underscore():
    key = OccurrenceKey.parse("team_a_monday_2025-03-10")

    assert key.session_id == "team_a_monday"
    assert key.occurrence_date == date(2025, 3, 10)


@pytest.mark.parametrize(
    "value",
    ["ses-1", "", "_2025-01-06", "ses-1_", "ses-1_2025-13-01", "ses-1_monday", "ses-1_2025-1-6"],
)
def test_malformed_ids_fail_fast(value):
    with pytest.raises(MalformedOccurrenceIdError):
        OccurrenceKey.parse(value)


def test_malformed_id_is_a_validation_error():
    with pytest.raises(ValidationError):
        OccurrenceKey.parse("no-separator")


def test_occurrence_to_dict_uses_encoded_id():
    occ = Occurrence(
        key=OccurrenceKey("ses-1", date(2025, 1, 6)),
        team_id="team-a",
        team_name="Juvenil A",
        starts_at=datetime.combine(date(2025, 1, 6), time(17, 0)),
        ends_at=datetime.combine(date(2025, 1, 6), time(18, 0)),
    )

    data = occ.to_dict()

    assert data["id"] == "ses-1_2025-01-06"
    assert data["occurrence_date"] == "2025-01-06"
    assert data["starts_at"] == "2025-01-06T17:00:00"
    assert data["status"] == "scheduled"
