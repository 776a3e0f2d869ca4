"""Expansion of weekly session definitions into dated occurrences.

Pure: no store access and no clock. ``today`` is always passed in, so the same
inputs produce the same output on every call.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Iterable, Iterator, Mapping, Optional

from ..core.constants import DAYS_PER_WEEK, DEFAULT_TEAM_NAME
from ..core.enums import Weekday
from ..teams.model import Team
from .model import Occurrence, OccurrenceKey, SessionDefinition
from .weekdays import resolve_weekday

logger = logging.getLogger(__name__)

_ONE_WEEK = timedelta(days=DAYS_PER_WEEK)


def _days_until(start: date, weekday: Weekday) -> int:
    return (int(weekday) - int(Weekday.of(start))) % DAYS_PER_WEEK


def first_matching_date(start: date, weekday: Weekday) -> date:
    """First date on or after ``start`` that falls on ``weekday``."""
    return start + timedelta(days=_days_until(start, weekday))


def iter_weekly_dates(start: date, end: date, weekday: Weekday) -> Iterator[date]:
    # Never step past ``end``; ``end`` may be date.max (open-ended sessions).
    offset = _days_until(start, weekday)
    if (end - start).days < offset:
        return
    current = start + timedelta(days=offset)
    while True:
        yield current
        if end - current < _ONE_WEEK:
            break
        current += _ONE_WEEK


def expand_definition(
    definition: SessionDefinition,
    *,
    today: date,
    team: Optional[Team] = None,
) -> list[Occurrence]:
    """Occurrences of one definition from ``today`` through its end date."""

    if definition.end_date < today:
        return []

    if definition.start_date > definition.end_date:
        logger.warning(
            "Session %s skipped: start date %s is after end date %s",
            definition.session_id,
            definition.start_date,
            definition.end_date,
        )
        return []

    weekday = resolve_weekday(definition.weekday)
    if weekday is None:
        logger.warning("Session %s skipped: unrecognized weekday %r", definition.session_id, definition.weekday)
        return []

    team_name = team.name if team else DEFAULT_TEAM_NAME
    location = team.location if team else None

    out: list[Occurrence] = []
    # Dates before today are never emitted.
    walk_from = max(definition.start_date, today)
    for occurrence_date in iter_weekly_dates(walk_from, definition.end_date, weekday):
        out.append(
            Occurrence(
                key=OccurrenceKey(session_id=definition.session_id, occurrence_date=occurrence_date),
                team_id=definition.team_id,
                team_name=team_name,
                starts_at=datetime.combine(occurrence_date, definition.start_time),
                ends_at=datetime.combine(occurrence_date, definition.end_time),
                location=location,
            )
        )
    return out


def expand_occurrences(
    definitions: Iterable[SessionDefinition],
    *,
    today: date,
    teams: Optional[Mapping[str, Team]] = None,
) -> list[Occurrence]:
    """Flatten all definitions into occurrences sorted by start time.

    Definitions with problems (unknown weekday, inverted range) are skipped with
    a warning; the rest are still expanded.
    """

    teams = teams or {}
    occurrences: list[Occurrence] = []
    for definition in definitions:
        occurrences.extend(expand_definition(definition, today=today, team=teams.get(definition.team_id)))

    occurrences.sort(key=lambda o: o.starts_at)
    return occurrences
