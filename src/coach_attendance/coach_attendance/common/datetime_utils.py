from __future__ import annotations

from datetime import date, datetime, time


def parse_iso_date(value: str) -> date:
    """Parse a zero-padded YYYY-MM-DD string into date."""
    parsed = datetime.strptime(value, "%Y-%m-%d").date()
    if parsed.isoformat() != value:
        raise ValueError(f"Date {value!r} is not in YYYY-MM-DD form")
    return parsed


def parse_time_of_day(value: str) -> time:
    """Parse a colon-delimited ``HH:MM[:SS]`` string; missing seconds default to 0."""
    parts = value.strip().split(":")
    if len(parts) < 2:
        raise ValueError(f"Invalid time string: {value!r}")
    hours = int(parts[0])
    minutes = int(parts[1])
    seconds = int(parts[2]) if len(parts) >= 3 and parts[2] else 0
    return time(hour=hours, minute=minutes, second=seconds)


def today_local() -> date:
    """Current local date.

    Note: Only the outermost layer (controllers) calls this; services take
    ``today`` as an argument.
    """
    return datetime.now().date()
