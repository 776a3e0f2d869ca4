"""Bilingual (Spanish/English) weekday labels used by session definitions."""

from __future__ import annotations

import unicodedata
from typing import Optional

from ..core.enums import Weekday

WEEKDAY_LABELS: dict[str, Weekday] = {
    "domingo": Weekday.SUNDAY,
    "lunes": Weekday.MONDAY,
    "martes": Weekday.TUESDAY,
    "miercoles": Weekday.WEDNESDAY,
    "jueves": Weekday.THURSDAY,
    "viernes": Weekday.FRIDAY,
    "sabado": Weekday.SATURDAY,
    "sunday": Weekday.SUNDAY,
    "monday": Weekday.MONDAY,
    "tuesday": Weekday.TUESDAY,
    "wednesday": Weekday.WEDNESDAY,
    "thursday": Weekday.THURSDAY,
    "friday": Weekday.FRIDAY,
    "saturday": Weekday.SATURDAY,
}


def _fold(label: str) -> str:
    # "Miércoles" -> "miercoles"
    decomposed = unicodedata.normalize("NFKD", label.strip().lower())
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def resolve_weekday(label: Optional[str]) -> Optional[Weekday]:
    """Return the weekday for ``label`` (case and accent insensitive), or None."""
    if not label:
        return None
    return WEEKDAY_LABELS.get(_fold(label))
