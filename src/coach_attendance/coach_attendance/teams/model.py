from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Team:
    """Domain entity: a sports team, with its school's location denormalized."""

    team_id: str
    name: str
    description: Optional[str] = None
    is_active: bool = True
    school_name: Optional[str] = None
    location: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "team_id": self.team_id,
            "name": self.name,
            "description": self.description or "",
            "is_active": self.is_active,
            "school_name": self.school_name,
            "location": self.location,
        }
