"""
Coaching Staff Models
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Coach:
    """A member of a team's coaching staff"""
    id: str
    first_name: str
    last_name: str
    role: str  # "head_coach", "offensive_coordinator", "defensive_coordinator"
    development_rating: int = 50  # 1-99, drives player progression
    scheme: str = "balanced"

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class StaffHierarchy:
    """Coach ids by role; any slot may be vacant"""
    head_coach: Optional[str] = None
    offensive_coordinator: Optional[str] = None
    defensive_coordinator: Optional[str] = None
