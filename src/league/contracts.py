"""
Contract Models

Player contracts with a per-year cap breakdown. Amounts are in thousands.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class ContractStatus(Enum):
    """Lifecycle state of a contract"""
    ACTIVE = "active"
    EXPIRED = "expired"


@dataclass(frozen=True)
class ContractYear:
    """One season of a contract"""
    year: int
    base_salary: int
    prorated_bonus: int = 0
    cap_hit: int = 0
    is_void_year: bool = False


@dataclass(frozen=True)
class PlayerContract:
    """
    A contract between a player and a team.

    years_remaining counts seasons still to be played, including the
    current one.
    """
    id: str
    player_id: str
    team_id: str
    status: ContractStatus
    years_remaining: int
    year_breakdown: Tuple[ContractYear, ...] = ()
    contract_type: str = "veteran"  # "rookie", "veteran", "extension", "minimum"

    @property
    def is_active(self) -> bool:
        return self.status is ContractStatus.ACTIVE

    def year_entry(self, year: int) -> Optional[ContractYear]:
        """Return the breakdown entry for a season, or None if not covered."""
        for entry in self.year_breakdown:
            if entry.year == year:
                return entry
        return None

    def cap_hit_for(self, year: int) -> int:
        entry = self.year_entry(year)
        return entry.cap_hit if entry else 0
