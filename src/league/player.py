"""
Player Models

Player entity with position-keyed skills. Every skill carries a true value
and the perceived range scouts currently believe it lies in.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple


class Position(Enum):
    """On-field positions"""
    QB = "QB"
    RB = "RB"
    WR = "WR"
    TE = "TE"
    LT = "LT"
    LG = "LG"
    C = "C"
    RG = "RG"
    RT = "RT"
    DE = "DE"
    DT = "DT"
    OLB = "OLB"
    ILB = "ILB"
    CB = "CB"
    FS = "FS"
    SS = "SS"
    K = "K"
    P = "P"


# Positions sharing a skill vocabulary
SKILL_GROUPS: Dict[str, Tuple[Position, ...]] = {
    "QB": (Position.QB,),
    "RB": (Position.RB,),
    "WR": (Position.WR,),
    "TE": (Position.TE,),
    "OL": (Position.LT, Position.LG, Position.C, Position.RG, Position.RT),
    "DL": (Position.DE, Position.DT),
    "LB": (Position.OLB, Position.ILB),
    "DB": (Position.CB, Position.FS, Position.SS),
    "K": (Position.K,),
    "P": (Position.P,),
}

SKILL_NAMES_BY_GROUP: Dict[str, Tuple[str, ...]] = {
    "QB": ("arm_strength", "accuracy", "decision_making", "pocket_presence", "mobility", "presnap"),
    "RB": ("vision", "cut_ability", "break_tackle", "speed", "catching", "pass_protection"),
    "WR": ("route_running", "catching", "separation", "speed", "contested", "tracking"),
    "TE": ("blocking", "route_running", "catching", "contested", "sealing", "speed"),
    "OL": ("pass_block", "run_block", "awareness", "footwork", "power", "sustain"),
    "DL": ("pass_rush", "run_defense", "power", "finesse", "block_shedding", "motor"),
    "LB": ("tackling", "coverage", "pursuit", "awareness", "shed_blocks", "zone_coverage"),
    "DB": ("man_coverage", "zone_coverage", "speed", "ball_skills", "awareness", "press"),
    "K": ("kick_power", "kick_accuracy", "composure"),
    "P": ("punt_power", "punt_accuracy", "hang_time", "directional"),
}


def skill_group_for(position: Position) -> str:
    """Return the skill group key ('OL', 'DB', ...) a position belongs to."""
    for group, positions in SKILL_GROUPS.items():
        if position in positions:
            return group
    raise ValueError(f"No skill group for position {position}")


@dataclass(frozen=True)
class InjuryStatus:
    """Current injury state of a player"""
    severity: str = "none"  # "none", "questionable", "out", "ir"
    type: str = "none"
    weeks_remaining: int = 0
    is_public: bool = True

    @classmethod
    def healthy(cls) -> "InjuryStatus":
        return cls()

    @property
    def is_healthy(self) -> bool:
        return self.severity == "none"


@dataclass(frozen=True)
class SkillValue:
    """True skill rating plus the perceived (scouted) range around it"""
    true_value: int
    perceived_min: int
    perceived_max: int

    @property
    def range_width(self) -> int:
        return self.perceived_max - self.perceived_min


@dataclass(frozen=True)
class Player:
    """
    A player in the league or in a draft class.

    contract_id is None for free agents and prospects.
    """
    id: str
    first_name: str
    last_name: str
    position: Position
    age: int
    experience: int = 0
    fatigue: int = 0
    morale: int = 75
    injury_status: InjuryStatus = field(default_factory=InjuryStatus.healthy)
    skills: Dict[str, SkillValue] = field(default_factory=dict)
    contract_id: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def is_free_agent(self) -> bool:
        return self.contract_id is None

    def __str__(self) -> str:
        return f"{self.full_name} ({self.position.value}, age {self.age})"
