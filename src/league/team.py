"""
Team Models

Immutable team entities: current/all-time records, finances with cap
penalties, and the team itself with its three roster lists.
"""

from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from .staff import StaffHierarchy


@dataclass(frozen=True)
class TeamRecord:
    """Team's record for the current season"""
    wins: int = 0
    losses: int = 0
    ties: int = 0
    division_wins: int = 0
    division_losses: int = 0
    conference_wins: int = 0
    conference_losses: int = 0
    points_for: int = 0
    points_against: int = 0
    streak: int = 0  # positive = winning streak, negative = losing streak

    @classmethod
    def empty(cls) -> "TeamRecord":
        return cls()

    @property
    def games_played(self) -> int:
        return self.wins + self.losses + self.ties

    @property
    def win_percentage(self) -> float:
        """Ties count as half a win; teams that have not played are at 0.0"""
        games = self.games_played
        if games == 0:
            return 0.0
        return (self.wins + 0.5 * self.ties) / games

    @property
    def point_differential(self) -> int:
        return self.points_for - self.points_against

    def is_empty(self) -> bool:
        return self == TeamRecord.empty()

    def __str__(self) -> str:
        """String representation of record (e.g., '11-6-0')"""
        return f"{self.wins}-{self.losses}-{self.ties}"


@dataclass(frozen=True)
class AllTimeRecord:
    """Cumulative record across every archived season"""
    wins: int = 0
    losses: int = 0
    ties: int = 0

    def absorb(self, season: TeamRecord) -> "AllTimeRecord":
        """Return a new all-time record with a finished season added in."""
        return AllTimeRecord(
            wins=self.wins + season.wins,
            losses=self.losses + season.losses,
            ties=self.ties + season.ties,
        )

    def __str__(self) -> str:
        return f"{self.wins}-{self.losses}-{self.ties}"


@dataclass(frozen=True)
class CapPenalty:
    """Dead money or other charge against a team's cap"""
    description: str
    amount: int
    years_remaining: int


@dataclass(frozen=True)
class TeamFinances:
    """
    Team salary cap position. All amounts are in thousands of dollars.
    """
    salary_cap: int
    current_cap_usage: int = 0
    cap_space: int = 0
    next_year_commitments: int = 0
    two_years_out_commitments: int = 0
    three_years_out_commitments: int = 0
    cap_penalties: Tuple[CapPenalty, ...] = ()

    @classmethod
    def default(cls, salary_cap: int) -> "TeamFinances":
        return cls(salary_cap=salary_cap, cap_space=salary_cap)

    @property
    def total_penalties(self) -> int:
        return sum(penalty.amount for penalty in self.cap_penalties)


@dataclass(frozen=True)
class Team:
    """
    A franchise in the league.

    Every player id appears in at most one of the three roster lists, and a
    player belongs to at most one team across the league.
    """
    id: str
    city: str
    nickname: str
    abbreviation: str
    conference: str  # "AFC" or "NFC"
    division: str  # "East", "North", "South" or "West"
    finances: TeamFinances
    staff_hierarchy: StaffHierarchy = field(default_factory=StaffHierarchy)
    current_record: TeamRecord = field(default_factory=TeamRecord)
    all_time_record: AllTimeRecord = field(default_factory=AllTimeRecord)
    roster_player_ids: Tuple[str, ...] = ()
    practice_squad_ids: Tuple[str, ...] = ()
    injured_reserve_ids: Tuple[str, ...] = ()
    playoff_seed: Optional[int] = None
    is_eliminated: bool = False
    championships: int = 0

    @property
    def full_name(self) -> str:
        return f"{self.city} {self.nickname}"

    @property
    def all_player_ids(self) -> Tuple[str, ...]:
        """Roster, practice squad and injured reserve ids, in that order"""
        return self.roster_player_ids + self.practice_squad_ids + self.injured_reserve_ids

    def without_players(self, player_ids) -> "Team":
        """
        Return this team with the given players dropped from all three lists.

        Returns self unchanged when none of the ids are attached to the team.
        """
        removed = set(player_ids)
        if not removed.intersection(self.all_player_ids):
            return self

        return replace(
            self,
            roster_player_ids=tuple(pid for pid in self.roster_player_ids if pid not in removed),
            practice_squad_ids=tuple(pid for pid in self.practice_squad_ids if pid not in removed),
            injured_reserve_ids=tuple(pid for pid in self.injured_reserve_ids if pid not in removed),
        )

    def __str__(self) -> str:
        return f"{self.full_name} ({self.abbreviation}) {self.current_record}"
