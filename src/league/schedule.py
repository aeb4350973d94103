"""
Schedule Models
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class ScheduledGame:
    """A single regular season matchup"""
    game_id: str
    week: int
    home_team_id: str
    away_team_id: str
    is_divisional: bool = False
    is_conference: bool = False

    def involves(self, team_id: str) -> bool:
        return team_id in (self.home_team_id, self.away_team_id)

    def __str__(self) -> str:
        return f"Week {self.week}: {self.away_team_id} @ {self.home_team_id}"


@dataclass(frozen=True)
class SeasonSchedule:
    """
    A season's schedule.

    bye_weeks maps team id to the week it is idle; playoffs stay None until
    the postseason field is seeded.
    """
    year: int
    regular_season: Tuple[ScheduledGame, ...]
    bye_weeks: Dict[str, int] = field(default_factory=dict)
    playoffs: Optional[Tuple[ScheduledGame, ...]] = None

    @property
    def total_weeks(self) -> int:
        return max((game.week for game in self.regular_season), default=0)

    def team_ids(self) -> set:
        ids = set()
        for game in self.regular_season:
            ids.add(game.home_team_id)
            ids.add(game.away_team_id)
        return ids

    def games_for_team(self, team_id: str) -> Tuple[ScheduledGame, ...]:
        return tuple(game for game in self.regular_season if game.involves(team_id))

    def games_in_week(self, week: int) -> Tuple[ScheduledGame, ...]:
        return tuple(game for game in self.regular_season if game.week == week)
