"""
League State

The complete game snapshot threaded through the season transition:
calendar, standings, playoff bracket, season history, career statistics
and the in-season gameplay state that only exists while a season is live.

Every entity is a frozen dataclass; id-keyed collections are plain dicts
that are never mutated once a snapshot is built. Changes are made with
dataclasses.replace, producing a new snapshot.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from .contracts import PlayerContract
from .draft import DraftPick, Prospect
from .player import Player
from .schedule import SeasonSchedule
from .staff import Coach
from .team import Team


# conference -> division -> team ids in finishing order
Standings = Dict[str, Dict[str, Tuple[str, ...]]]

CONFERENCES = ("AFC", "NFC")
DIVISIONS = ("East", "North", "South", "West")


def empty_standings() -> Standings:
    """Standings with every division present and no teams placed."""
    return {conference: {division: () for division in DIVISIONS} for conference in CONFERENCES}


class SeasonPhase(Enum):
    """Top-level phase of the league calendar"""
    PRESEASON = "preseason"
    REGULAR_SEASON = "regularSeason"
    PLAYOFFS = "playoffs"
    OFFSEASON = "offseason"


@dataclass(frozen=True)
class SeasonCalendar:
    """Where the league is in the year. offseason_phase is 1-12 or None."""
    current_year: int
    current_week: int = 1
    current_phase: SeasonPhase = SeasonPhase.REGULAR_SEASON
    offseason_phase: Optional[int] = None


@dataclass(frozen=True)
class PlayoffMatchup:
    home_team_id: str
    away_team_id: str
    winner_id: Optional[str] = None


@dataclass(frozen=True)
class PlayoffBracket:
    """Playoff results by round; super_bowl is the final round"""
    wild_card: Tuple[PlayoffMatchup, ...] = ()
    divisional: Tuple[PlayoffMatchup, ...] = ()
    conference: Tuple[PlayoffMatchup, ...] = ()
    super_bowl: Optional[PlayoffMatchup] = None

    @property
    def champion_id(self) -> Optional[str]:
        """Super Bowl winner, or None if the final has not been decided"""
        if self.super_bowl is None:
            return None
        return self.super_bowl.winner_id or None


@dataclass(frozen=True)
class SeasonSummary:
    """
    Archived result of one completed season.

    champion_team_id is "" when no champion was determined and
    mvp_player_id is "" when the league had no players.
    """
    year: int
    champion_team_id: str
    mvp_player_id: str
    draft_order: Tuple[str, ...]


@dataclass(frozen=True)
class LeagueEvent:
    """Something scheduled to happen in the league (deadline, award show...)"""
    id: str
    week: int
    description: str


@dataclass(frozen=True)
class League:
    id: str
    name: str
    team_ids: Tuple[str, ...]
    calendar: SeasonCalendar
    standings: Standings = field(default_factory=empty_standings)
    playoff_bracket: Optional[PlayoffBracket] = None
    season_history: Tuple[SeasonSummary, ...] = ()
    upcoming_events: Tuple[LeagueEvent, ...] = ()
    schedule: Optional[SeasonSchedule] = None

    @property
    def current_year(self) -> int:
        return self.calendar.current_year


@dataclass(frozen=True)
class CareerTeamEntry:
    """One tenure of the user with a franchise"""
    team_id: str
    team_name: str
    year_start: int
    year_end: Optional[int] = None  # None while current
    wins: int = 0
    losses: int = 0
    championships: int = 0
    departure: str = "current"  # "fired", "quit" or "current"

    @property
    def is_current(self) -> bool:
        return self.departure == "current"


@dataclass(frozen=True)
class CareerSeasonResult:
    year: int
    team_id: str
    wins: int
    losses: int
    made_playoffs: bool
    won_championship: bool


@dataclass(frozen=True)
class CareerStats:
    """Lifetime statistics of the human player's career"""
    seasons_completed: int = 0
    total_wins: int = 0
    total_losses: int = 0
    playoff_appearances: int = 0
    championships: int = 0
    team_history: Tuple[CareerTeamEntry, ...] = ()
    season_results: Tuple[CareerSeasonResult, ...] = ()

    @property
    def win_percentage(self) -> float:
        games = self.total_wins + self.total_losses
        if games == 0:
            return 0.0
        return self.total_wins / games

    def current_team_entry(self) -> Optional[CareerTeamEntry]:
        for entry in self.team_history:
            if entry.is_current:
                return entry
        return None


@dataclass(frozen=True)
class InSeasonState:
    """
    Ephemeral gameplay state that only exists while a season is live.

    The whole holder is dropped at a season transition, so
    GameState.in_season is None between seasons.
    """
    weekly_game_plan: Optional[Dict[str, Any]] = None
    trade_offers: Tuple[Dict[str, Any], ...] = ()
    start_sit_decisions: Optional[Dict[str, Any]] = None
    weekly_awards: Tuple[Dict[str, Any], ...] = ()
    waiver_wire: Tuple[str, ...] = ()
    halftime_decisions: Optional[Dict[str, Any]] = None
    season_stats: Optional[Dict[str, Any]] = None
    offseason_state: Optional[Dict[str, Any]] = None
    offseason_data: Optional[Dict[str, Any]] = None


@dataclass(frozen=True)
class GameState:
    """
    Complete save snapshot.

    teams, players, coaches, contracts, draft_picks and prospects are keyed
    by entity id.
    """
    user_team_id: str
    user_name: str
    league: League
    teams: Dict[str, Team]
    players: Dict[str, Player]
    coaches: Dict[str, Coach] = field(default_factory=dict)
    contracts: Dict[str, PlayerContract] = field(default_factory=dict)
    draft_picks: Dict[str, DraftPick] = field(default_factory=dict)
    prospects: Dict[str, Prospect] = field(default_factory=dict)
    career_stats: CareerStats = field(default_factory=CareerStats)
    in_season: Optional[InSeasonState] = None

    @property
    def current_year(self) -> int:
        return self.league.calendar.current_year

    @property
    def user_team(self) -> Optional[Team]:
        return self.teams.get(self.user_team_id)
