"""
Career Stats

Folds the user's finished season into their career record.
"""

from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Optional

from league.league_state import CareerSeasonResult, CareerStats, GameState
from league.state_step import GameStateStep


class CareerStatsUpdater(ABC):
    """Rule for adding one season to a career."""

    @abstractmethod
    def update(
        self,
        stats: CareerStats,
        wins: int,
        losses: int,
        made_playoffs: bool,
        won_championship: bool,
        season_year: Optional[int] = None,
        team_id: Optional[str] = None
    ) -> CareerStats:
        """
        Return career stats with the season added.

        Args:
            stats: Career so far
            wins: Regular season wins
            losses: Regular season losses
            made_playoffs: Whether the team was seeded
            won_championship: Whether the team won the final
            season_year: Year of the season, for per-season history
            team_id: Team coached that season, for per-season history
        """


class StandardCareerStatsUpdater(CareerStatsUpdater):
    """
    Running totals plus tenure and per-season history.

    The current tenure entry (departure == "current") accumulates wins,
    losses and championships. A CareerSeasonResult is appended when the
    season year and team are known.
    """

    def update(
        self,
        stats: CareerStats,
        wins: int,
        losses: int,
        made_playoffs: bool,
        won_championship: bool,
        season_year: Optional[int] = None,
        team_id: Optional[str] = None
    ) -> CareerStats:
        team_history = tuple(
            replace(
                entry,
                wins=entry.wins + wins,
                losses=entry.losses + losses,
                championships=entry.championships + (1 if won_championship else 0),
            ) if entry.is_current else entry
            for entry in stats.team_history
        )

        season_results = stats.season_results
        if season_year is not None and team_id is not None:
            season_results = season_results + (CareerSeasonResult(
                year=season_year,
                team_id=team_id,
                wins=wins,
                losses=losses,
                made_playoffs=made_playoffs,
                won_championship=won_championship,
            ),)

        return replace(
            stats,
            seasons_completed=stats.seasons_completed + 1,
            total_wins=stats.total_wins + wins,
            total_losses=stats.total_losses + losses,
            playoff_appearances=stats.playoff_appearances + (1 if made_playoffs else 0),
            championships=stats.championships + (1 if won_championship else 0),
            team_history=team_history,
            season_results=season_results,
        )


class CareerStatsAggregator(GameStateStep):
    """Step 9: add the user team's season to the career record."""

    name = "career_stats"

    def __init__(self, updater: CareerStatsUpdater, logger=None):
        super().__init__(logger)
        self.updater = updater

    def apply(self, state: GameState) -> GameState:
        team = state.user_team
        if team is None:
            self.logger.warning(f"User team {state.user_team_id} not found, career stats unchanged")
            return state

        record = team.current_record
        bracket = state.league.playoff_bracket
        champion_id = bracket.champion_id if bracket is not None else None

        made_playoffs = team.playoff_seed is not None
        won_championship = champion_id == state.user_team_id

        career_stats = self.updater.update(
            state.career_stats,
            record.wins,
            record.losses,
            made_playoffs,
            won_championship,
            season_year=state.current_year,
            team_id=team.id,
        )

        self.logger.info(
            f"Career updated with {team.abbreviation} {record.wins}-{record.losses}"
            + (", playoffs" if made_playoffs else "")
            + (", champion" if won_championship else "")
        )
        return replace(state, career_stats=career_stats)
