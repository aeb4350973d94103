"""
Schedule Step

Builds last season's division standings and asks the schedule generator for
the coming season's regular season.
"""

from dataclasses import replace
import logging

from league.league_state import GameState
from league.standings import previous_year_standings
from league.state_step import GameStateStep
from season.season_exceptions import IncompleteScheduleException

from .schedule_generator import ScheduleGenerator


class ScheduleStep(GameStateStep):
    """Replaces the league schedule with next year's."""

    name = "schedule"

    def __init__(self, generator: ScheduleGenerator, logger: logging.Logger = None):
        super().__init__(logger)
        self.generator = generator

    def apply(self, state: GameState) -> GameState:
        next_year = state.current_year + 1
        standings = previous_year_standings(state.teams)

        schedule = self.generator.generate(list(state.teams.values()), standings, next_year)

        scheduled = schedule.team_ids()
        missing = [team_id for team_id in state.league.team_ids if team_id not in scheduled]
        if missing:
            raise IncompleteScheduleException(next_year, missing)

        self.logger.info(
            f"Scheduled {len(schedule.regular_season)} games for {next_year} "
            f"across {schedule.total_weeks} weeks"
        )
        return replace(state, league=replace(state.league, schedule=schedule))
