"""
Transient Reset

Final transition step: rolls season records into all-time records, clears
season-scoped team and player fields, moves the calendar to week 1 of the
new year and drops the in-season state.
"""

from dataclasses import replace
from typing import Callable

from league.league_state import GameState, SeasonPhase, empty_standings
from league.player import InjuryStatus
from league.state_step import GameStateStep
from league.team import TeamRecord


class TransientResetStep(GameStateStep):
    """Step 11: zero everything that only lives for one season."""

    name = "transient_reset"

    def __init__(
        self,
        morale_floor: int = 25,
        morale_ceiling: int = 100,
        injury_status_factory: Callable[[], InjuryStatus] = InjuryStatus.healthy,
        logger=None
    ):
        super().__init__(logger)
        self.morale_floor = morale_floor
        self.morale_ceiling = morale_ceiling
        self.injury_status_factory = injury_status_factory

    def apply(self, state: GameState) -> GameState:
        next_year = state.current_year + 1

        teams = {
            team_id: replace(
                team,
                all_time_record=team.all_time_record.absorb(team.current_record),
                current_record=TeamRecord.empty(),
                playoff_seed=None,
                is_eliminated=False,
            )
            for team_id, team in state.teams.items()
        }

        healthy = self.injury_status_factory()
        players = {
            player_id: replace(
                player,
                fatigue=0,
                morale=min(self.morale_ceiling, max(self.morale_floor, player.morale)),
                injury_status=healthy,
            )
            for player_id, player in state.players.items()
        }

        calendar = replace(
            state.league.calendar,
            current_year=next_year,
            current_week=1,
            current_phase=SeasonPhase.REGULAR_SEASON,
            offseason_phase=None,
        )
        league = replace(
            state.league,
            calendar=calendar,
            standings=empty_standings(),
            playoff_bracket=None,
            upcoming_events=(),
        )

        self.logger.info(f"Reset season state for {next_year}: {len(teams)} teams, {len(players)} players")
        return replace(state, league=league, teams=teams, players=players, in_season=None)
