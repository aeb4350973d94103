"""
Player Development

Aging and coach-driven development of every rostered player between
seasons.
"""

from dataclasses import replace
from typing import Dict

from league.league_state import GameState
from league.player import Player
from league.state_step import GameStateStep

from .progression_model import ProgressionModel


class AgingStep(GameStateStep):
    """Step 4: every player gets a year older and a year more experienced."""

    name = "aging"

    def apply(self, state: GameState) -> GameState:
        players = {
            player_id: replace(player, age=player.age + 1, experience=player.experience + 1)
            for player_id, player in state.players.items()
        }
        self.logger.info(f"Aged {len(players)} players")
        return replace(state, players=players)


class DevelopmentStep(GameStateStep):
    """
    Step 5: run the progression model for every player attached to a team.

    A team without a head coach is skipped; its players do not develop this
    offseason. Players on no team receive nothing.
    """

    name = "development"

    def __init__(self, progression_model: ProgressionModel, logger=None):
        super().__init__(logger)
        self.progression_model = progression_model

    def apply(self, state: GameState) -> GameState:
        developed: Dict[str, Player] = {}
        skipped_teams = 0

        for team_id, team in state.teams.items():
            head_coach_id = team.staff_hierarchy.head_coach
            coach = state.coaches.get(head_coach_id) if head_coach_id else None
            if coach is None:
                skipped_teams += 1
                self.logger.debug(f"Team {team_id} has no head coach, skipping development")
                continue

            for player_id in team.all_player_ids:
                player = state.players.get(player_id)
                if player is None:
                    continue
                result = self.progression_model.progress(player, coach)
                developed[player_id] = self.progression_model.apply_changes(player, result)

        players = {
            player_id: developed.get(player_id, player)
            for player_id, player in state.players.items()
        }

        self.logger.info(
            f"Developed {len(developed)} players across {len(state.teams) - skipped_teams} teams"
            + (f" ({skipped_teams} without a head coach)" if skipped_teams else "")
        )
        return replace(state, players=players)
