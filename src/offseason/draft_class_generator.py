"""
Draft Class Generator

Generates the prospect pool for a draft year and the transition step that
replaces the league's prospects with it.

Every position is guaranteed at least one prospect; the rest of the class
follows the roster position mix.
"""

from abc import ABC, abstractmethod
from dataclasses import replace
from typing import List
import random

from league.draft import DraftClass, Prospect
from league.league_state import GameState
from league.player import Position
from league.state_step import GameStateStep
from player_generation.player_generator import PlayerConstraints, PlayerGenerator


class DraftClassGenerator(ABC):
    """Produces a year's draft class."""

    @abstractmethod
    def generate(self, year: int) -> DraftClass:
        """Generate every prospect eligible for the given draft year."""


class StandardDraftClassGenerator(DraftClassGenerator):
    """
    Draft class of min_size to max_size college prospects aged 21-23.
    """

    COLLEGES = [
        "Alabama", "Georgia", "Ohio State", "Michigan", "LSU", "Clemson",
        "Oklahoma", "Texas", "USC", "Oregon", "Penn State", "Notre Dame",
        "Florida", "Florida State", "Miami", "Auburn", "Wisconsin", "Iowa",
        "Tennessee", "Texas A&M", "Washington", "Utah", "TCU", "Stanford",
        "North Dakota State", "Boise State", "Appalachian State", "Toledo"
    ]

    # Talent tier -> possible projected rounds (8 = undrafted)
    PROJECTED_ROUNDS = {
        "elite": (1, 1),
        "starter": (1, 3),
        "backup": (3, 6),
        "fringe": (6, 8),
    }

    def __init__(self, rng: random.Random, min_size: int = 250, max_size: int = 300):
        self.rng = rng
        self.min_size = min_size
        self.max_size = max_size

    def generate(self, year: int) -> DraftClass:
        """
        Generate a draft class.

        Args:
            year: Draft year

        Returns:
            DraftClass with between min_size and max_size prospects
        """
        generator = PlayerGenerator(self.rng, id_prefix=f"prospect-{year}")
        size = self.rng.randint(self.min_size, self.max_size)

        # One of every position first, the rest weighted like a roster
        positions: List[Position] = list(Position)
        while len(positions) < size:
            positions.append(generator.roll_position())

        prospects = tuple(self._generate_prospect(generator, position, year) for position in positions)
        return DraftClass(year=year, prospects=prospects)

    def _generate_prospect(self, generator: PlayerGenerator, position: Position, year: int) -> Prospect:
        tier = generator.roll_tier()
        player = generator.generate(
            PlayerConstraints(position=position, min_age=21, max_age=23, tier=tier, experience=0)
        )
        low, high = self.PROJECTED_ROUNDS[tier]
        return Prospect(
            player=player,
            college=self.rng.choice(self.COLLEGES),
            projected_round=self.rng.randint(low, high),
            draft_year=year,
        )


class DraftClassStep(GameStateStep):
    """Step 6: replace the whole prospect pool with next year's class."""

    name = "draft_class"

    def __init__(self, generator: DraftClassGenerator, logger=None):
        super().__init__(logger)
        self.generator = generator

    def apply(self, state: GameState) -> GameState:
        next_year = state.current_year + 1
        draft_class = self.generator.generate(next_year)
        prospects = draft_class.by_player_id()

        self.logger.info(
            f"Generated {len(prospects)} prospects for the {next_year} draft "
            f"(discarded {len(state.prospects)} leftover prospects)"
        )
        return replace(state, prospects=prospects)
