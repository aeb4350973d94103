"""
Retirement Resolver

Decides which players retire at the end of a season. Odds depend only on
age; each player gets one draw.

Draws are keyed by (salt, season year, player id) rather than taken in
iteration order, so the outcome for a player never depends on which other
players are in the league or how the players dict is ordered. The salt is
taken once per transition from the injected random source.
"""

from dataclasses import replace
from typing import Any, Callable, List, Set
import hashlib
import logging
import random

from league.league_state import GameState
from league.state_step import GameStateStep


def stable_u01(*parts: Any) -> float:
    """Deterministic pseudo-random in [0, 1) from arbitrary parts."""
    h = hashlib.sha256()
    for p in parts:
        h.update(str(p).encode("utf-8"))
        h.update(b"|")
    n = int.from_bytes(h.digest()[:8], "big")
    return (n % (2**53)) / float(2**53)


class RetirementResolver(GameStateStep):
    """Step 2: remove retiring players, their roster spots and contracts."""

    name = "retirement_resolver"

    def __init__(
        self,
        rng: random.Random,
        retirement_probability: Callable[[int], float],
        logger=None
    ):
        """
        Args:
            rng: Source of the per-transition salt
            retirement_probability: Maps age to probability of retiring
        """
        super().__init__(logger)
        self.rng = rng
        self.retirement_probability = retirement_probability

    def select_retirees(self, state: GameState) -> Set[str]:
        """Return ids of the players who retire this offseason."""
        salt = self.rng.getrandbits(64)
        year = state.current_year

        retirees = set()
        for player_id, player in state.players.items():
            probability = self.retirement_probability(player.age)
            if probability <= 0.0:
                continue
            if stable_u01("retire", salt, year, player_id) < probability:
                retirees.add(player_id)
        return retirees

    def apply(self, state: GameState) -> GameState:
        retirees = self.select_retirees(state)
        if not retirees:
            self.logger.info("No players retired")
            return state

        players = {pid: player for pid, player in state.players.items() if pid not in retirees}
        teams = {tid: team.without_players(retirees) for tid, team in state.teams.items()}
        contracts = {
            cid: contract for cid, contract in state.contracts.items()
            if contract.player_id not in retirees
        }

        self.logger.info(
            f"Retired {len(retirees)} players, removed {len(state.contracts) - len(contracts)} contracts"
        )
        if self.logger.isEnabledFor(logging.DEBUG):
            notable: List[str] = [
                f"{state.players[pid].full_name} ({state.players[pid].age})" for pid in sorted(retirees)
            ]
            self.logger.debug(f"Retirees: {', '.join(notable)}")

        return replace(state, players=players, teams=teams, contracts=contracts)

