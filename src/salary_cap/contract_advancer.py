"""
Contract Advancer

Ages every contract in the league by one season. Contracts reaching zero
years are kept as expired records; contracts the year advancer drops are
deleted outright. Players whose contract expired or was deleted become
free agents.
"""

from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Dict, Optional, Set

from league.contracts import ContractStatus, PlayerContract
from league.league_state import GameState
from league.player import Player
from league.state_step import GameStateStep


class ContractYearAdvancer(ABC):
    """Advances a single contract by one season."""

    @abstractmethod
    def advance(self, contract: PlayerContract) -> Optional[PlayerContract]:
        """
        Advance one contract.

        Returns:
            The advanced contract, or None when it should be removed entirely
        """


class StandardContractYearAdvancer(ContractYearAdvancer):
    """
    Decrement years remaining; the contract expires when it reaches zero.

    Contracts that are already expired, or have no years left, are removed.
    """

    def advance(self, contract: PlayerContract) -> Optional[PlayerContract]:
        if contract.status is not ContractStatus.ACTIVE or contract.years_remaining <= 0:
            return None

        years_remaining = contract.years_remaining - 1
        if years_remaining == 0:
            return replace(contract, status=ContractStatus.EXPIRED, years_remaining=0)

        return replace(contract, years_remaining=years_remaining)


class ContractAdvancer(GameStateStep):
    """Step 3: advance every contract and release players whose deal ended."""

    name = "contract_advancer"

    def __init__(self, year_advancer: ContractYearAdvancer, logger=None):
        super().__init__(logger)
        self.year_advancer = year_advancer

    def apply(self, state: GameState) -> GameState:
        contracts: Dict[str, PlayerContract] = {}
        ended: Set[str] = set()
        removed = 0

        for contract_id, contract in state.contracts.items():
            advanced = self.year_advancer.advance(contract)

            if advanced is None:
                removed += 1
                ended.add(contract_id)
                continue

            if advanced.status is ContractStatus.EXPIRED:
                ended.add(contract_id)
                advanced = replace(advanced, years_remaining=0)

            contracts[contract_id] = advanced

        players: Dict[str, Player] = {}
        released = 0
        for player_id, player in state.players.items():
            if player.contract_id is not None and player.contract_id in ended:
                players[player_id] = replace(player, contract_id=None)
                released += 1
            else:
                players[player_id] = player

        self.logger.info(
            f"Advanced {len(contracts)} contracts: {len(ended) - removed} expired, "
            f"{removed} removed, {released} players released to free agency"
        )

        return replace(state, contracts=contracts, players=players)
