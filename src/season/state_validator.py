"""
League State Validator

Checks the player/contract invariant of a snapshot: a player is either a
free agent or points at exactly one contract that names them.
"""

import logging

from league.league_state import GameState

from .season_exceptions import DanglingContractReferenceException


class LeagueStateValidator:
    """
    Validates contract references before and after a transition.

    Usage:
        validator = LeagueStateValidator()
        validator.validate(state)  # raises on the first bad reference
    """

    def __init__(self, logger: logging.Logger = None):
        self.logger = logger or logging.getLogger(__name__)

    def find_violations(self, state: GameState):
        """
        Collect every bad contract reference.

        Returns:
            List of (player_id, contract_id, reason) with reason "missing"
            or "foreign", in player id order
        """
        violations = []
        for player_id in sorted(state.players):
            player = state.players[player_id]
            if player.is_free_agent:
                continue

            contract_id = player.contract_id
            contract = state.contracts.get(contract_id)
            if contract is None:
                violations.append((player_id, contract_id, "missing"))
            elif contract.player_id != player_id:
                violations.append((player_id, contract_id, "foreign"))
        return violations

    def validate(self, state: GameState, stage: str = "input") -> None:
        """
        Raise on the first bad reference.

        Args:
            state: Snapshot to check
            stage: "input" or "output", recorded in the exception context

        Raises:
            DanglingContractReferenceException: A player references a
                missing or foreign contract
        """
        violations = self.find_violations(state)
        if violations:
            player_id, contract_id, reason = violations[0]
            self.logger.error(
                f"{len(violations)} bad contract reference(s) in {stage} snapshot for {state.current_year}"
            )
            raise DanglingContractReferenceException(
                player_id,
                contract_id,
                reason=reason,
                season_context={"stage": stage, "season_year": state.current_year},
            )

        self.logger.debug(f"Contract references valid in {stage} snapshot ({len(state.players)} players)")
