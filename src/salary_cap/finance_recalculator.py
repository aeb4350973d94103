"""
Finance Recalculator

Rolls each team's finances into the new season: salary cap for the new
year, cap usage and future commitments from active contracts, and aged
cap penalties.
"""

from collections import defaultdict
from dataclasses import replace
from typing import Callable, Dict, List

from league.contracts import PlayerContract
from league.league_state import GameState
from league.state_step import GameStateStep
from league.team import Team

from .cap_calculator import CapCalculator


class FinanceRecalculator(GameStateStep):
    """Step 10: recompute cap usage, space and commitments per team."""

    name = "finance_recalculator"

    def __init__(
        self,
        cap_calculator: CapCalculator,
        salary_cap_for: Callable[[int], int],
        logger=None
    ):
        """
        Args:
            cap_calculator: Provides usage, commitment and penalty math
            salary_cap_for: Maps a season year to that season's cap
        """
        super().__init__(logger)
        self.cap_calculator = cap_calculator
        self.salary_cap_for = salary_cap_for

    def apply(self, state: GameState) -> GameState:
        next_year = state.current_year + 1
        salary_cap = self.salary_cap_for(next_year)

        active_by_team: Dict[str, List[PlayerContract]] = defaultdict(list)
        for contract in state.contracts.values():
            if contract.is_active:
                active_by_team[contract.team_id].append(contract)

        teams: Dict[str, Team] = {}
        over_cap = []
        for team_id, team in state.teams.items():
            contracts = active_by_team.get(team_id, [])
            usage = self.cap_calculator.total_cap_usage(contracts, next_year)
            commitments = self.cap_calculator.future_commitments(contracts, next_year)
            finances = self.cap_calculator.advance_penalties(team.finances)

            finances = replace(
                finances,
                salary_cap=salary_cap,
                current_cap_usage=usage,
                cap_space=salary_cap - usage,
                next_year_commitments=commitments.next_year,
                two_years_out_commitments=commitments.two_years_out,
                three_years_out_commitments=commitments.three_years_out,
            )
            if finances.cap_space < 0:
                over_cap.append(team_id)

            teams[team_id] = replace(team, finances=finances)

        self.logger.info(f"Recalculated finances for {len(teams)} teams (salary cap {salary_cap:,}K for {next_year})")
        if over_cap:
            self.logger.warning(f"{len(over_cap)} team(s) over the {next_year} cap: {', '.join(sorted(over_cap))}")

        return replace(state, teams=teams)
