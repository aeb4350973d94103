"""
Salary Cap Calculator

Core cap math used when a team's finances are rolled into a new season:
- Current-year cap usage from active contracts
- Forward commitments for the three following seasons
- Aging of cap penalties (dead money) by one season

All amounts are in thousands of dollars.
"""

from dataclasses import dataclass, replace
from typing import Iterable
import logging

from league.contracts import PlayerContract
from league.team import TeamFinances


@dataclass(frozen=True)
class FutureCommitments:
    """Cap dollars already committed to the three seasons after a given year"""
    next_year: int = 0
    two_years_out: int = 0
    three_years_out: int = 0

    @property
    def total(self) -> int:
        return self.next_year + self.two_years_out + self.three_years_out


class CapCalculator:
    """
    Pure cap calculations over contract and finance values.

    Holds no state beyond its logger; every method returns new values.
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def total_cap_usage(self, contracts: Iterable[PlayerContract], year: int) -> int:
        """
        Sum the cap hits every contract carries for a season.

        Args:
            contracts: Contracts to total (callers pass a team's active ones)
            year: Season year

        Returns:
            Total cap hit for that season
        """
        return sum(contract.cap_hit_for(year) for contract in contracts)

    def future_commitments(self, contracts: Iterable[PlayerContract], year: int) -> FutureCommitments:
        """
        Cap hits already committed to the three seasons after ``year``.

        Args:
            contracts: Contracts to total
            year: Reference season; commitments cover year+1 through year+3

        Returns:
            FutureCommitments for year+1, year+2 and year+3
        """
        contracts = list(contracts)
        return FutureCommitments(
            next_year=self.total_cap_usage(contracts, year + 1),
            two_years_out=self.total_cap_usage(contracts, year + 2),
            three_years_out=self.total_cap_usage(contracts, year + 3),
        )

    def advance_penalties(self, finances: TeamFinances) -> TeamFinances:
        """
        Age every cap penalty by one season and drop those that are paid off.

        Args:
            finances: Team finances holding the penalties

        Returns:
            Finances with the aged penalty list (same object when there are none)
        """
        if not finances.cap_penalties:
            return finances

        aged = tuple(
            replace(penalty, years_remaining=penalty.years_remaining - 1)
            for penalty in finances.cap_penalties
        )
        remaining = tuple(penalty for penalty in aged if penalty.years_remaining > 0)

        dropped = len(aged) - len(remaining)
        if dropped:
            self.logger.debug(f"Cleared {dropped} expired cap penalt{'y' if dropped == 1 else 'ies'}")

        return replace(finances, cap_penalties=remaining)
