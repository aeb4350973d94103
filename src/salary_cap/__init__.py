"""
NFL Salary Cap System

Contract aging and cap recalculation for the season transition.

Core Components:
- CapCalculator: Cap usage, future commitments and penalty aging
- ContractYearAdvancer: Advances one contract by a season
- ContractAdvancer: Transition step aging every contract in the league
- FinanceRecalculator: Transition step rolling team finances forward
"""

from .cap_calculator import CapCalculator, FutureCommitments
from .contract_advancer import ContractAdvancer, ContractYearAdvancer, StandardContractYearAdvancer
from .finance_recalculator import FinanceRecalculator

__all__ = [
    "CapCalculator",
    "ContractAdvancer",
    "ContractYearAdvancer",
    "FinanceRecalculator",
    "FutureCommitments",
    "StandardContractYearAdvancer",
]
