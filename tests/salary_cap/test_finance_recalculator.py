"""
Unit Tests for Cap Calculations and Finance Recalculation

Tests:
- Cap usage and future commitments from contract year breakdowns
- Cap penalty aging
- Salary cap growth formula
- Per-team finance recalculation
"""

from dataclasses import replace

from league.contracts import ContractStatus
from league.team import CapPenalty, TeamFinances
from salary_cap.cap_calculator import CapCalculator
from salary_cap.finance_recalculator import FinanceRecalculator
from season.transition_config import TransitionConfig


class TestCapCalculator:
    """Test pure cap math."""

    def test_total_cap_usage_for_year(self, make_contract):
        contracts = [
            make_contract("c1", "p1", "T", years=2, cap_hit=1_000),
            make_contract("c2", "p2", "T", years=1, cap_hit=4_000),
        ]
        calculator = CapCalculator()

        assert calculator.total_cap_usage(contracts, 2025) == 5_000
        assert calculator.total_cap_usage(contracts, 2026) == 1_000
        assert calculator.total_cap_usage(contracts, 2030) == 0

    def test_future_commitments(self, make_contract):
        contracts = [make_contract("c1", "p1", "T", years=4, cap_hit=2_000)]
        commitments = CapCalculator().future_commitments(contracts, 2025)

        assert (commitments.next_year, commitments.two_years_out, commitments.three_years_out) == (2_000, 2_000, 2_000)
        assert commitments.total == 6_000

    def test_advance_penalties(self):
        finances = replace(TeamFinances.default(255_000), cap_penalties=(
            CapPenalty(description="Dead money", amount=5_000, years_remaining=2),
            CapPenalty(description="Cut", amount=1_000, years_remaining=1),
        ))
        advanced = CapCalculator().advance_penalties(finances)

        assert len(advanced.cap_penalties) == 1
        assert advanced.cap_penalties[0].years_remaining == 1
        assert advanced.total_penalties == 5_000

    def test_no_penalties_returns_same_finances(self):
        finances = TeamFinances.default(255_000)
        assert CapCalculator().advance_penalties(finances) is finances


class TestSalaryCapGrowth:
    """Test the cap formula."""

    def test_reference_year(self):
        assert TransitionConfig().salary_cap_for(2025) == 255_000

    def test_linear_growth(self):
        assert TransitionConfig().salary_cap_for(2026) == 262_650
        assert TransitionConfig().salary_cap_for(2030) == 293_250

    def test_half_thousand_rounds_up(self):
        config = TransitionConfig(base_salary_cap=1003, cap_growth_rate=0.5, cap_reference_year=2025)
        assert config.salary_cap_for(2026) == 1505


class TestFinanceRecalculator:
    """Test the finance step."""

    def _recalculator(self):
        return FinanceRecalculator(CapCalculator(), TransitionConfig().salary_cap_for)

    def test_recomputes_cap_for_next_year(self, small_state):
        result = self._recalculator().apply(small_state)
        finances = result.teams["AAA"].finances

        assert finances.salary_cap == 262_650
        # c1 covers 2025 only, c2 covers 2025-2027
        assert finances.current_cap_usage == 5_000
        assert finances.cap_space == 262_650 - 5_000
        assert finances.next_year_commitments == 5_000
        assert finances.two_years_out_commitments == 0

    def test_expired_contracts_do_not_count(self, small_state):
        expired = replace(small_state.contracts["c2"], status=ContractStatus.EXPIRED)
        state = replace(small_state, contracts={**small_state.contracts, "c2": expired})

        result = self._recalculator().apply(state)
        assert result.teams["AAA"].finances.current_cap_usage == 0

    def test_team_without_contracts_has_full_space(self, small_state):
        state = replace(small_state, contracts={})
        finances = self._recalculator().apply(state).teams["BBB"].finances
        assert finances.current_cap_usage == 0
        assert finances.cap_space == finances.salary_cap
