"""
Unit Tests for Season Transition Exceptions and State Validation

Tests:
- Error codes, context and serialization of each exception
- Contract reference validation
"""

from dataclasses import replace

import pytest

from season.season_exceptions import (
    DanglingContractReferenceException,
    DraftPickCountException,
    IncompleteScheduleException,
    SeasonTransitionException,
    SeasonTransitionFailedException,
)
from season.state_validator import LeagueStateValidator


class TestExceptionHierarchy:
    """Test exception codes and context."""

    def test_all_derive_from_base(self):
        for exc in (
            DanglingContractReferenceException("p1", "c1"),
            DraftPickCountException(2026, 224, 223),
            IncompleteScheduleException(2026, ["DET"]),
            SeasonTransitionFailedException("schedule", 2025, ValueError("boom")),
        ):
            assert isinstance(exc, SeasonTransitionException)

    def test_error_codes(self):
        assert SeasonTransitionException("x").error_code == "TRANSITION_000"
        assert DanglingContractReferenceException("p1", "c1").error_code == "TRANSITION_001"
        assert DraftPickCountException(2026, 224, 223).error_code == "TRANSITION_002"
        assert IncompleteScheduleException(2026, ["DET"]).error_code == "TRANSITION_003"
        assert SeasonTransitionFailedException("schedule", 2025).error_code == "TRANSITION_004"

    def test_failed_exception_carries_step_and_cause(self):
        cause = KeyError("missing")
        exc = SeasonTransitionFailedException("draft_picks", 2025, original_exception=cause)

        assert exc.step_name == "draft_picks"
        assert exc.from_year == 2025
        assert exc.original_exception is cause
        assert "draft_picks" in str(exc)
        assert "2025" in str(exc) and "2026" in str(exc)

    def test_incomplete_schedule_sorts_missing_ids(self):
        exc = IncompleteScheduleException(2026, ["SEA", "ARI"])
        assert exc.missing_team_ids == ["ARI", "SEA"]

    def test_to_dict(self):
        data = DanglingContractReferenceException("p1", "c9", reason="foreign").to_dict()

        assert data["error_code"] == "TRANSITION_001"
        assert data["season_context"]["reason"] == "foreign"
        assert data["recovery_strategy"] == "repair_snapshot"
        assert data["original_error"] is None


class TestLeagueStateValidator:
    """Test contract reference checks."""

    def test_valid_state_passes(self, small_state):
        LeagueStateValidator().validate(small_state)

    def test_free_agents_are_not_violations(self, small_state):
        assert small_state.players["p4"].is_free_agent
        assert LeagueStateValidator().find_violations(small_state) == []

    def test_missing_contract_detected(self, small_state):
        contracts = {cid: c for cid, c in small_state.contracts.items() if cid != "c2"}
        state = replace(small_state, contracts=contracts)

        with pytest.raises(DanglingContractReferenceException) as exc_info:
            LeagueStateValidator().validate(state)

        assert exc_info.value.player_id == "p2"
        assert exc_info.value.reason == "missing"

    def test_foreign_contract_detected(self, small_state):
        players = {**small_state.players, "p4": replace(small_state.players["p4"], contract_id="c1")}
        violations = LeagueStateValidator().find_violations(replace(small_state, players=players))

        assert violations == [("p4", "c1", "foreign")]

    def test_stage_recorded_in_context(self, small_state):
        players = {**small_state.players, "p4": replace(small_state.players["p4"], contract_id="nope")}
        with pytest.raises(DanglingContractReferenceException) as exc_info:
            LeagueStateValidator().validate(replace(small_state, players=players), stage="output")

        assert exc_info.value.season_context["stage"] == "output"
