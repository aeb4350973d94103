"""
Unit Tests for Draft Class and Draft Pick Steps

Tests:
- Draft class size, positions, ages and metadata
- Prospect pool replacement
- Pick purge, issue and merge with retained future picks
- Pick count gate
"""

import random
from dataclasses import replace

import pytest

from league.draft import DraftPick
from league.player import Position
from offseason.draft_class_generator import DraftClassStep, StandardDraftClassGenerator
from offseason.draft_pick_issuer import DraftPickIssuer, DraftPickStep, StandardDraftPickIssuer
from season.season_exceptions import DraftPickCountException


class TestStandardDraftClassGenerator:
    """Test prospect pool generation."""

    def test_class_size_in_bounds(self, rng):
        draft_class = StandardDraftClassGenerator(rng).generate(2026)
        assert 250 <= len(draft_class) <= 300

    def test_every_position_represented(self, rng):
        draft_class = StandardDraftClassGenerator(rng).generate(2026)
        positions = {prospect.player.position for prospect in draft_class.prospects}
        assert positions == set(Position)

    def test_prospects_are_young_rookies(self, rng):
        draft_class = StandardDraftClassGenerator(rng).generate(2026)
        for prospect in draft_class.prospects:
            assert 21 <= prospect.player.age <= 23
            assert prospect.player.experience == 0
            assert prospect.player.contract_id is None
            assert prospect.draft_year == 2026
            assert 1 <= prospect.projected_round <= 8
            assert prospect.college

    def test_prospect_ids_unique(self, rng):
        draft_class = StandardDraftClassGenerator(rng).generate(2026)
        assert len(draft_class.by_player_id()) == len(draft_class)

    def test_same_seed_same_class(self):
        first = StandardDraftClassGenerator(random.Random(5)).generate(2026)
        second = StandardDraftClassGenerator(random.Random(5)).generate(2026)
        assert first == second


class TestDraftClassStep:
    """Test replacing the prospect pool."""

    def test_prospects_replaced_with_next_year_class(self, small_state, rng):
        result = DraftClassStep(StandardDraftClassGenerator(rng, min_size=20, max_size=20)).apply(small_state)

        assert len(result.prospects) == 20
        assert all(prospect.draft_year == 2026 for prospect in result.prospects.values())
        assert all(key == prospect.player.id for key, prospect in result.prospects.items())


class TestStandardDraftPickIssuer:
    """Test pick issuance."""

    def test_rounds_times_teams(self):
        picks = StandardDraftPickIssuer().generate(2026, ["A", "B", "C"], "pick")
        assert len(picks) == 21

    def test_pick_ids_and_ownership(self):
        picks = StandardDraftPickIssuer(rounds=2).generate(2026, ["A", "B"], "pick")

        assert [pick.id for pick in picks] == [
            "pick-2026-R1-A", "pick-2026-R1-B", "pick-2026-R2-A", "pick-2026-R2-B",
        ]
        assert all(not pick.is_traded for pick in picks)


class TestDraftPickStep:
    """Test purging and issuing picks."""

    def test_purges_completed_year_and_issues_next(self, small_state):
        result = DraftPickStep(StandardDraftPickIssuer()).apply(small_state)

        assert all(pick.year > 2025 for pick in result.draft_picks.values())
        next_year = [pick for pick in result.draft_picks.values() if pick.year == 2026]
        assert len(next_year) == 7 * 2

    def test_traded_future_pick_keeps_new_owner(self, small_state):
        traded = replace(small_state.draft_picks["pick-2026-R1-AAA"], current_team_id="BBB")
        state = replace(small_state, draft_picks={**small_state.draft_picks, traded.id: traded})

        result = DraftPickStep(StandardDraftPickIssuer()).apply(state)
        assert result.draft_picks["pick-2026-R1-AAA"].current_team_id == "BBB"

    def test_retained_far_future_picks_survive(self, small_state):
        future = DraftPick(id="pick-2028-R3-AAA", year=2028, round=3, original_team_id="AAA", current_team_id="AAA")
        state = replace(small_state, draft_picks={**small_state.draft_picks, future.id: future})

        result = DraftPickStep(StandardDraftPickIssuer()).apply(state)
        assert future.id in result.draft_picks

    def test_wrong_pick_count_raises(self, small_state):
        class ShortIssuer(DraftPickIssuer):
            def generate(self, year, team_ids, kind):
                return StandardDraftPickIssuer().generate(year, team_ids, kind)[:-1]

        with pytest.raises(DraftPickCountException) as exc_info:
            DraftPickStep(ShortIssuer()).apply(small_state)

        assert exc_info.value.expected == 14
        assert exc_info.value.actual == 13
        assert exc_info.value.error_code == "TRANSITION_002"
