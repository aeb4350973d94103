"""
Unit Tests for Aging and Development

Tests:
- Every player ages one year and gains one year of experience
- Coach-driven progression and the age modifier
- Skill clamping and perceived range narrowing
- Teams without a head coach are skipped
"""

from dataclasses import replace

import pytest

from league.player import SkillValue
from league.staff import Coach
from offseason.player_development import AgingStep, DevelopmentStep
from offseason.progression_model import CoachProgressionModel, SkillChangeResult, age_modifier


def _coach(rating):
    return Coach(id="c", first_name="A", last_name="B", role="head_coach", development_rating=rating)


class TestAgingStep:
    """Test yearly aging."""

    def test_age_and_experience_increment(self, small_state):
        result = AgingStep().apply(small_state)
        for player_id, player in small_state.players.items():
            assert result.players[player_id].age == player.age + 1
            assert result.players[player_id].experience == player.experience + 1

    def test_free_agents_age_too(self, small_state):
        assert AgingStep().apply(small_state).players["p4"].age == 28


class TestAgeModifier:
    """Test the age development table."""

    @pytest.mark.parametrize("age,expected", [
        (21, 1.3), (23, 1.3), (25, 1.15), (27, 1.0), (29, 0.85), (31, 0.6), (33, 0.3), (34, 0.1),
    ])
    def test_table(self, age, expected):
        assert age_modifier(age) == expected


class TestCoachProgressionModel:
    """Test the default progression model."""

    def test_good_coach_improves_key_skills(self, make_player):
        model = CoachProgressionModel()
        result = model.progress(make_player("p", age=25), _coach(80))

        assert result.total_change == 3
        assert result.skill_changes == {"arm_strength": 1, "accuracy": 1, "decision_making": 1}
        assert result.coach_influence == "moderate"

    def test_poor_coach_hurts_development(self, make_player):
        result = CoachProgressionModel().progress(make_player("p", age=22), _coach(20))

        assert result.total_change < 0
        assert all(change < 0 for change in result.skill_changes.values())
        assert result.coach_influence == "negative"

    def test_neutral_coach_changes_nothing(self, make_player):
        result = CoachProgressionModel().progress(make_player("p"), _coach(50))
        assert result.is_empty

    def test_half_point_of_development_rounds_up(self, make_player):
        result = CoachProgressionModel().progress(make_player("p", age=26), _coach(55))

        assert result.total_change == 1
        assert all(change == 1 for change in result.skill_changes.values())

    def test_half_point_of_decline_rounds_to_zero(self, make_player):
        result = CoachProgressionModel().progress(make_player("p", age=26), _coach(45))
        assert result.is_empty

    def test_apply_changes_clamps_to_skill_range(self, make_player):
        player = make_player("p", skills={
            "arm_strength": SkillValue(true_value=98, perceived_min=95, perceived_max=99),
            "accuracy": SkillValue(true_value=2, perceived_min=1, perceived_max=6),
        })
        result = SkillChangeResult(player_id="p", skill_changes={"arm_strength": 5, "accuracy": -5})
        updated = CoachProgressionModel().apply_changes(player, result)

        assert updated.skills["arm_strength"].true_value == 99
        assert updated.skills["accuracy"].true_value == 1

    def test_apply_changes_narrows_perceived_range(self, make_player):
        player = make_player("p")
        result = SkillChangeResult(player_id="p", skill_changes={"arm_strength": 3, "accuracy": 1})
        updated = CoachProgressionModel().apply_changes(player, result)

        arm = updated.skills["arm_strength"]
        accuracy = updated.skills["accuracy"]
        assert arm.range_width == player.skills["arm_strength"].range_width - 4
        assert accuracy.range_width == player.skills["accuracy"].range_width - 2
        for skill in (arm, accuracy):
            assert skill.perceived_min <= skill.true_value <= skill.perceived_max

    def test_unchanged_skills_are_kept(self, make_player):
        player = make_player("p")
        result = SkillChangeResult(player_id="p", skill_changes={"arm_strength": 2})
        updated = CoachProgressionModel().apply_changes(player, result)
        assert updated.skills["decision_making"] is player.skills["decision_making"]


class TestDevelopmentStep:
    """Test development across the league."""

    def test_coached_team_players_develop(self, small_state):
        result = DevelopmentStep(CoachProgressionModel()).apply(small_state)
        before = small_state.players["p1"].skills["arm_strength"].true_value
        assert result.players["p1"].skills["arm_strength"].true_value > before

    def test_team_without_head_coach_is_skipped(self, small_state):
        result = DevelopmentStep(CoachProgressionModel()).apply(small_state)
        assert result.players["p3"] is small_state.players["p3"]

    def test_missing_coach_record_is_skipped(self, small_state):
        state = replace(small_state, coaches={})
        result = DevelopmentStep(CoachProgressionModel()).apply(state)
        assert result.players == state.players

    def test_free_agents_do_not_develop(self, small_state):
        result = DevelopmentStep(CoachProgressionModel()).apply(small_state)
        assert result.players["p4"] is small_state.players["p4"]
