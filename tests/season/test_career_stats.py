"""
Unit Tests for Career Stats

Tests:
- Running totals and counters
- Current tenure entry updates
- Per-season history
- Missing user team is a no-op
"""

from dataclasses import replace

from league.league_state import CareerStats, CareerTeamEntry
from season.career_stats import CareerStatsAggregator, CareerStatsUpdater, StandardCareerStatsUpdater


class TestStandardCareerStatsUpdater:
    """Test folding one season into a career."""

    def test_totals_and_counters(self):
        stats = StandardCareerStatsUpdater().update(CareerStats(), 11, 6, True, False)

        assert stats.seasons_completed == 1
        assert (stats.total_wins, stats.total_losses) == (11, 6)
        assert stats.playoff_appearances == 1
        assert stats.championships == 0

    def test_only_current_tenure_updated(self):
        history = (
            CareerTeamEntry(team_id="OLD", team_name="Old", year_start=2020, year_end=2023,
                            wins=30, losses=20, departure="fired"),
            CareerTeamEntry(team_id="NEW", team_name="New", year_start=2024),
        )
        stats = StandardCareerStatsUpdater().update(CareerStats(team_history=history), 9, 8, False, True)

        assert stats.team_history[0] == history[0]
        assert (stats.team_history[1].wins, stats.team_history[1].losses) == (9, 8)
        assert stats.team_history[1].championships == 1

    def test_season_result_appended_when_year_known(self):
        stats = StandardCareerStatsUpdater().update(
            CareerStats(), 12, 5, True, True, season_year=2025, team_id="NEW"
        )
        assert len(stats.season_results) == 1
        assert stats.season_results[0].year == 2025
        assert stats.season_results[0].won_championship

    def test_no_season_result_without_year(self):
        assert StandardCareerStatsUpdater().update(CareerStats(), 1, 16, False, False).season_results == ()


class TestCareerStatsAggregator:
    """Test the career step."""

    def test_folds_user_team_record(self, small_state):
        result = CareerStatsAggregator(StandardCareerStatsUpdater()).apply(small_state)
        stats = result.career_stats

        assert (stats.total_wins, stats.total_losses) == (10, 7)
        assert stats.playoff_appearances == 1  # AAA was seeded
        assert stats.championships == 1  # and won the final
        assert stats.current_team_entry().wins == 10

    def test_missing_user_team_returns_same_state(self, small_state):
        state = replace(small_state, user_team_id="ZZZ")
        assert CareerStatsAggregator(StandardCareerStatsUpdater()).apply(state) is state

    def test_custom_updater_receives_season(self, small_state):
        seen = []

        class RecordingUpdater(CareerStatsUpdater):
            def update(self, stats, wins, losses, made_playoffs, won_championship,
                       season_year=None, team_id=None):
                seen.append((wins, losses, made_playoffs, won_championship, season_year, team_id))
                return stats

        CareerStatsAggregator(RecordingUpdater()).apply(small_state)
        assert seen == [(10, 7, True, True, 2025, "AAA")]
