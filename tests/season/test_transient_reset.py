"""
Unit Tests for TransientResetStep

Tests:
- Records roll into all-time records and reset to zero
- Playoff flags cleared
- Player fatigue, morale and injuries reset
- Calendar moves to week 1 of the next regular season
- In-season state discarded
"""

from dataclasses import replace

from league.league_state import LeagueEvent, SeasonPhase
from league.player import InjuryStatus
from season.transient_reset import TransientResetStep


class TestTransientResetStep:
    """Test clearing season-scoped state."""

    def test_records_roll_into_all_time(self, small_state):
        result = TransientResetStep().apply(small_state)
        team = result.teams["AAA"]

        assert team.current_record.is_empty()
        assert (team.all_time_record.wins, team.all_time_record.losses) == (10, 7)

    def test_playoff_flags_cleared(self, small_state):
        result = TransientResetStep().apply(small_state)

        assert result.teams["AAA"].playoff_seed is None
        assert result.teams["BBB"].is_eliminated is False

    def test_player_state_reset(self, small_state):
        hurt = replace(
            small_state.players["p1"],
            fatigue=80,
            morale=120,
            injury_status=InjuryStatus(severity="out", type="hamstring", weeks_remaining=3),
        )
        state = replace(small_state, players={**small_state.players, "p1": hurt})

        result = TransientResetStep().apply(state)

        assert result.players["p1"].fatigue == 0
        assert result.players["p1"].morale == 100
        assert result.players["p1"].injury_status.is_healthy
        # p2 entered with morale 10
        assert result.players["p2"].morale == 25

    def test_morale_inside_bounds_untouched(self, small_state):
        assert TransientResetStep().apply(small_state).players["p1"].morale == 75

    def test_calendar_moves_to_next_regular_season(self, small_state):
        calendar = TransientResetStep().apply(small_state).league.calendar

        assert calendar.current_year == 2026
        assert calendar.current_week == 1
        assert calendar.current_phase is SeasonPhase.REGULAR_SEASON
        assert calendar.offseason_phase is None

    def test_league_season_fields_cleared(self, small_state):
        league = replace(small_state.league, upcoming_events=(LeagueEvent(id="e1", week=9, description="Trade deadline"),))
        result = TransientResetStep().apply(replace(small_state, league=league))

        assert result.league.playoff_bracket is None
        assert result.league.upcoming_events == ()
        assert all(order == () for divisions in result.league.standings.values() for order in divisions.values())

    def test_in_season_state_discarded(self, small_state):
        assert small_state.in_season is not None
        assert TransientResetStep().apply(small_state).in_season is None

    def test_custom_morale_bounds(self, small_state):
        result = TransientResetStep(morale_floor=50, morale_ceiling=60).apply(small_state)
        assert result.players["p1"].morale == 60
        assert result.players["p2"].morale == 50
