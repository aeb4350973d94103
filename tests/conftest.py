"""
Pytest configuration for test discovery and imports.

Provides fixtures for testing including:
- Seeded random sources
- Factories for hand-built players, contracts, teams and small leagues
- A generated 32-team league with a finished season
"""

import sys
from pathlib import Path
import random

import pytest


# Determine paths
project_root = Path(__file__).parent.parent
src_path = project_root / "src"


def pytest_configure(config):
    """Put src/ and the project root at the front of sys.path."""
    for path in [str(project_root), str(src_path)]:
        if path in sys.path:
            sys.path.remove(path)
        sys.path.insert(0, path)


# ============================================================================
# RANDOMNESS
# ============================================================================

@pytest.fixture
def rng():
    """Seeded random source so every test run is reproducible."""
    return random.Random(1234)


# ============================================================================
# ENTITY FACTORIES
# ============================================================================

@pytest.fixture
def make_player():
    """
    Factory for players.

    Usage:
        player = make_player("p1", age=36, contract_id="c1")
    """
    from league.player import Player, Position, SkillValue

    def _make(player_id, age=25, position=Position.QB, contract_id=None, **overrides):
        skills = overrides.pop("skills", {
            "arm_strength": SkillValue(true_value=60, perceived_min=50, perceived_max=70),
            "accuracy": SkillValue(true_value=55, perceived_min=45, perceived_max=65),
            "decision_making": SkillValue(true_value=50, perceived_min=40, perceived_max=60),
        })
        return Player(
            id=player_id,
            first_name="Test",
            last_name=player_id.title(),
            position=position,
            age=age,
            skills=skills,
            contract_id=contract_id,
            **overrides
        )

    return _make


@pytest.fixture
def make_contract():
    """
    Factory for active contracts starting in 2025.

    Usage:
        contract = make_contract("c1", "p1", "AAA", years=3, cap_hit=1_000)
    """
    from league.contracts import ContractStatus, ContractYear, PlayerContract

    def _make(contract_id, player_id, team_id, years=2, cap_hit=1_000, start_year=2025, **overrides):
        return PlayerContract(
            id=contract_id,
            player_id=player_id,
            team_id=team_id,
            status=overrides.pop("status", ContractStatus.ACTIVE),
            years_remaining=years,
            year_breakdown=tuple(
                ContractYear(year=start_year + offset, base_salary=cap_hit, cap_hit=cap_hit)
                for offset in range(years)
            ),
            **overrides
        )

    return _make


@pytest.fixture
def make_team():
    """
    Factory for teams.

    Usage:
        team = make_team("AAA", roster=("p1", "p2"), wins=10, losses=7)
    """
    from league.staff import StaffHierarchy
    from league.team import Team, TeamFinances, TeamRecord

    def _make(team_id, conference="AFC", division="East", roster=(), head_coach=None,
              wins=0, losses=0, ties=0, points_for=0, points_against=0, **overrides):
        return Team(
            id=team_id,
            city=f"City {team_id}",
            nickname=f"{team_id}s",
            abbreviation=team_id,
            conference=conference,
            division=division,
            finances=overrides.pop("finances", TeamFinances.default(255_000)),
            staff_hierarchy=StaffHierarchy(head_coach=head_coach),
            current_record=TeamRecord(
                wins=wins,
                losses=losses,
                ties=ties,
                points_for=points_for,
                points_against=points_against,
            ),
            roster_player_ids=tuple(roster),
            **overrides
        )

    return _make


@pytest.fixture
def small_state(make_player, make_contract, make_team):
    """
    Two-team league at the end of 2025.

    AAA (10-7, coached, champion) rosters p1 (age 25, 1-year deal) and
    p2 (age 30, 3-year deal); BBB (7-10, no head coach) rosters p3
    (age 42, 2-year deal). p4 is an unsigned free agent.
    """
    from league.draft import DraftPick
    from league.league_state import (
        CareerStats, CareerTeamEntry, GameState, InSeasonState, League,
        PlayoffBracket, PlayoffMatchup, SeasonCalendar, SeasonPhase,
    )
    from league.staff import Coach

    players = {
        "p1": make_player("p1", age=25, contract_id="c1"),
        "p2": make_player("p2", age=30, contract_id="c2", fatigue=40, morale=10),
        "p3": make_player("p3", age=42, contract_id="c3"),
        "p4": make_player("p4", age=27),
    }
    contracts = {
        "c1": make_contract("c1", "p1", "AAA", years=1, cap_hit=2_000),
        "c2": make_contract("c2", "p2", "AAA", years=3, cap_hit=5_000),
        "c3": make_contract("c3", "p3", "BBB", years=2, cap_hit=3_000),
    }
    teams = {
        "AAA": make_team("AAA", roster=("p1", "p2"), head_coach="coach-AAA",
                         wins=10, losses=7, points_for=400, points_against=350, playoff_seed=4),
        "BBB": make_team("BBB", roster=("p3",), wins=7, losses=10,
                         points_for=300, points_against=360, is_eliminated=True),
    }
    draft_picks = {
        f"pick-{year}-R1-{team_id}": DraftPick(
            id=f"pick-{year}-R1-{team_id}",
            year=year,
            round=1,
            original_team_id=team_id,
            current_team_id=team_id,
        )
        for year in (2025, 2026)
        for team_id in teams
    }

    league = League(
        id="league-test",
        name="Test League",
        team_ids=("AAA", "BBB"),
        calendar=SeasonCalendar(
            current_year=2025,
            current_week=22,
            current_phase=SeasonPhase.OFFSEASON,
            offseason_phase=12,
        ),
        playoff_bracket=PlayoffBracket(
            super_bowl=PlayoffMatchup(home_team_id="AAA", away_team_id="BBB", winner_id="AAA")
        ),
    )

    return GameState(
        user_team_id="AAA",
        user_name="Tester",
        league=league,
        teams=teams,
        players=players,
        coaches={"coach-AAA": Coach(id="coach-AAA", first_name="Head", last_name="Coach",
                                    role="head_coach", development_rating=80)},
        contracts=contracts,
        draft_picks=draft_picks,
        career_stats=CareerStats(
            team_history=(CareerTeamEntry(team_id="AAA", team_name="City AAA AAAs", year_start=2025),)
        ),
        in_season=InSeasonState(weekly_awards=({"week": 1, "award": "Player of the Week"},)),
    )


# ============================================================================
# GENERATED LEAGUE FIXTURES
# ============================================================================

@pytest.fixture(scope="session")
def default_league():
    """Fresh generated 32-team league for 2025. Snapshots are immutable, so it is shared."""
    from player_generation.league_factory import create_default_league
    return create_default_league(year=2025, rng=random.Random(2025))


@pytest.fixture(scope="session")
def finished_season(default_league):
    """The generated league with 2025 records, playoff seeds and a champion."""
    from player_generation.league_factory import with_season_results
    return with_season_results(default_league, random.Random(99))


@pytest.fixture(scope="session")
def transition_report(finished_season):
    """Report of one full transition of the generated league, 2025 → 2026."""
    from season.season_transition_service import SeasonTransitionService
    return SeasonTransitionService(rng=random.Random(7)).run(finished_season)
