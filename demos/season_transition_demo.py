#!/usr/bin/env python3
"""
Season Transition Demo

Builds a fresh 32-team league, fills in random season results and runs it
through one or more season transitions, printing what each one did.

Usage:
    # One transition with a random seed
    python demos/season_transition_demo.py

    # Five reproducible seasons
    python demos/season_transition_demo.py --seasons 5 --seed 42

    # Load transition settings from JSON
    python demos/season_transition_demo.py --config transition.json
"""

import sys
import argparse
import random
from pathlib import Path

# Add project paths
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from logging_config import setup_logging, setup_transition_logging, log_exception, get_logger
from player_generation.league_factory import create_default_league, with_season_results
from season.season_exceptions import SeasonTransitionException
from season.season_transition_service import SeasonTransitionService
from season.transition_config import TransitionConfig


def print_report(report) -> None:
    """Print one transition's summary."""
    state = report.state
    summary = state.league.season_history[-1]
    career = state.career_stats

    print(f"Season {report.from_year} → {report.to_year}")
    print(f"  Champion:          {summary.champion_team_id or 'none'}")
    print(f"  First pick:        {summary.draft_order[0]}")
    print(f"  Retired players:   {len(report.retired_player_ids)}")
    print(f"  Contracts expired: {len(report.expired_contract_ids)} "
          f"(removed {len(report.removed_contract_ids)})")
    print(f"  Prospects:         {report.prospects_generated}")
    print(f"  Picks:             {report.picks_issued} issued, {report.picks_purged} purged")
    print(f"  Games scheduled:   {report.games_scheduled} over {state.league.schedule.total_weeks} weeks")
    print(f"  Career:            {career.total_wins}-{career.total_losses}, "
          f"{career.playoff_appearances} playoff trips, {career.championships} titles")
    print()


def main():
    """Main entry point for the season transition demo."""
    parser = argparse.ArgumentParser(
        description="Run a generated league through season transitions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python demos/season_transition_demo.py --seasons 3 --seed 7
    python demos/season_transition_demo.py --year 2030 --team KC
        """
    )
    parser.add_argument('--seasons', type=int, default=1, help='Number of transitions to run (default: 1)')
    parser.add_argument('--seed', type=int, help='Random seed for a reproducible run')
    parser.add_argument('--year', type=int, default=2025, help='First season year (default: 2025)')
    parser.add_argument('--team', default='DET', help='User team abbreviation (default: DET)')
    parser.add_argument('--config', help='Path to a TransitionConfig JSON file')
    parser.add_argument(
        '--log-level',
        default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Console log level (default: WARNING)'
    )
    parser.add_argument(
        '--transition-log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Level for the transition packages only, e.g. WARNING to quiet per-step output'
    )
    args = parser.parse_args()

    setup_logging(level=args.log_level, enable_file=False, format_style="simple")
    if args.transition_log_level:
        setup_transition_logging(args.transition_log_level)
    logger = get_logger("season_transition_demo")

    config = TransitionConfig.from_json(args.config) if args.config else TransitionConfig()
    is_valid, errors = config.validate()
    if not is_valid:
        for error in errors:
            print(f"❌ Config error: {error}")
        return 1

    rng = random.Random(args.seed)

    print("=" * 70)
    print("SEASON TRANSITION DEMO")
    print("=" * 70)
    print()

    state = create_default_league(year=args.year, rng=rng, user_team_id=args.team)
    print(f"Created league: {len(state.teams)} teams, {len(state.players)} players, "
          f"{len(state.contracts)} contracts")
    print()

    service = SeasonTransitionService(rng=rng, config=config)
    for _ in range(args.seasons):
        state = with_season_results(state, rng)
        try:
            report = service.run(state)
        except SeasonTransitionException as e:
            log_exception(logger, e)
            print(f"❌ Transition failed: {e.message}")
            return 1
        print_report(report)
        state = report.state

    print(f"✅ League is now at {state.current_year}, week {state.league.calendar.current_week}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
