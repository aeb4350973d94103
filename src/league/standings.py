"""
Standings Helpers

Shared ordering rules used by the history recorder (draft order) and the
schedule step (previous-year division standings).

Both orderings are fully determined by their sort keys plus team id, so
the iteration order of the teams dict never changes a result.
"""

from typing import Dict, Iterable, List, Tuple

from .league_state import CONFERENCES, DIVISIONS, Standings, empty_standings
from .team import Team


def draft_order(teams: Iterable[Team]) -> Tuple[str, ...]:
    """
    Order teams worst to best for the draft.

    Ascending win percentage, ties broken by ascending point differential.

    Args:
        teams: Every team in the league

    Returns:
        Team ids, first pick first
    """
    ordered = sorted(
        teams,
        key=lambda team: (
            team.current_record.win_percentage,
            team.current_record.point_differential,
            team.id,
        ),
    )
    return tuple(team.id for team in ordered)


def division_finish_order(teams: Iterable[Team]) -> List[Team]:
    """Sort one division best to worst (win pct, then point differential)."""
    return sorted(
        teams,
        key=lambda team: (
            -team.current_record.win_percentage,
            -team.current_record.point_differential,
            team.id,
        ),
    )


def previous_year_standings(teams: Dict[str, Team]) -> Standings:
    """
    Build the finishing order of every division from current records.

    Args:
        teams: Teams keyed by id

    Returns:
        conference -> division -> team ids, division winner first
    """
    grouped: Dict[str, Dict[str, List[Team]]] = {
        conference: {division: [] for division in DIVISIONS} for conference in CONFERENCES
    }
    for team in teams.values():
        grouped.setdefault(team.conference, {}).setdefault(team.division, []).append(team)

    standings = empty_standings()
    for conference, divisions in grouped.items():
        standings.setdefault(conference, {})
        for division, members in divisions.items():
            standings[conference][division] = tuple(
                team.id for team in division_finish_order(members)
            )
    return standings
