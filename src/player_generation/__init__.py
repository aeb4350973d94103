"""
Player Generation

Random generation of players and of a complete starting league.
"""

from .player_generator import PlayerConstraints, PlayerGenerator, ROSTER_COMPOSITION
from .league_factory import create_default_league, with_season_results

__all__ = [
    'PlayerConstraints',
    'PlayerGenerator',
    'ROSTER_COMPOSITION',
    'create_default_league',
    'with_season_results',
]
