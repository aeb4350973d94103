"""
Season Constants

Centralized constants for the NFL season transition to eliminate magic numbers.
League shape, draft, roster and cap values are defined here.

Usage:
    from season.season_constants import SeasonConstants

    expected_picks = SeasonConstants.DRAFT_ROUNDS * len(team_ids)
"""


class SeasonConstants:
    """
    NFL league constants used by the season transition pipeline.

    TransitionConfig takes its defaults from here.
    """

    # ==================== Game Counts ====================

    REGULAR_SEASON_WEEKS = 18
    """Number of regular season weeks (17 games plus one bye)"""

    REGULAR_SEASON_GAMES_PER_TEAM = 17
    """Games per team in regular season"""

    # ==================== Draft ====================

    DRAFT_ROUNDS = 7
    """Number of NFL draft rounds"""

    DRAFT_CLASS_MIN_PROSPECTS = 250
    DRAFT_CLASS_MAX_PROSPECTS = 300

    ORDINARY_PICK_KIND = "pick"
    """Id prefix for ordinary (non-traded, non-compensatory) picks"""

    # ==================== Roster Limits ====================

    ACTIVE_ROSTER_SIZE = 53
    """Active roster size during regular season"""

    # ==================== Salary Cap ====================

    DEFAULT_SALARY_CAP = 255_000
    """League salary cap in thousands ($255 million)"""

    CAP_REFERENCE_YEAR = 2025
    """Base year the default salary cap applies to"""

    ANNUAL_CAP_GROWTH = 0.03
    """Linear cap growth per season after the reference year"""

    # ==================== Player State ====================

    MORALE_FLOOR = 25
    MORALE_CEILING = 100
