"""
Offseason Phase Enumeration

Defines the twelve sub-phases of the offseason, from the end of the season
through the start of the next one. The league calendar stores the phase
number (1-12) while the offseason is running and None otherwise.
"""

from enum import Enum
from typing import Optional


class OffseasonPhase(Enum):
    """
    Offseason sub-phases in the order the league moves through them.

    Values are the phase numbers kept on the league calendar.
    """

    SEASON_END = 1
    """Review season performance, grades, and awards"""

    COACHING_DECISIONS = 2
    """Evaluate and make coaching staff changes"""

    CONTRACT_MANAGEMENT = 3
    """Manage roster through cuts, restructures, and tags"""

    COMBINE = 4
    """Scout prospects at the combine and pro days"""

    FREE_AGENCY = 5
    """Sign free agents to fill roster needs"""

    DRAFT = 6
    """
    The draft.

    - 7 rounds, one pick per team per round
    - Order is worst record first
    """

    UDFA = 7
    """Sign undrafted free agents to complete the roster"""

    OTAS = 8
    """Organized team activities"""

    TRAINING_CAMP = 9
    """Position battles and development reveals"""

    PRESEASON = 10
    """Exhibition games and final evaluations"""

    FINAL_CUTS = 11
    """Cut rosters down to 53 players"""

    SEASON_START = 12
    """
    Offseason complete, ready for the regular season.

    The season transition runs after this phase and clears the
    calendar's offseason phase.
    """

    def __str__(self) -> str:
        """Return human-readable phase name."""
        if self is OffseasonPhase.UDFA:
            return "UDFA Signing"
        if self is OffseasonPhase.OTAS:
            return "OTAs"
        return self.name.replace('_', ' ').title()

    @property
    def is_last(self) -> bool:
        return self is OffseasonPhase.SEASON_START

    def next_phase(self) -> Optional['OffseasonPhase']:
        """Following phase, or None after SEASON_START."""
        if self.is_last:
            return None
        return OffseasonPhase(self.value + 1)

    @classmethod
    def from_number(cls, number: Optional[int]) -> Optional['OffseasonPhase']:
        """
        Look up a phase from the number stored on the calendar.

        Args:
            number: 1-12, or None outside the offseason

        Returns:
            The phase, or None when number is None

        Raises:
            ValueError: If number is outside 1-12

        Example:
            >>> OffseasonPhase.from_number(6)
            <OffseasonPhase.DRAFT: 6>
        """
        if number is None:
            return None
        return cls(number)
