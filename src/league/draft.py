"""
Draft Models

Draft picks (ownership tokens for a round/year) and the prospects of a
year's draft class.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

from .player import Player


@dataclass(frozen=True)
class DraftPick:
    """Ownership of one selection in one year's draft"""
    id: str
    year: int
    round: int
    original_team_id: str
    current_team_id: str

    @property
    def is_traded(self) -> bool:
        return self.original_team_id != self.current_team_id


@dataclass(frozen=True)
class Prospect:
    """A not-yet-drafted player plus scouting metadata"""
    player: Player
    college: str
    projected_round: int  # 1-7, 8 = projected undrafted
    draft_year: int

    @property
    def id(self) -> str:
        return self.player.id


@dataclass(frozen=True)
class DraftClass:
    """Every prospect eligible for one year's draft"""
    year: int
    prospects: Tuple[Prospect, ...]

    def by_player_id(self) -> Dict[str, Prospect]:
        return {prospect.player.id: prospect for prospect in self.prospects}

    def __len__(self) -> int:
        return len(self.prospects)
