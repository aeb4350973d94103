"""
Progression Model

Offseason skill development driven by the head coach. A coach's
development rating sets the size and direction of the change, the player's
age scales it, and the change is spread over the key skills of the
player's position group.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import Dict, Tuple
import math

from league.player import SKILL_NAMES_BY_GROUP, Player, SkillValue, skill_group_for
from league.staff import Coach


@dataclass(frozen=True)
class SkillChangeResult:
    """Skill deltas computed for one player in one offseason"""
    player_id: str
    skill_changes: Dict[str, int] = field(default_factory=dict)
    total_change: int = 0
    coach_influence: str = "minimal"  # "significant", "moderate", "minimal", "negative"

    @property
    def is_empty(self) -> bool:
        return not self.skill_changes


class ProgressionModel(ABC):
    """Computes and applies offseason skill changes."""

    @abstractmethod
    def progress(self, player: Player, coach: Coach) -> SkillChangeResult:
        """Compute the skill changes a player earns under a coach."""

    @abstractmethod
    def apply_changes(self, player: Player, result: SkillChangeResult) -> Player:
        """Return the player with the changes applied."""


def age_modifier(age: int) -> float:
    """
    Scale applied to development by age.

    Young players develop faster, veterans slower.
    """
    if age <= 23:
        return 1.3
    if age <= 25:
        return 1.15
    if age <= 27:
        return 1.0
    if age <= 29:
        return 0.85
    if age <= 31:
        return 0.6
    if age <= 33:
        return 0.3
    return 0.1


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return math.floor(value + 0.5)


class CoachProgressionModel(ProgressionModel):
    """
    Default progression model.

    A coach rated 50 is neutral; every 10 rating points above (below)
    that adds (removes) one point of development before the age modifier.
    """

    NEUTRAL_RATING = 50
    KEY_SKILLS_PER_POSITION = 3

    def progress(self, player: Player, coach: Coach) -> SkillChangeResult:
        impact = (coach.development_rating - self.NEUTRAL_RATING) / 10
        adjusted = round_half_up(impact * age_modifier(player.age))

        impact_areas = self._impact_areas(player)
        skill_changes: Dict[str, int] = {}
        if impact_areas and adjusted != 0:
            change_per_skill = max(1, round_half_up(abs(adjusted) / len(impact_areas)))
            sign = 1 if adjusted >= 0 else -1
            skill_changes = {skill: change_per_skill * sign for skill in impact_areas}

        return SkillChangeResult(
            player_id=player.id,
            skill_changes=skill_changes,
            total_change=adjusted,
            coach_influence=self._influence(adjusted),
        )

    def apply_changes(self, player: Player, result: SkillChangeResult) -> Player:
        """
        Apply skill deltas, clamping to 1-99.

        A changed skill's perceived range narrows (by 2 for changes larger
        than 2, else by 1) but always still contains the true value.
        """
        if result.is_empty:
            return player

        skills: Dict[str, SkillValue] = {}
        for skill_name, skill in player.skills.items():
            change = result.skill_changes.get(skill_name, 0)
            if change == 0:
                skills[skill_name] = skill
                continue

            true_value = max(1, min(99, skill.true_value + change))
            shrink = 2 if abs(change) > 2 else 1
            skills[skill_name] = SkillValue(
                true_value=true_value,
                perceived_min=max(1, min(skill.perceived_min + shrink, true_value)),
                perceived_max=min(99, max(skill.perceived_max - shrink, true_value)),
            )

        return replace(player, skills=skills)

    def _impact_areas(self, player: Player) -> Tuple[str, ...]:
        key_skills = SKILL_NAMES_BY_GROUP[skill_group_for(player.position)][:self.KEY_SKILLS_PER_POSITION]
        return tuple(skill for skill in key_skills if skill in player.skills)

    @staticmethod
    def _influence(adjusted: int) -> str:
        if adjusted >= 5:
            return "significant"
        if adjusted >= 2:
            return "moderate"
        if adjusted >= 0:
            return "minimal"
        return "negative"
