"""
Player Generator

Generates players with NFL-like position mix, talent tiers, and
position-keyed skills. Every skill carries a true value plus the perceived
range scouts see, which is wider for inexperienced players.

All randomness comes from the ``random.Random`` handed to the generator.
"""

from dataclasses import dataclass
from typing import Dict, Optional
import random

from league.player import (
    SKILL_NAMES_BY_GROUP,
    InjuryStatus,
    Player,
    Position,
    SkillValue,
    skill_group_for,
)


# Players per position on a 53-man roster
ROSTER_COMPOSITION: Dict[Position, int] = {
    Position.QB: 3,
    Position.RB: 4,
    Position.WR: 6,
    Position.TE: 3,
    Position.LT: 2,
    Position.LG: 2,
    Position.C: 2,
    Position.RG: 2,
    Position.RT: 2,
    Position.DE: 4,
    Position.DT: 4,
    Position.OLB: 4,
    Position.ILB: 3,
    Position.CB: 6,
    Position.FS: 2,
    Position.SS: 2,
    Position.K: 1,
    Position.P: 1,
}

# (tier, share of players, mean skill rating)
TIER_DISTRIBUTION = (
    ("elite", 0.05, 80),
    ("starter", 0.20, 68),
    ("backup", 0.35, 57),
    ("fringe", 0.40, 47),
)


@dataclass(frozen=True)
class PlayerConstraints:
    """Optional restrictions on a generated player"""
    position: Optional[Position] = None
    min_age: int = 22
    max_age: int = 32
    tier: Optional[str] = None
    experience: Optional[int] = None


class PlayerGenerator:
    """Generates realistic players from an injected random source"""

    # Name pools for generating realistic player names
    FIRST_NAMES = [
        "Aaron", "Adrian", "Antonio", "Brandon", "Calvin", "Darius", "DeAndre",
        "Derek", "Devon", "Ezekiel", "Frank", "Garrett", "Isaiah", "Jalen",
        "Jamal", "Jordan", "Justin", "Keion", "Lamar", "Marcus", "Malik",
        "Michael", "Nick", "Patrick", "Quentin", "Robert", "Sam", "Terrell",
        "Tyler", "Victor", "Zach", "Alvin", "Carlos", "Damien", "Eddie", "Felix"
    ]

    LAST_NAMES = [
        "Adams", "Allen", "Anderson", "Brown", "Davis", "Garcia", "Harris",
        "Jackson", "Johnson", "Jones", "Lewis", "Martin", "Miller", "Moore",
        "Robinson", "Smith", "Taylor", "Thomas", "Thompson", "Washington",
        "White", "Williams", "Wilson", "Young", "Bell", "Cooper", "Green",
        "Hill", "King", "Lee", "Parker", "Reed", "Scott", "Turner", "Walker"
    ]

    SKILL_VARIANCE = 8

    def __init__(self, rng: random.Random, id_prefix: str = "player"):
        """
        Args:
            rng: Random source for every roll
            id_prefix: Prefix of generated ids; ids are unique per generator
        """
        self.rng = rng
        self.id_prefix = id_prefix
        self._counter = 0

    def generate(self, constraints: Optional[PlayerConstraints] = None) -> Player:
        """
        Generate one player with a fresh id.

        Args:
            constraints: Optional position/age/tier restrictions

        Returns:
            New Player without a contract
        """
        constraints = constraints or PlayerConstraints()

        position = constraints.position or self.roll_position()
        tier = constraints.tier or self.roll_tier()
        age = self.rng.randint(constraints.min_age, constraints.max_age)
        if constraints.experience is not None:
            experience = constraints.experience
        else:
            experience = max(0, age - 22 - self.rng.randint(0, 2))

        return Player(
            id=self._next_id(),
            first_name=self.rng.choice(self.FIRST_NAMES),
            last_name=self.rng.choice(self.LAST_NAMES),
            position=position,
            age=age,
            experience=experience,
            fatigue=0,
            morale=self.rng.randint(50, 90),
            injury_status=InjuryStatus.healthy(),
            skills=self._generate_skills(position, tier, experience),
        )

    def roll_position(self) -> Position:
        """Pick a position weighted by roster composition"""
        positions = list(ROSTER_COMPOSITION)
        weights = [ROSTER_COMPOSITION[position] for position in positions]
        return self.rng.choices(positions, weights=weights, k=1)[0]

    def roll_tier(self) -> str:
        roll = self.rng.random()
        cumulative = 0.0
        for tier, share, _ in TIER_DISTRIBUTION:
            cumulative += share
            if roll < cumulative:
                return tier
        return TIER_DISTRIBUTION[-1][0]

    def _generate_skills(self, position: Position, tier: str, experience: int) -> Dict[str, SkillValue]:
        base = next(mean for name, _, mean in TIER_DISTRIBUTION if name == tier)
        # Scouts see veterans more clearly
        spread = max(2, 10 - experience)

        skills = {}
        for skill_name in SKILL_NAMES_BY_GROUP[skill_group_for(position)]:
            true_value = self._clamp(round(self.rng.gauss(base, self.SKILL_VARIANCE)))
            skills[skill_name] = SkillValue(
                true_value=true_value,
                perceived_min=self._clamp(true_value - self.rng.randint(1, spread)),
                perceived_max=self._clamp(true_value + self.rng.randint(1, spread)),
            )
        return skills

    def _next_id(self) -> str:
        self._counter += 1
        return f"{self.id_prefix}-{self._counter:05d}"

    @staticmethod
    def _clamp(value: int) -> int:
        return max(1, min(99, value))
