"""
Configuration for the Season Transition

Centralized configuration for the tunable parts of the transition: salary
cap growth, draft size, retirement odds, morale bounds and input
validation.
"""

from dataclasses import dataclass, field
from typing import List, Tuple
import json
import math

from .season_constants import SeasonConstants


@dataclass
class RetirementBracket:
    """Players aged min_age or older (up to the next bracket) retire with this probability"""
    min_age: int
    probability: float


def _default_retirement_brackets() -> List[RetirementBracket]:
    return [
        RetirementBracket(min_age=34, probability=0.10),
        RetirementBracket(min_age=36, probability=0.25),
        RetirementBracket(min_age=38, probability=0.50),
        RetirementBracket(min_age=40, probability=0.90),
    ]


@dataclass
class TransitionConfig:
    """Complete configuration for a season transition"""

    # Salary cap (thousands of dollars)
    base_salary_cap: int = SeasonConstants.DEFAULT_SALARY_CAP
    cap_reference_year: int = SeasonConstants.CAP_REFERENCE_YEAR
    cap_growth_rate: float = SeasonConstants.ANNUAL_CAP_GROWTH

    # Draft
    draft_rounds: int = SeasonConstants.DRAFT_ROUNDS
    pick_kind: str = SeasonConstants.ORDINARY_PICK_KIND
    draft_class_min_size: int = SeasonConstants.DRAFT_CLASS_MIN_PROSPECTS
    draft_class_max_size: int = SeasonConstants.DRAFT_CLASS_MAX_PROSPECTS

    # Player state
    morale_floor: int = SeasonConstants.MORALE_FLOOR
    morale_ceiling: int = SeasonConstants.MORALE_CEILING
    retirement_brackets: List[RetirementBracket] = field(default_factory=_default_retirement_brackets)

    # Schedule
    regular_season_weeks: int = SeasonConstants.REGULAR_SEASON_WEEKS

    # Validation settings
    validate_input: bool = True

    def retirement_probability(self, age: int) -> float:
        """Probability that a player of the given age retires this offseason."""
        probability = 0.0
        for bracket in sorted(self.retirement_brackets, key=lambda b: b.min_age):
            if age >= bracket.min_age:
                probability = bracket.probability
        return probability

    def salary_cap_for(self, year: int) -> int:
        """
        Salary cap for a season.

        Grows linearly from the reference year and is rounded to a whole
        thousand.

        Example:
            >>> TransitionConfig().salary_cap_for(2026)
            262650
        """
        return math.floor(self.base_salary_cap * (1 + self.cap_growth_rate * (year - self.cap_reference_year)) + 0.5)

    def validate(self) -> Tuple[bool, List[str]]:
        """Validate entire configuration"""
        errors = []

        if self.base_salary_cap <= 0:
            errors.append(f"Salary cap must be positive, got {self.base_salary_cap}")

        if self.cap_growth_rate < 0:
            errors.append(f"Cap growth rate cannot be negative, got {self.cap_growth_rate}")

        if self.draft_rounds < 1:
            errors.append(f"Need at least one draft round, got {self.draft_rounds}")

        if not self.pick_kind:
            errors.append("Pick kind cannot be empty")

        if self.draft_class_min_size < 1 or self.draft_class_min_size > self.draft_class_max_size:
            errors.append(
                f"Invalid draft class size bounds: {self.draft_class_min_size}-{self.draft_class_max_size}"
            )

        if not 0 <= self.morale_floor <= self.morale_ceiling:
            errors.append(f"Invalid morale bounds: [{self.morale_floor}, {self.morale_ceiling}]")

        for bracket in self.retirement_brackets:
            if not 0.0 <= bracket.probability <= 1.0:
                errors.append(
                    f"Retirement probability for age {bracket.min_age}+ out of range: {bracket.probability}"
                )

        if self.regular_season_weeks < SeasonConstants.REGULAR_SEASON_GAMES_PER_TEAM:
            errors.append(
                f"{self.regular_season_weeks} weeks cannot fit "
                f"{SeasonConstants.REGULAR_SEASON_GAMES_PER_TEAM} games per team"
            )

        return len(errors) == 0, errors

    def to_json(self, filepath: str):
        """Save configuration to JSON file"""
        config_dict = {
            'salary_cap': {
                'base': self.base_salary_cap,
                'reference_year': self.cap_reference_year,
                'growth_rate': self.cap_growth_rate
            },
            'draft': {
                'rounds': self.draft_rounds,
                'pick_kind': self.pick_kind,
                'class_min_size': self.draft_class_min_size,
                'class_max_size': self.draft_class_max_size
            },
            'morale': {
                'floor': self.morale_floor,
                'ceiling': self.morale_ceiling
            },
            'retirement_brackets': [
                {'min_age': bracket.min_age, 'probability': bracket.probability}
                for bracket in self.retirement_brackets
            ],
            'regular_season_weeks': self.regular_season_weeks,
            'validate_input': self.validate_input
        }

        with open(filepath, 'w') as f:
            json.dump(config_dict, f, indent=2)

    @classmethod
    def from_json(cls, filepath: str) -> 'TransitionConfig':
        """Load configuration from JSON file. Missing keys keep their defaults."""
        with open(filepath, 'r') as f:
            data = json.load(f)

        config = cls()

        if 'salary_cap' in data:
            cap_data = data['salary_cap']
            config.base_salary_cap = cap_data.get('base', config.base_salary_cap)
            config.cap_reference_year = cap_data.get('reference_year', config.cap_reference_year)
            config.cap_growth_rate = cap_data.get('growth_rate', config.cap_growth_rate)

        if 'draft' in data:
            draft_data = data['draft']
            config.draft_rounds = draft_data.get('rounds', config.draft_rounds)
            config.pick_kind = draft_data.get('pick_kind', config.pick_kind)
            config.draft_class_min_size = draft_data.get('class_min_size', config.draft_class_min_size)
            config.draft_class_max_size = draft_data.get('class_max_size', config.draft_class_max_size)

        if 'morale' in data:
            config.morale_floor = data['morale'].get('floor', config.morale_floor)
            config.morale_ceiling = data['morale'].get('ceiling', config.morale_ceiling)

        if 'retirement_brackets' in data:
            config.retirement_brackets = [
                RetirementBracket(min_age=entry['min_age'], probability=entry['probability'])
                for entry in data['retirement_brackets']
            ]

        config.regular_season_weeks = data.get('regular_season_weeks', config.regular_season_weeks)
        config.validate_input = data.get('validate_input', config.validate_input)

        return config


# Global default configuration
DEFAULT_CONFIG = TransitionConfig()
