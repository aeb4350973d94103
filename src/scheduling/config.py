"""
Configuration for NFL Schedule Generator

Centralized configuration for regular season schedule generation: season
shape, bye week window, week distribution search, and validation settings.
"""

from dataclasses import dataclass
from typing import List, Tuple
import json


@dataclass
class ScheduleConfig:
    """Complete configuration for NFL schedule generation"""

    # Basic parameters
    total_weeks: int = 18
    games_per_team: int = 17
    teams_per_division: int = 4

    # Bye weeks (one per team, inside this window)
    bye_window_start: int = 5
    bye_window_end: int = 14

    # Week distribution search
    shuffle_attempts: int = 8          # Seeded shuffles tried after the fixed orderings
    allow_extra_weeks: bool = True     # Spill into week 19+ rather than drop games

    # Validation settings
    strict_validation: bool = True

    @property
    def expected_total_games(self) -> int:
        """Total regular season games for a 32-team league"""
        return 32 * self.games_per_team // 2

    def validate(self) -> Tuple[bool, List[str]]:
        """Validate entire configuration"""
        errors = []

        if self.games_per_team != 17:
            errors.append(f"NFL teams play 17 games, got {self.games_per_team}")

        if self.total_weeks < self.games_per_team:
            errors.append(
                f"{self.total_weeks} weeks cannot hold {self.games_per_team} games per team"
            )

        if self.teams_per_division != 4:
            errors.append(f"Rotation formula needs 4 teams per division, got {self.teams_per_division}")

        if not 1 <= self.bye_window_start <= self.bye_window_end:
            errors.append(
                f"Invalid bye window {self.bye_window_start}-{self.bye_window_end}"
            )
        elif self.total_weeks > self.games_per_team and self.bye_window_end > self.games_per_team:
            errors.append(
                f"Bye window must end by week {self.games_per_team}, got {self.bye_window_end}"
            )

        if self.shuffle_attempts < 0:
            errors.append("Shuffle attempts cannot be negative")

        return len(errors) == 0, errors

    def to_json(self, filepath: str):
        """Save configuration to JSON file"""
        config_dict = {
            'total_weeks': self.total_weeks,
            'games_per_team': self.games_per_team,
            'teams_per_division': self.teams_per_division,
            'bye_window': [self.bye_window_start, self.bye_window_end],
            'distribution': {
                'shuffle_attempts': self.shuffle_attempts,
                'allow_extra_weeks': self.allow_extra_weeks
            },
            'strict_validation': self.strict_validation
        }

        with open(filepath, 'w') as f:
            json.dump(config_dict, f, indent=2)

    @classmethod
    def from_json(cls, filepath: str) -> 'ScheduleConfig':
        """Load configuration from JSON file"""
        with open(filepath, 'r') as f:
            data = json.load(f)

        config = cls(
            total_weeks=data.get('total_weeks', 18),
            games_per_team=data.get('games_per_team', 17),
            teams_per_division=data.get('teams_per_division', 4),
            strict_validation=data.get('strict_validation', True)
        )

        if 'bye_window' in data:
            config.bye_window_start, config.bye_window_end = data['bye_window']

        if 'distribution' in data:
            distribution = data['distribution']
            config.shuffle_attempts = distribution.get('shuffle_attempts', 8)
            config.allow_extra_weeks = distribution.get('allow_extra_weeks', True)

        return config


# Global default configuration
DEFAULT_CONFIG = ScheduleConfig()
