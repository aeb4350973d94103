"""
Season Transition

Exceptions, constants and configuration for the season transition. The
pipeline itself lives in season.season_transition_service and is imported
from there, since the step packages depend on this package.
"""

from .season_constants import SeasonConstants
from .season_exceptions import (
    SeasonTransitionException,
    DanglingContractReferenceException,
    DraftPickCountException,
    IncompleteScheduleException,
    SeasonTransitionFailedException,
)
from .transition_config import TransitionConfig, RetirementBracket, DEFAULT_CONFIG

__all__ = [
    'SeasonConstants',
    'SeasonTransitionException',
    'DanglingContractReferenceException',
    'DraftPickCountException',
    'IncompleteScheduleException',
    'SeasonTransitionFailedException',
    'TransitionConfig',
    'RetirementBracket',
    'DEFAULT_CONFIG',
]
