"""
Offseason Module

The offseason half of the season transition:
- Retirement of aged-out players
- Aging and coach-driven player development
- Next year's draft class and draft picks

Main Components:
- OffseasonPhase: Enum defining the twelve offseason sub-phases
- RetirementResolver: Age-based retirement with order-independent draws
- AgingStep / DevelopmentStep: Player aging and progression
- CoachProgressionModel: Default coach-driven progression model
- StandardDraftClassGenerator / DraftClassStep: Prospect pool generation
- StandardDraftPickIssuer / DraftPickStep: Pick purge and issue
"""

from offseason.offseason_phases import OffseasonPhase
from offseason.retirement_resolver import RetirementResolver
from offseason.player_development import AgingStep, DevelopmentStep
from offseason.progression_model import CoachProgressionModel, ProgressionModel, SkillChangeResult
from offseason.draft_class_generator import DraftClassGenerator, DraftClassStep, StandardDraftClassGenerator
from offseason.draft_pick_issuer import DraftPickIssuer, DraftPickStep, StandardDraftPickIssuer

__all__ = [
    'OffseasonPhase',
    'RetirementResolver',
    'AgingStep',
    'DevelopmentStep',
    'CoachProgressionModel',
    'ProgressionModel',
    'SkillChangeResult',
    'DraftClassGenerator',
    'DraftClassStep',
    'StandardDraftClassGenerator',
    'DraftPickIssuer',
    'DraftPickStep',
    'StandardDraftPickIssuer',
]
