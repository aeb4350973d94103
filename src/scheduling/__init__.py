"""
Scheduling Module

Regular season schedule generation for the coming year.

Main Components:
- ScheduleConfig: Season shape and week distribution settings
- NFLScheduleGenerator: Five-component NFL rotation formula
- ScheduleStep: Season transition step that installs the new schedule
"""

from .config import ScheduleConfig, DEFAULT_CONFIG
from .schedule_generator import NFLScheduleGenerator, ScheduleGenerator, validate_schedule
from .schedule_step import ScheduleStep

__all__ = [
    'ScheduleConfig',
    'DEFAULT_CONFIG',
    'NFLScheduleGenerator',
    'ScheduleGenerator',
    'validate_schedule',
    'ScheduleStep',
]
