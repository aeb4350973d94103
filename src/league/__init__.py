"""
League Model

Immutable entities making up a league snapshot: teams, players, coaches,
contracts, draft assets, schedule, calendar and career statistics.
"""

from .contracts import ContractStatus, ContractYear, PlayerContract
from .draft import DraftClass, DraftPick, Prospect
from .league_state import (
    CareerSeasonResult,
    CareerStats,
    CareerTeamEntry,
    GameState,
    InSeasonState,
    League,
    LeagueEvent,
    PlayoffBracket,
    PlayoffMatchup,
    SeasonCalendar,
    SeasonPhase,
    SeasonSummary,
    empty_standings,
)
from .player import InjuryStatus, Player, Position, SkillValue
from .schedule import ScheduledGame, SeasonSchedule
from .staff import Coach, StaffHierarchy
from .state_step import GameStateStep
from .team import AllTimeRecord, CapPenalty, Team, TeamFinances, TeamRecord

__all__ = [
    'AllTimeRecord',
    'CapPenalty',
    'CareerSeasonResult',
    'CareerStats',
    'CareerTeamEntry',
    'Coach',
    'ContractStatus',
    'ContractYear',
    'DraftClass',
    'DraftPick',
    'GameState',
    'GameStateStep',
    'InSeasonState',
    'InjuryStatus',
    'League',
    'LeagueEvent',
    'Player',
    'PlayerContract',
    'PlayoffBracket',
    'PlayoffMatchup',
    'Position',
    'Prospect',
    'ScheduledGame',
    'SeasonCalendar',
    'SeasonPhase',
    'SeasonSchedule',
    'SeasonSummary',
    'SkillValue',
    'StaffHierarchy',
    'Team',
    'TeamFinances',
    'TeamRecord',
    'empty_standings',
]
