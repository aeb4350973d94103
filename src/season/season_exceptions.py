"""
Season Transition Exception Hierarchy

This module defines exceptions for the season transition pipeline: corrupt
input snapshots, collaborators breaking their contracts, and failures of an
individual transition step.

Exception Hierarchy:
    SeasonTransitionException (base)
    ├── DanglingContractReferenceException
    ├── DraftPickCountException
    ├── IncompleteScheduleException
    └── SeasonTransitionFailedException

All exceptions track:
- Season context (year, team ids, step name)
- Operation that failed
- Recovery strategy

Missing-but-plausible data (no champion, no head coach, no user team) is a
normal game state and never raises.
"""

from typing import Any, Dict, Iterable, Optional
from datetime import datetime


class SeasonTransitionException(Exception):
    """
    Base exception for all season transition errors.

    Attributes:
        message: Human-readable error message
        error_code: Unique error code
        season_context: Season information (year, step, offending ids)
        operation: What operation was being performed
        recovery_strategy: How to recover from this error
        original_exception: Wrapped exception if from try/except
    """

    def __init__(
        self,
        message: str,
        error_code: str = "TRANSITION_000",
        season_context: Optional[Dict[str, Any]] = None,
        operation: Optional[str] = None,
        recovery_strategy: str = "abort",
        original_exception: Optional[Exception] = None
    ):
        self.message = message
        self.error_code = error_code
        self.season_context = season_context or {}
        self.operation = operation
        self.recovery_strategy = recovery_strategy
        self.original_exception = original_exception
        self.timestamp = datetime.now().isoformat()

        super().__init__(self._build_error_message())

    def _build_error_message(self) -> str:
        """Build comprehensive error message with all context"""
        lines = [f"[{self.error_code}] {self.message}"]

        if self.operation:
            lines.append(f"Operation: {self.operation}")

        if self.season_context:
            lines.append("Season Context:")
            for key, value in self.season_context.items():
                lines.append(f"  {key}: {value}")

        if self.recovery_strategy:
            lines.append(f"Recovery: {self.recovery_strategy}")

        if self.original_exception:
            lines.append(
                f"\nOriginal Error: {type(self.original_exception).__name__}: {self.original_exception}"
            )

        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization"""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "operation": self.operation,
            "season_context": self.season_context,
            "recovery_strategy": self.recovery_strategy,
            "timestamp": self.timestamp,
            "original_error": str(self.original_exception) if self.original_exception else None
        }


class DanglingContractReferenceException(SeasonTransitionException):
    """
    Raised when a player points at a contract that does not back them.

    Examples:
    - Player.contract_id names a contract missing from the snapshot
    - The named contract belongs to a different player
    """

    def __init__(
        self,
        player_id: str,
        contract_id: str,
        reason: str = "missing",
        **kwargs
    ):
        context = {
            "player_id": player_id,
            "contract_id": contract_id,
            "reason": reason,  # "missing" or "foreign"
            **kwargs.get('season_context', {})
        }

        super().__init__(
            message=f"Player {player_id} references {reason} contract {contract_id}",
            error_code="TRANSITION_001",
            season_context=context,
            operation=kwargs.get('operation', 'validate_contract_references'),
            recovery_strategy="repair_snapshot",
            original_exception=kwargs.get('original_exception')
        )

        self.player_id = player_id
        self.contract_id = contract_id
        self.reason = reason


class DraftPickCountException(SeasonTransitionException):
    """
    Raised when the pick issuer returns anything but rounds × teams picks.
    """

    def __init__(
        self,
        year: int,
        expected: int,
        actual: int,
        **kwargs
    ):
        context = {
            "draft_year": year,
            "expected_picks": expected,
            "actual_picks": actual,
            **kwargs.get('season_context', {})
        }

        super().__init__(
            message=f"Draft pick issuer produced {actual} picks for {year}, expected {expected}",
            error_code="TRANSITION_002",
            season_context=context,
            operation=kwargs.get('operation', 'issue_draft_picks'),
            recovery_strategy="abort",
            original_exception=kwargs.get('original_exception')
        )

        self.year = year
        self.expected = expected
        self.actual = actual


class IncompleteScheduleException(SeasonTransitionException):
    """
    Raised when a generated schedule leaves one or more teams without games.
    """

    def __init__(
        self,
        year: int,
        missing_team_ids: Iterable[str],
        **kwargs
    ):
        missing = sorted(missing_team_ids)
        context = {
            "schedule_year": year,
            "missing_team_ids": missing,
            **kwargs.get('season_context', {})
        }

        super().__init__(
            message=f"Schedule for {year} is missing {len(missing)} team(s): {', '.join(missing)}",
            error_code="TRANSITION_003",
            season_context=context,
            operation=kwargs.get('operation', 'generate_schedule'),
            recovery_strategy="regenerate_schedule",
            original_exception=kwargs.get('original_exception')
        )

        self.year = year
        self.missing_team_ids = missing


class SeasonTransitionFailedException(SeasonTransitionException):
    """
    Raised when a step of the transition fails.

    The caller's input snapshot is untouched; no partial result escapes.
    """

    def __init__(
        self,
        step_name: str,
        from_year: int,
        original_exception: Optional[Exception] = None,
        **kwargs
    ):
        context = {
            "step": step_name,
            "from_year": from_year,
            "to_year": from_year + 1,
            **kwargs.get('season_context', {})
        }

        reason = str(original_exception) if original_exception else "unknown error"
        first_line = reason.splitlines()[0] if reason else type(original_exception).__name__

        super().__init__(
            message=f"Season transition {from_year} → {from_year + 1} failed in {step_name}: {first_line}",
            error_code="TRANSITION_004",
            season_context=context,
            operation="transition_to_new_season",
            recovery_strategy="rollback",
            original_exception=original_exception
        )

        self.step_name = step_name
        self.from_year = from_year
