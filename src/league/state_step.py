"""
Game State Step

Base class for the ordered steps that turn one GameState snapshot into the
next. A step never mutates the snapshot it receives.
"""

from abc import ABC, abstractmethod
import logging
from typing import Optional

from .league_state import GameState


class GameStateStep(ABC):
    """
    One GameState -> GameState transformation.

    Subclasses set ``name`` and implement ``apply``.
    """

    name: str = "step"

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(f"{type(self).__module__}.{type(self).__name__}")

    @abstractmethod
    def apply(self, state: GameState) -> GameState:
        """
        Produce the next snapshot.

        Args:
            state: Snapshot to read; left untouched

        Returns:
            New snapshot, or ``state`` itself when nothing changed
        """

    def __call__(self, state: GameState) -> GameState:
        return self.apply(state)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
