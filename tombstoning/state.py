"""Game state and the context object that owns it."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .settings import SettingsManager

log = logging.getLogger(__name__)


@dataclass
class GameState:
    """Mutable state of the game currently being played."""

    score: int = 0
    is_game_active: bool = False

    def add_points(self, points: int) -> int:
        self.score += int(points)
        return self.score


class GameContext:
    """Owns the settings manager and the single game state of a running app.

    The game state is created lazily on first access and the same object is
    returned afterwards. Pass the context to whatever needs it instead of
    reaching for module globals.
    """

    def __init__(self, settings: Optional[SettingsManager] = None) -> None:
        self.settings = settings if settings is not None else SettingsManager()
        self._game_state: Optional[GameState] = None

    def get_or_create(self) -> GameState:
        if self._game_state is None:
            self._game_state = GameState()
            log.debug("Created new game state")
        return self._game_state

    @property
    def game_state(self) -> GameState:
        return self.get_or_create()

    def replace_game_state(self, new_state: GameState) -> None:
        """Swap in a different state object (cold start, restore, tests)."""
        self._game_state = new_state

    @property
    def has_game_state(self) -> bool:
        return self._game_state is not None


__all__ = ["GameContext", "GameState"]
