"""Application lifecycle wiring (launch, deactivate, activate, close).

The host may terminate a deactivated app at any time. On deactivation the game
state is written to the settings store; on re-activation it is rebuilt from
those settings when the process did not survive.
"""

from __future__ import annotations

import enum
import logging

from .highscores import ScoreQualifier
from .state import GameContext, GameState

log = logging.getLogger(__name__)

SCORE_SETTING = "GameState.Score"
ACTIVE_SETTING = "GameState.IsGameActive"


class GamePage(enum.Enum):
    MENU = "menu"
    GAME = "game"
    SETTINGS = "settings"
    HIGH_SCORE = "high_score"
    HIGH_SCORE_NAME = "high_score_name"


class GameLifecycle:
    def __init__(self, context: GameContext) -> None:
        self.context = context

    # Host events -----------------------------------------------------------
    def on_launching(self) -> None:
        """Fresh start: persisted game progress is ignored."""
        self.context.replace_game_state(GameState())
        log.info("Launching with a fresh game state")

    def on_deactivated(self) -> None:
        self.save_game_state()

    def on_activated(self, process_preserved: bool) -> GameState:
        """Return from deactivation.

        If the process survived, the in-memory state is still valid. Otherwise
        it is rebuilt from the persisted settings.
        """
        if process_preserved and self.context.has_game_state:
            log.info("Activated; in-memory game state preserved")
            return self.context.game_state
        state = self.load_game_state()
        self.context.replace_game_state(state)
        log.info("Activated after termination; restored score=%d active=%s", state.score, state.is_game_active)
        return state

    def on_closing(self) -> None:
        self.save_game_state()

    # Persistence -------------------------------------------------------------
    def save_game_state(self) -> None:
        state = self.context.game_state
        settings = self.context.settings
        settings.set_value(SCORE_SETTING, state.score)
        settings.set_value(ACTIVE_SETTING, state.is_game_active)
        log.info("Saved game state: score=%d active=%s", state.score, state.is_game_active)

    def load_game_state(self) -> GameState:
        settings = self.context.settings
        defaults = GameState()
        return GameState(
            score=settings.get_int(SCORE_SETTING, defaults.score),
            is_game_active=settings.get_bool(ACTIVE_SETTING, defaults.is_game_active),
        )

    # Game flow -------------------------------------------------------------
    def start_new_game(self) -> GameState:
        state = GameState(is_game_active=True)
        self.context.replace_game_state(state)
        return state

    def resume_available(self) -> bool:
        return self.context.has_game_state and self.context.game_state.is_game_active

    def end_game(self, qualifier: ScoreQualifier) -> GamePage:
        """Finish the current game and pick the page to show next."""
        state = self.context.game_state
        state.is_game_active = False
        if qualifier.score_qualifies(state.score):
            target = GamePage.HIGH_SCORE_NAME
        else:
            target = GamePage.HIGH_SCORE
        log.info("Game ended with score=%d -> %s", state.score, target.value)
        return target


__all__ = ["ACTIVE_SETTING", "GameLifecycle", "GamePage", "SCORE_SETTING"]
