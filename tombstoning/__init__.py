"""Tombstoning: settings persistence and resume handling for suspendable games.

The package intentionally avoids importing tkinter at import time; the GUI lives
in :mod:`tombstoning.gui` and is only loaded on demand.
"""

from __future__ import annotations

__version__ = "0.3.0"

from .resume import GameView, ResumeMode, compose_game_view, decide_resume_mode
from .settings import SettingFormatError, SettingsManager, SettingValue
from .state import GameContext, GameState

__all__ = [
    "__version__",
    "GameContext",
    "GameState",
    "GameView",
    "ResumeMode",
    "SettingFormatError",
    "SettingValue",
    "SettingsManager",
    "compose_game_view",
    "decide_resume_mode",
]
