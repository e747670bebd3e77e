"""Coloured label summarising the current game on the menu page."""

from __future__ import annotations

import tkinter as tk

from ...state import GameState


class GameStatusBadge(tk.Label):
    """Shows whether a game is in progress and, if so, its score.

    A finished game that scored keeps a red badge until a new game starts.
    """

    ACTIVE_BG = "#2e7d32"
    ENDED_BG = "#c62828"
    EMPTY_BG = "#616161"

    def __init__(self, master: tk.Misc, state: GameState | None = None):
        super().__init__(master, padx=8, pady=2, fg="white")
        self.set_state(state or GameState())

    def set_state(self, state: GameState) -> None:
        if state.is_game_active:
            text, bg = f"Game in progress ({state.score})", self.ACTIVE_BG
        elif state.score:
            text, bg = f"Last game: {state.score}", self.ENDED_BG
        else:
            text, bg = "No game in progress", self.EMPTY_BG
        self.config(text=text, bg=bg)
