"""Game page: resume/new-game message, score, and the play controls."""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Mapping, Optional

from ...resume import GameView, compose_game_view, format_score

POINTS_PER_CLICK = 10


def build_page(parent, app) -> ttk.Frame:
    frame = ttk.Frame(parent)
    frame.columnconfigure(0, weight=1)

    app.var_game_message = tk.StringVar(master=frame, value="")
    app.var_game_score = tk.StringVar(master=frame, value=format_score(0))

    ttk.Label(frame, textvariable=app.var_game_message).grid(row=0, column=0, pady=(24, 8))
    ttk.Label(frame, textvariable=app.var_game_score, font=("TkDefaultFont", 14, "bold")).grid(row=1, column=0, pady=8)

    actions = ttk.Frame(frame)
    actions.grid(row=2, column=0, pady=(12, 24))

    def _score_points() -> None:
        state = app.context.game_state
        state.add_points(POINTS_PER_CLICK)
        app.var_game_score.set(format_score(state.score))

    ttk.Button(actions, text=f"+{POINTS_PER_CLICK} points", command=_score_points).pack(side=tk.LEFT)
    ttk.Button(actions, text="End game", command=app.end_game).pack(side=tk.LEFT, padx=(8, 0))
    return frame


def render_game(frame: ttk.Frame, app, query: Optional[Mapping[str, str]]) -> GameView:
    """Fill the page for the navigation parameters it was opened with."""
    view = compose_game_view(query, app.context.game_state)
    app.var_game_message.set(view.message)
    app.var_game_score.set(view.score_text)
    return view
