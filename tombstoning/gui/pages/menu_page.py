"""Main menu: new game, resume, settings."""

from __future__ import annotations

from tkinter import ttk

from ..widgets import GameStatusBadge


def build_page(parent, app) -> ttk.Frame:
    frame = ttk.Frame(parent)
    frame.columnconfigure(0, weight=1)

    ttk.Label(frame, text="Tombstoning", font=("TkDefaultFont", 16, "bold")).grid(row=0, column=0, pady=(24, 12))

    app.menu_badge = GameStatusBadge(frame)
    app.menu_badge.grid(row=1, column=0, pady=(0, 12))

    ttk.Button(frame, text="New game", command=app.start_new_game).grid(row=2, column=0, sticky="ew", padx=48, pady=4)
    app.btn_resume = ttk.Button(frame, text="Resume game", command=app.resume_game)
    app.btn_resume.grid(row=3, column=0, sticky="ew", padx=48, pady=4)
    ttk.Button(frame, text="High scores", command=app.show_high_scores).grid(row=4, column=0, sticky="ew", padx=48, pady=4)
    ttk.Button(frame, text="Settings", command=app.show_settings).grid(row=5, column=0, sticky="ew", padx=48, pady=4)
    return frame


def render_menu(frame: ttk.Frame, app) -> None:
    app.menu_badge.set_state(app.context.game_state)
    if app.lifecycle.resume_available():
        app.btn_resume.state(["!disabled"])
    else:
        app.btn_resume.state(["disabled"])
