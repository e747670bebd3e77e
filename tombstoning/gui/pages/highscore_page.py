"""High score list."""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk

from ...highscores import HighScoreTable


def build_page(parent, app) -> ttk.Frame:
    frame = ttk.Frame(parent)
    frame.columnconfigure(0, weight=1)
    frame.rowconfigure(1, weight=1)

    ttk.Label(frame, text="High scores", font=("TkDefaultFont", 14, "bold")).grid(row=0, column=0, pady=(24, 8))

    app.highscore_list = tk.Listbox(frame, height=10, activestyle="none")
    app.highscore_list.grid(row=1, column=0, sticky="nsew", padx=48)

    ttk.Button(frame, text="Back", command=app.show_menu).grid(row=2, column=0, pady=(12, 24))
    return frame


def render_table(app, table: HighScoreTable) -> None:
    box = app.highscore_list
    box.delete(0, tk.END)
    if not table.entries:
        box.insert(tk.END, "No high scores yet.")
        return
    for rank, entry in enumerate(table.entries, start=1):
        box.insert(tk.END, f"{rank:>2}. {entry.name:<16} {entry.score:>8}")
