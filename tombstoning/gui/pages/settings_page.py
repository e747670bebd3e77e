"""Settings page built from SettingsItem value holders."""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import List, Sequence, Tuple

from ..widgets import SettingsItem

# (setting name, title, choices, default)
SETTINGS_ITEMS: Sequence[Tuple[str, str, Tuple[str, ...], str]] = (
    ("Difficulty", "Difficulty", ("Easy", "Normal", "Hard"), "Normal"),
    ("Sound", "Sound effects", ("On", "Off"), "On"),
    ("Music", "Music", ("On", "Off"), "On"),
)


def build_page(parent, app) -> ttk.Frame:
    frame = ttk.Frame(parent)
    frame.columnconfigure(0, weight=1)

    ttk.Label(frame, text="Settings", font=("TkDefaultFont", 14, "bold")).grid(row=0, column=0, pady=(24, 12))

    items: List[SettingsItem] = []
    settings = app.context.settings
    for row, (name, title, values, default) in enumerate(SETTINGS_ITEMS, start=1):
        item = SettingsItem(frame, name, title, values, selected=settings.get_str(name, default))
        item.grid(row=row, column=0, sticky="w", padx=48, pady=4)
        items.append(item)
    app.settings_items = items

    actions = ttk.Frame(frame)
    actions.grid(row=len(SETTINGS_ITEMS) + 1, column=0, pady=(12, 24))
    ttk.Button(actions, text="Save", command=lambda: app.save_settings(items)).pack(side=tk.LEFT)
    ttk.Button(actions, text="Back", command=app.show_menu).pack(side=tk.LEFT, padx=(8, 0))
    return frame
