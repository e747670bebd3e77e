"""Label + choice composite that doubles as a settings value holder."""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Sequence


class SettingsItem(ttk.Frame):
    """One user-selectable setting.

    Exposes ``name`` and ``selected_value`` so a list of these can be handed
    straight to :meth:`SettingsManager.retrieve_values`.
    """

    def __init__(self, master: tk.Misc, name: str, title: str, values: Sequence[str], *, selected: str = "", width: int = 12):
        super().__init__(master)
        self.name = name
        self.values = list(values)
        self.variable = tk.StringVar(master=self, value=selected or (self.values[0] if self.values else ""))
        self.label = ttk.Label(self, text=title)
        self.label.grid(row=0, column=0, sticky="w")
        self.combo = ttk.Combobox(self, textvariable=self.variable, values=self.values, state="readonly", width=width)
        self.combo.grid(row=0, column=1, sticky="w", padx=(8, 0))

    @property
    def selected_value(self) -> str:
        return self.variable.get()

    def select(self, value: str) -> None:
        self.variable.set(value)
