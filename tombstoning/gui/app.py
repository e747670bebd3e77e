"""GUI application entrypoint and page shell."""

from __future__ import annotations

import logging
import tkinter as tk
from pathlib import Path
from tkinter import messagebox, simpledialog, ttk
from typing import Dict, Mapping, Optional, Sequence

from .. import __version__
from ..highscores import DEFAULT_TABLE, HighScores
from ..lifecycle import GameLifecycle, GamePage
from ..log_utils import setup_logging
from ..paths import app_home
from ..resume import game_page_query
from ..settings import JsonFileBackingStore, SettingsManager, ValueHolder
from ..state import GameContext
from .events import GuiEvents
from .pages import game_page, highscore_page, menu_page, settings_page

logger = logging.getLogger(__name__)


class TombstoningApp(tk.Tk):
    """One window, several stacked pages; only one is visible at a time."""

    PAGE_TITLES = {
        GamePage.MENU: "Menu",
        GamePage.GAME: "Game",
        GamePage.SETTINGS: "Settings",
        GamePage.HIGH_SCORE: "High scores",
    }

    def __init__(self, home: Optional[str | Path] = None, *, context: Optional[GameContext] = None):
        super().__init__()
        self.title(f"Tombstoning v{__version__}")
        self.geometry("420x360")

        if context is None:
            context = GameContext(SettingsManager(JsonFileBackingStore(home=app_home(home))))
        self.context = context
        self.lifecycle = GameLifecycle(self.context)
        self.high_scores = HighScores()
        self.events = GuiEvents()
        self.current_page: Optional[GamePage] = None

        # A desktop start is the equivalent of returning to a terminated app:
        # pick the game up from whatever was persisted last time.
        self.lifecycle.on_activated(process_preserved=False)

        container = ttk.Frame(self)
        container.pack(fill="both", expand=True)
        container.columnconfigure(0, weight=1)
        container.rowconfigure(0, weight=1)

        self._pages: Dict[GamePage, ttk.Frame] = {
            GamePage.MENU: menu_page.build_page(container, self),
            GamePage.GAME: game_page.build_page(container, self),
            GamePage.SETTINGS: settings_page.build_page(container, self),
            GamePage.HIGH_SCORE: highscore_page.build_page(container, self),
        }
        for frame in self._pages.values():
            frame.grid(row=0, column=0, sticky="nsew")

        self.events.on_settings_saved(lambda: logger.info("Settings saved"))
        self.events.on_navigated(self._on_navigated)

        # Minimising is the closest desktop analogue of being switched away from.
        self.bind("<Unmap>", self._on_unmap)
        self.protocol("WM_DELETE_WINDOW", self._on_close)

        self.navigate(GamePage.MENU)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def navigate(self, page: GamePage, query: Optional[Mapping[str, str]] = None) -> None:
        if page is GamePage.HIGH_SCORE_NAME:
            self._ask_high_score_name()
            page = GamePage.HIGH_SCORE

        frame = self._pages[page]
        if page is GamePage.MENU:
            menu_page.render_menu(frame, self)
        elif page is GamePage.GAME:
            game_page.render_game(frame, self, query)
        elif page is GamePage.HIGH_SCORE:
            highscore_page.render_table(self, self.high_scores.get_table(DEFAULT_TABLE))

        frame.tkraise()
        self.current_page = page
        self.events.emit_navigated(page, query)

    def _on_navigated(self, page: GamePage, query: Optional[Mapping[str, str]]) -> None:
        self.title(f"Tombstoning v{__version__} - {self.PAGE_TITLES.get(page, page.value)}")
        logger.debug("Navigated to %s (query=%s)", page.value, dict(query or {}))

    def show_menu(self) -> None:
        self.navigate(GamePage.MENU)

    def show_settings(self) -> None:
        self.navigate(GamePage.SETTINGS)

    def show_high_scores(self) -> None:
        self.navigate(GamePage.HIGH_SCORE)

    # ------------------------------------------------------------------
    # Game flow
    # ------------------------------------------------------------------

    def start_new_game(self) -> None:
        self.lifecycle.start_new_game()
        self.navigate(GamePage.GAME, game_page_query(resume=False))

    def resume_game(self) -> None:
        self.navigate(GamePage.GAME, game_page_query(resume=True))

    def end_game(self) -> None:
        target = self.lifecycle.end_game(self.high_scores.get_table(DEFAULT_TABLE))
        self.events.emit_game_ended(self.context.game_state.score)
        self.navigate(target)

    def _ask_high_score_name(self) -> None:
        score = self.context.game_state.score
        name = simpledialog.askstring("New high score", f"You scored {score}! Enter your name:", parent=self)
        if name:
            self.high_scores.get_table(DEFAULT_TABLE).add_entry(name.strip() or "Player", score)

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------

    def save_settings(self, items: Sequence[ValueHolder]) -> None:
        try:
            self.context.settings.retrieve_values(items)
        except OSError as e:
            logger.exception("Failed to save settings")
            messagebox.showerror("Settings", f"Could not save settings:\n{e}")
            return
        self.events.emit_settings_saved()
        self.show_menu()

    # ------------------------------------------------------------------
    # Host events
    # ------------------------------------------------------------------

    def _on_unmap(self, event) -> None:
        if event.widget is not self:
            return
        try:
            self.lifecycle.on_deactivated()
        except OSError:
            logger.exception("Failed to persist game state on deactivation")

    def _on_close(self) -> None:
        try:
            self.lifecycle.on_closing()
        except OSError:
            logger.exception("Failed to persist game state on close")
        self.destroy()


def main(home: Optional[str | Path] = None) -> None:
    """Start the Tk GUI application."""
    log_path = setup_logging(home)
    if log_path:
        logger.info("Logging to %s", log_path)
    app = TombstoningApp(home=home)
    app.mainloop()
