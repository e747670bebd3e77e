from __future__ import annotations

import tkinter as tk
from pathlib import Path

import pytest

from tombstoning.lifecycle import GamePage
from tombstoning.settings import JsonFileBackingStore, MemoryBackingStore, SettingsManager
from tombstoning.state import GameContext


def _make_app(tmp_path: Path):
    from tombstoning.gui.app import TombstoningApp

    try:
        app = TombstoningApp(context=GameContext(SettingsManager(JsonFileBackingStore(home=tmp_path))))
    except tk.TclError as exc:
        pytest.skip(f"Tk not available in environment: {exc}")
    app.withdraw()
    return app


def test_settings_item_is_a_value_holder() -> None:
    from tombstoning.gui.widgets import SettingsItem

    try:
        root = tk.Tk()
    except tk.TclError as exc:
        pytest.skip(f"Tk not available in environment: {exc}")
    root.withdraw()

    items = [
        SettingsItem(root, "Difficulty", "Difficulty", ("Easy", "Normal", "Hard"), selected="Hard"),
        SettingsItem(root, "Sound", "Sound", ("On", "Off")),
    ]
    settings = SettingsManager(MemoryBackingStore())
    settings.retrieve_values(items)

    assert settings.get_value("difficulty", "") == "Hard"
    assert settings.get_value("sound", "") == "On"

    root.destroy()


def test_new_game_then_resume_renders_messages(tmp_path: Path) -> None:
    app = _make_app(tmp_path)
    try:
        assert app.current_page is GamePage.MENU

        app.start_new_game()
        assert app.current_page is GamePage.GAME
        assert app.var_game_message.get() == "Game state: starting a new game."
        assert app.var_game_score.get() == "Score: 0"

        app.context.game_state.add_points(30)
        app.show_menu()
        app.resume_game()
        assert app.var_game_message.get() == "Game state: resuming an existing game."
        assert app.var_game_score.get() == "Score: 30"
    finally:
        app.destroy()


def test_save_settings_persists_items(tmp_path: Path) -> None:
    app = _make_app(tmp_path)
    try:
        saved = []
        app.events.on_settings_saved(lambda: saved.append(True))

        app.show_settings()
        app.settings_items[0].select("Easy")
        app.save_settings(app.settings_items)

        assert saved == [True]
        assert app.current_page is GamePage.MENU
        reopened = SettingsManager(JsonFileBackingStore(home=tmp_path))
        assert reopened.get_value("Difficulty", "") == "Easy"
    finally:
        app.destroy()


def test_end_game_without_points_shows_high_scores(tmp_path: Path) -> None:
    app = _make_app(tmp_path)
    try:
        ended = []
        app.events.on_game_ended(ended.append)

        app.start_new_game()
        app.end_game()

        assert ended == [0]
        assert app.current_page is GamePage.HIGH_SCORE
        assert app.highscore_list.get(0) == "No high scores yet."
        assert not app.lifecycle.resume_available()
    finally:
        app.destroy()


def test_close_persists_game_state(tmp_path: Path) -> None:
    app = _make_app(tmp_path)
    app.start_new_game()
    app.context.game_state.add_points(70)
    app._on_close()

    reopened = SettingsManager(JsonFileBackingStore(home=tmp_path))
    assert reopened.get_int("GameState.Score", 0) == 70
    assert reopened.get_bool("GameState.IsGameActive", False) is True


def test_navigation_is_announced_and_titles_the_window(tmp_path: Path) -> None:
    app = _make_app(tmp_path)
    try:
        seen = []
        app.events.on_navigated(lambda page, query: seen.append((page, dict(query or {}))))

        app.start_new_game()
        app.show_settings()

        assert seen == [
            (GamePage.GAME, {"GameState": "NewGame"}),
            (GamePage.SETTINGS, {}),
        ]
        assert app.title().endswith("- Settings")
    finally:
        app.destroy()


def test_status_badge_follows_game_state() -> None:
    from tombstoning.gui.widgets import GameStatusBadge
    from tombstoning.state import GameState

    try:
        root = tk.Tk()
    except tk.TclError as exc:
        pytest.skip(f"Tk not available in environment: {exc}")
    root.withdraw()

    badge = GameStatusBadge(root)
    assert badge.cget("text") == "No game in progress"

    badge.set_state(GameState(score=40, is_game_active=True))
    assert badge.cget("text") == "Game in progress (40)"
    assert badge.cget("bg") == GameStatusBadge.ACTIVE_BG

    badge.set_state(GameState(score=40, is_game_active=False))
    assert badge.cget("text") == "Last game: 40"
    assert badge.cget("bg") == GameStatusBadge.ENDED_BG

    root.destroy()
