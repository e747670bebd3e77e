"""Simple GUI event registry for decoupled page communication."""

from __future__ import annotations

from typing import Callable, Dict, List, Mapping, Optional

from ..lifecycle import GamePage


class GuiEvents:
    """Small callback-based event hub used by the Tk GUI."""

    def __init__(self) -> None:
        self._listeners: Dict[str, List[Callable[..., None]]] = {
            "navigated": [],
            "game_ended": [],
            "settings_saved": [],
        }

    def on_navigated(self, callback: Callable[[GamePage, Optional[Mapping[str, str]]], None]) -> None:
        self._listeners["navigated"].append(callback)

    def on_game_ended(self, callback: Callable[[int], None]) -> None:
        self._listeners["game_ended"].append(callback)

    def on_settings_saved(self, callback: Callable[[], None]) -> None:
        self._listeners["settings_saved"].append(callback)

    def emit_navigated(self, page: GamePage, query: Optional[Mapping[str, str]] = None) -> None:
        for callback in self._listeners["navigated"]:
            callback(page, query)

    def emit_game_ended(self, score: int) -> None:
        for callback in self._listeners["game_ended"]:
            callback(score)

    def emit_settings_saved(self) -> None:
        for callback in self._listeners["settings_saved"]:
            callback()


__all__ = ["GuiEvents"]
