"""Tk front end for the tombstoning demo game.

This module intentionally avoids eager imports so ``import tombstoning`` never
pulls in tkinter.
"""

from __future__ import annotations

from typing import Any

__all__ = ["TombstoningApp", "main"]


def __getattr__(name: str) -> Any:
    if name in {"TombstoningApp", "main"}:
        from .app import TombstoningApp, main

        return {"TombstoningApp": TombstoningApp, "main": main}[name]
    raise AttributeError(name)
