"""Minimal in-memory high score tables.

Only what end-of-game routing needs: a named table that can say whether a
score would make it in, and accept the entry afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Protocol

DEFAULT_TABLE = "Default"


class ScoreQualifier(Protocol):
    def score_qualifies(self, score: int) -> bool: ...


@dataclass(frozen=True)
class HighScoreEntry:
    name: str
    score: int
    date: datetime = field(default_factory=datetime.now)


@dataclass
class HighScoreTable:
    name: str
    max_entries: int = 10
    entries: List[HighScoreEntry] = field(default_factory=list)

    def score_qualifies(self, score: int) -> bool:
        if score <= 0:
            return False
        if len(self.entries) < self.max_entries:
            return True
        return score > self.entries[-1].score

    def add_entry(self, name: str, score: int) -> bool:
        """Insert *score* if it qualifies; returns whether it was kept."""
        if not self.score_qualifies(score):
            return False
        self.entries.append(HighScoreEntry(name=name, score=score))
        # Stable sort: earlier entries stay ahead on equal scores.
        self.entries.sort(key=lambda e: e.score, reverse=True)
        del self.entries[self.max_entries:]
        return True


class HighScores:
    def __init__(self) -> None:
        self._tables: Dict[str, HighScoreTable] = {}

    def get_table(self, name: str = DEFAULT_TABLE) -> HighScoreTable:
        if name not in self._tables:
            self._tables[name] = HighScoreTable(name=name)
        return self._tables[name]


__all__ = ["DEFAULT_TABLE", "HighScoreEntry", "HighScoreTable", "HighScores", "ScoreQualifier"]
