"""Resume-vs-new-game decision for the game page.

When the game page is shown, the navigation layer may pass a ``GameState``
parameter. Only the exact value ``"Resume"`` means "continue the current
game"; anything else, including no parameter at all, means a new game. The
score line is always taken from the current game state, whichever branch is
taken. Resetting the state for a new game is the caller's job.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Dict, Mapping, Optional
from urllib.parse import parse_qsl, urlsplit

from .state import GameState

GAME_STATE_PARAM = "GameState"
RESUME_VALUE = "Resume"
NEW_GAME_VALUE = "NewGame"

RESUME_MESSAGE = "Game state: resuming an existing game."
NEW_GAME_MESSAGE = "Game state: starting a new game."


class ResumeMode(enum.Enum):
    RESUME = "resume"
    NEW_GAME = "new_game"


@dataclass(frozen=True)
class GameView:
    mode: ResumeMode
    message: str
    score_text: str


def decide_resume_mode(query: Optional[Mapping[str, str]]) -> ResumeMode:
    if query and query.get(GAME_STATE_PARAM) == RESUME_VALUE:
        return ResumeMode.RESUME
    return ResumeMode.NEW_GAME


def format_score(score: int) -> str:
    return f"Score: {score}"


def compose_game_view(query: Optional[Mapping[str, str]], game_state: GameState) -> GameView:
    mode = decide_resume_mode(query)
    message = RESUME_MESSAGE if mode is ResumeMode.RESUME else NEW_GAME_MESSAGE
    return GameView(mode=mode, message=message, score_text=format_score(game_state.score))


def game_page_query(resume: bool) -> Dict[str, str]:
    return {GAME_STATE_PARAM: RESUME_VALUE if resume else NEW_GAME_VALUE}


def parse_query(text: str) -> Dict[str, str]:
    """Parse ``"GameState=Resume"`` style parameters.

    Accepts a bare query string, one with a leading ``?``, or a page path such
    as ``"/GamePage?GameState=Resume"``. Repeated keys: the last value wins.
    """
    text = (text or "").strip()
    if "?" in text:
        text = urlsplit(text).query
    return dict(parse_qsl(text, keep_blank_values=True))


__all__ = [
    "GAME_STATE_PARAM",
    "GameView",
    "NEW_GAME_MESSAGE",
    "RESUME_MESSAGE",
    "RESUME_VALUE",
    "ResumeMode",
    "compose_game_view",
    "decide_resume_mode",
    "format_score",
    "game_page_query",
    "parse_query",
]
