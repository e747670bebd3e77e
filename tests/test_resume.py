from __future__ import annotations

import pytest

from tombstoning.resume import (
    NEW_GAME_MESSAGE,
    RESUME_MESSAGE,
    ResumeMode,
    compose_game_view,
    decide_resume_mode,
    game_page_query,
    parse_query,
)
from tombstoning.state import GameState


@pytest.mark.parametrize(
    "query, expected",
    [
        ({"GameState": "Resume"}, ResumeMode.RESUME),
        ({"GameState": "NewGame"}, ResumeMode.NEW_GAME),
        ({"GameState": "resume"}, ResumeMode.NEW_GAME),
        ({"GameState": ""}, ResumeMode.NEW_GAME),
        ({"Other": "Resume"}, ResumeMode.NEW_GAME),
        ({}, ResumeMode.NEW_GAME),
        (None, ResumeMode.NEW_GAME),
    ],
)
def test_decide_resume_mode(query, expected) -> None:
    assert decide_resume_mode(query) is expected


@pytest.mark.parametrize(
    "query, message",
    [
        ({"GameState": "Resume"}, RESUME_MESSAGE),
        ({"GameState": "NewGame"}, NEW_GAME_MESSAGE),
        ({}, NEW_GAME_MESSAGE),
    ],
)
def test_game_view_score_is_independent_of_mode(query, message) -> None:
    state = GameState(score=340, is_game_active=True)

    view = compose_game_view(query, state)

    assert view.message == message
    assert view.score_text == "Score: 340"


def test_game_view_reads_score_at_display_time() -> None:
    state = GameState()
    state.add_points(20)
    assert compose_game_view({"GameState": "Resume"}, state).score_text == "Score: 20"

    state.add_points(5)
    assert compose_game_view(None, state).score_text == "Score: 25"


def test_messages_match_original_wording() -> None:
    assert RESUME_MESSAGE == "Game state: resuming an existing game."
    assert NEW_GAME_MESSAGE == "Game state: starting a new game."


@pytest.mark.parametrize(
    "text",
    ["GameState=Resume", "?GameState=Resume", "/GamePage?GameState=Resume", "GameState=NewGame&GameState=Resume"],
)
def test_parse_query_variants(text) -> None:
    assert parse_query(text) == {"GameState": "Resume"}


def test_parse_query_empty() -> None:
    assert parse_query("") == {}


def test_game_page_query_feeds_decider() -> None:
    assert decide_resume_mode(game_page_query(resume=True)) is ResumeMode.RESUME
    assert decide_resume_mode(game_page_query(resume=False)) is ResumeMode.NEW_GAME
