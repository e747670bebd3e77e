from __future__ import annotations

from tombstoning.highscores import HighScores, HighScoreTable


def test_empty_table_accepts_any_positive_score() -> None:
    table = HighScoreTable("Default", max_entries=3)
    assert table.score_qualifies(1)
    assert not table.score_qualifies(0)


def test_full_table_requires_beating_the_lowest_entry() -> None:
    table = HighScoreTable("Default", max_entries=3)
    for name, score in (("a", 50), ("b", 30), ("c", 40)):
        assert table.add_entry(name, score)

    assert [e.score for e in table.entries] == [50, 40, 30]
    assert not table.score_qualifies(30)
    assert table.score_qualifies(31)

    assert table.add_entry("d", 45)
    assert [e.name for e in table.entries] == ["a", "d", "c"]
    assert not table.add_entry("e", 10)


def test_get_table_returns_same_named_table() -> None:
    scores = HighScores()
    assert scores.get_table() is scores.get_table("Default")
    assert scores.get_table("Hard") is not scores.get_table("Default")
