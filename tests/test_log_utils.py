from __future__ import annotations

import logging
import sys
from pathlib import Path

from tombstoning.log_utils import setup_logging


def test_setup_logging_returns_path_in_home(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr(sys, "excepthook", sys.__excepthook__)

    path = setup_logging(tmp_path)

    assert path == tmp_path / "tombstoning.log"
    assert path.parent.is_dir()


def test_setup_logging_installs_excepthook_once(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr(sys, "excepthook", sys.__excepthook__)

    setup_logging(tmp_path)
    hook = sys.excepthook
    setup_logging(tmp_path)

    assert hook is not sys.__excepthook__
    assert sys.excepthook is hook


def test_setup_logging_keeps_existing_handlers(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr(sys, "excepthook", sys.__excepthook__)
    root = logging.getLogger()
    sentinel = logging.NullHandler()
    root.addHandler(sentinel)
    try:
        before = list(root.handlers)
        setup_logging(tmp_path)
        assert root.handlers == before
    finally:
        root.removeHandler(sentinel)
