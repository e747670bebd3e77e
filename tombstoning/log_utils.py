"""Logging setup shared by the CLI and the GUI.

Only the standard library is used so this can be imported before anything else.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from .paths import log_path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(home: Optional[str | Path] = None, *, level: int = logging.INFO) -> Optional[Path]:
    """Configure logging to a persistent file plus stdout.

    The GUI is often started without a visible console, so a log file in the
    application home helps debug crashes after the fact. An existing logging
    configuration (e.g. pytest's or an embedding host's) is left untouched.

    Returns the log file path, or ``None`` if the file could not be opened.
    """

    path: Optional[Path] = log_path(home)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.insert(0, logging.FileHandler(str(path), mode="a", encoding="utf-8"))
    except OSError as e:
        print(f"[log] could not open log file {path}: {e}", file=sys.stderr)
        path = None

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers)
    else:
        for h in handlers:
            h.close()

    # Hook unhandled exceptions so we get a traceback in the log file.
    previous_hook = sys.excepthook
    if getattr(previous_hook, "_tombstoning_hook", False):
        return path

    def _excepthook(exc_type, exc, tb):
        logging.getLogger("tombstoning").error("Unhandled exception", exc_info=(exc_type, exc, tb))
        previous_hook(exc_type, exc, tb)

    _excepthook._tombstoning_hook = True  # type: ignore[attr-defined]
    sys.excepthook = _excepthook
    return path
