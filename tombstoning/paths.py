from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

# Allow users (and tests) to relocate all persistent state.
# Example:
#   export TOMBSTONING_HOME=/tmp/tombstoning
ENV_HOME = "TOMBSTONING_HOME"

SETTINGS_FILENAME = "settings.json"
LOG_FILENAME = "tombstoning.log"


def app_home(override: Optional[str | Path] = None) -> Path:
    """Return the folder that holds settings and logs.

    Search order:
      1) explicit *override* (e.g. the CLI ``--home`` flag)
      2) $TOMBSTONING_HOME (if set)
      3) ~/.tombstoning
    """
    if override:
        return Path(override).expanduser()
    env = (os.environ.get(ENV_HOME) or "").strip()
    if env:
        return Path(env).expanduser()
    return Path.home() / ".tombstoning"


def log_path(home: Optional[str | Path] = None) -> Path:
    return app_home(home) / LOG_FILENAME
