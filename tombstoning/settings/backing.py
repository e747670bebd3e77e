from __future__ import annotations

import json
import logging
import os
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Protocol

from ..paths import SETTINGS_FILENAME, app_home

log = logging.getLogger(__name__)

SCHEMA_VERSION = 1


class BackingStore(Protocol):
    """Flat string-to-string map the settings manager persists into."""

    def contains(self, key: str) -> bool: ...

    def get(self, key: str) -> str: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...

    def clear(self) -> None: ...

    def keys(self) -> List[str]: ...


class MemoryBackingStore:
    """Process-local store; contents are lost when the process ends."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})

    def contains(self, key: str) -> bool:
        return key in self._data

    def get(self, key: str) -> str:
        return self._data[key]

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def clear(self) -> None:
        self._data.clear()

    def keys(self) -> List[str]:
        return list(self._data)


@dataclass
class JsonFileBackingStore:
    """Durable store kept in a single versioned JSON file.

    File layout::

        {"schema_version": 1, "values": {"name": "value", ...}}

    Every mutation rewrites the file atomically (temp file + ``os.replace``),
    so a process killed mid-write leaves the previous file intact. A corrupt
    file is backed up next to the original and the store starts empty.
    """

    filename: str = SETTINGS_FILENAME
    home: Path = field(default_factory=app_home)
    _values: Optional[Dict[str, str]] = field(default=None, init=False, repr=False)

    def path(self) -> Path:
        return Path(self.home) / self.filename

    # Loading -------------------------------------------------------------
    def _load(self) -> Dict[str, str]:
        if self._values is not None:
            return self._values

        path = self.path()
        values: Dict[str, str] = {}
        if path.exists():
            try:
                data = json.loads(path.read_text(encoding="utf-8"))
                if not isinstance(data, dict):
                    raise ValueError(f"{path.name} root is not an object")
                raw = data.get("values", {})
                if not isinstance(raw, dict):
                    raise ValueError(f"{path.name} 'values' is not an object")
                values = {str(k): str(v) for k, v in raw.items()}
            except ValueError as e:
                # json.JSONDecodeError is a ValueError as well.
                bak = self._backup_corrupt(path)
                log.warning("Ignoring corrupt settings file %s (%s); backup: %s", path, e, bak)
                values = {}

        self._values = values
        return values

    @staticmethod
    def _backup_corrupt(path: Path) -> Optional[Path]:
        ts = time.strftime("%Y%m%d_%H%M%S")
        bak = path.with_name(f"{path.name}.bak.{ts}")
        try:
            bak.write_bytes(path.read_bytes())
        except OSError:
            log.exception("Could not back up corrupt settings file %s", path)
            return None
        return bak

    def reload(self) -> None:
        """Drop the cached values; the next access re-reads the file."""
        self._values = None

    # Saving --------------------------------------------------------------
    def _commit(self, values: Dict[str, str]) -> None:
        """Write *values* to disk, then make them the cached state.

        If the write fails the cache keeps the last saved values.
        """
        self._save(values)
        self._values = values

    def _save(self, values: Dict[str, str]) -> None:
        path = self.path()
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp = path.with_suffix(path.suffix + ".tmp")

        payload = {"schema_version": SCHEMA_VERSION, "values": values}
        txt = json.dumps(payload, indent=2, sort_keys=True)
        tmp.write_text(txt, encoding="utf-8")
        os.replace(tmp, path)

    # BackingStore --------------------------------------------------------
    def contains(self, key: str) -> bool:
        return key in self._load()

    def get(self, key: str) -> str:
        return self._load()[key]

    def set(self, key: str, value: str) -> None:
        values = dict(self._load())
        values[key] = value
        self._commit(values)

    def remove(self, key: str) -> None:
        values = dict(self._load())
        if key in values:
            del values[key]
            self._commit(values)

    def clear(self) -> None:
        self._commit({})

    def keys(self) -> List[str]:
        return list(self._load())
