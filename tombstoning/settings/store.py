from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable, List, Optional, Protocol, TypeVar

from .backing import BackingStore, MemoryBackingStore
from .codec import format_value, parse_value, value_type

log = logging.getLogger(__name__)

T = TypeVar("T", str, int, float, bool, datetime)


class ValueHolder(Protocol):
    """Anything that exposes a setting name and its currently selected value."""

    @property
    def name(self) -> str: ...

    @property
    def selected_value(self) -> str: ...


@dataclass(frozen=True)
class SettingValue:
    """Plain ValueHolder, handy for bulk ingest outside the GUI."""

    name: str
    selected_value: str


def normalize_name(name: str) -> str:
    return name.lower()


class SettingsManager:
    """Typed, case-insensitive settings on top of a string backing store.

    Names are lower-cased before every lookup, insert, update and delete, so
    ``"Score"`` and ``"score"`` address the same setting. Reads of a missing
    setting return the caller's default without storing it; reads of a
    present but unparsable value raise :class:`SettingFormatError`.
    """

    def __init__(self, backing: Optional[BackingStore] = None) -> None:
        self.backing: BackingStore = backing if backing is not None else MemoryBackingStore()

    # Writing -------------------------------------------------------------
    def set_value(self, name: str, value: Any) -> None:
        """Add a new setting or overwrite an existing one."""
        key = normalize_name(name)
        text = format_value(value)
        # The backing map overwrites on an existing key and inserts otherwise.
        self.backing.set(key, text)
        log.debug("set %s=%r", key, text)

    def retrieve_values(self, holders: Iterable[ValueHolder]) -> None:
        """Store the selected value of every holder, in sequence order.

        Later holders with the same name overwrite earlier ones. A failure
        stops the loop; holders processed before it stay applied.
        """
        count = 0
        for holder in holders:
            self.set_value(holder.name, holder.selected_value)
            count += 1
        log.info("Stored %d setting value(s)", count)

    def clear_values(self) -> None:
        self.backing.clear()
        log.info("Cleared all settings")

    def delete_value(self, name: str) -> None:
        key = normalize_name(name)
        if self.backing.contains(key):
            self.backing.remove(key)
            log.debug("deleted %s", key)

    # Reading -------------------------------------------------------------
    def has_value(self, name: str) -> bool:
        return self.backing.contains(normalize_name(name))

    def names(self) -> List[str]:
        return sorted(self.backing.keys())

    def get_raw(self, name: str) -> Optional[str]:
        key = normalize_name(name)
        if self.backing.contains(key):
            return self.backing.get(key)
        return None

    def get_value(self, name: str, default: T) -> T:
        """Return the setting parsed as ``type(default)``, or *default* if absent."""
        return self._get(name, default, value_type(default))

    def get_str(self, name: str, default: str) -> str:
        return self._get(name, default, str)

    def get_int(self, name: str, default: int) -> int:
        return self._get(name, default, int)

    def get_float(self, name: str, default: float) -> float:
        return self._get(name, default, float)

    def get_bool(self, name: str, default: bool) -> bool:
        return self._get(name, default, bool)

    def get_datetime(self, name: str, default: datetime) -> datetime:
        return self._get(name, default, datetime)

    def _get(self, name: str, default: Any, target: type) -> Any:
        raw = self.get_raw(name)
        if raw is None:
            return default
        return parse_value(normalize_name(name), raw, target)
