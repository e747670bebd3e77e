"""Persistent typed settings.

Settings are a flat, case-insensitive namespace of named values. Each value is
stored as a canonical string in a backing store (in memory, or a single
versioned JSON file under the application home) and parsed back into the
requested type on read.

Design goals:
  * Atomic writes (no corrupted settings on crash)
  * Defaults on absence, errors on corruption
  * One writer at a time (the UI thread)
"""

from .backing import BackingStore, JsonFileBackingStore, MemoryBackingStore
from .codec import DATETIME_FORMAT, SettingFormatError
from .store import SettingsManager, SettingValue, ValueHolder, normalize_name

__all__ = [
    "BackingStore",
    "DATETIME_FORMAT",
    "JsonFileBackingStore",
    "MemoryBackingStore",
    "SettingFormatError",
    "SettingValue",
    "SettingsManager",
    "ValueHolder",
    "normalize_name",
]
