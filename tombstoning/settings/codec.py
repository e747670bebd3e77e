"""Canonical string encoding for typed setting values.

Every setting is persisted as a string. Each supported type has exactly one
format/parse pair here; the store never converts values anywhere else.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, Dict, Tuple, Type

# Sortable timestamp layout (no sub-second part, no timezone). Years are
# always four digits; strftime("%Y") does not pad years below 1000 everywhere.
DATETIME_FORMAT = "{0.year:04d}-{0.month:02d}-{0.day:02d}T{0.hour:02d}:{0.minute:02d}:{0.second:02d}"

SUPPORTED_TYPES: Tuple[type, ...] = (str, bool, int, float, datetime)


class SettingFormatError(ValueError):
    """A stored setting could not be parsed into the requested type.

    Raised instead of falling back to the default so corrupted persisted data
    is visible to the caller.
    """

    def __init__(self, name: str, raw: str, target: type, reason: str = ""):
        self.name = name
        self.raw = raw
        self.target = target
        msg = f"setting {name!r}: cannot parse {raw!r} as {target.__name__}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


def _format_bool(value: bool) -> str:
    return "True" if value else "False"


def _parse_bool(text: str) -> bool:
    s = text.strip().lower()
    if s == "true":
        return True
    if s == "false":
        return False
    raise ValueError("expected 'True' or 'False'")


def _parse_int(text: str) -> int:
    s = text.strip()
    # int() also accepts "1_000"; stored ints never contain separators.
    if "_" in s:
        raise ValueError("digit separators are not allowed")
    return int(s)


def _parse_float(text: str) -> float:
    s = text.strip()
    if "_" in s:
        raise ValueError("digit separators are not allowed")
    return float(s)


def _format_datetime(value: datetime) -> str:
    return DATETIME_FORMAT.format(value)


def _parse_datetime(text: str) -> datetime:
    return datetime.fromisoformat(text.strip())


_FORMATTERS: Dict[type, Callable[[Any], str]] = {
    str: str,
    bool: _format_bool,
    int: str,
    float: repr,
    datetime: _format_datetime,
}

_PARSERS: Dict[type, Callable[[str], Any]] = {
    str: str,
    bool: _parse_bool,
    int: _parse_int,
    float: _parse_float,
    datetime: _parse_datetime,
}


def value_type(value: Any) -> Type:
    """Return the supported type *value* is stored as.

    ``bool`` is checked before ``int`` because it is an ``int`` subclass.
    """
    for t in SUPPORTED_TYPES:
        if isinstance(value, t):
            return t
    raise TypeError(f"unsupported setting type: {type(value).__name__}")


def format_value(value: Any) -> str:
    return _FORMATTERS[value_type(value)](value)


def parse_value(name: str, raw: str, target: type) -> Any:
    """Parse the stored string *raw* of setting *name* into *target*."""
    try:
        parser = _PARSERS[target]
    except KeyError:
        raise TypeError(f"unsupported setting type: {target.__name__}") from None
    try:
        return parser(raw)
    except (TypeError, ValueError) as e:
        raise SettingFormatError(name, raw, target, str(e)) from e


def type_from_name(type_name: str) -> type:
    """Map a CLI type name (``str``, ``int``, ...) to the Python type."""
    mapping = {t.__name__: t for t in SUPPORTED_TYPES}
    try:
        return mapping[type_name]
    except KeyError:
        raise ValueError(f"unknown setting type {type_name!r}; expected one of {sorted(mapping)}") from None
