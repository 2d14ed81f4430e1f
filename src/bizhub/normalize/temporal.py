"""Upload-time normalization.

Raw ``uploadedAt`` values arrive in several shapes depending on how the
record was written: a datetime from the store driver, an ISO string from a
JSON export, epoch milliseconds, or a driver timestamp object that can
convert itself. Each value is classified once into a :class:`RawInstant`
and converted by the function registered for its kind.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from email.utils import parsedate_to_datetime
from enum import Enum
from typing import Any, Callable, Dict, Optional

# Methods a driver timestamp object may expose to produce a datetime
CONVERSION_METHODS = ("to_datetime", "ToDatetime", "to_pydatetime", "toDate")

MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_TEXT_FORMATS = ("%m/%d/%Y", "%m/%d/%Y %H:%M:%S", "%b %d, %Y", "%B %d, %Y", "%b %d %Y", "%Y/%m/%d")


class InstantKind(str, Enum):
    ABSENT = "absent"
    DATETIME = "datetime"
    DATE = "date"
    EPOCH = "epoch"
    TEXT = "text"
    CONVERTIBLE = "convertible"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class RawInstant:
    kind: InstantKind
    value: Any = None

    @classmethod
    def classify(cls, value: Any) -> "RawInstant":
        if value is None or (isinstance(value, str) and not value.strip()):
            return cls(InstantKind.ABSENT)
        if isinstance(value, datetime):
            return cls(InstantKind.DATETIME, value)
        if isinstance(value, date):
            return cls(InstantKind.DATE, value)
        if isinstance(value, bool):
            return cls(InstantKind.UNKNOWN, value)
        if isinstance(value, (int, float)):
            return cls(InstantKind.EPOCH, value)
        if isinstance(value, str):
            return cls(InstantKind.TEXT, value)
        for name in CONVERSION_METHODS:
            if callable(getattr(value, name, None)):
                return cls(InstantKind.CONVERTIBLE, value)
        return cls(InstantKind.UNKNOWN, value)

    def to_datetime(self) -> Optional[datetime]:
        """Aware UTC datetime, or None when the value cannot be converted."""
        try:
            dt = _CONVERTERS[self.kind](self.value)
            return _as_utc(dt) if dt is not None else None
        except Exception:
            return None


def _as_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def _from_nothing(_: Any) -> Optional[datetime]:
    return None


def _from_datetime(value: datetime) -> datetime:
    return value


def _from_date(value: date) -> datetime:
    return datetime.combine(value, time.min)


def _from_epoch(value: float) -> Optional[datetime]:
    if not math.isfinite(value):
        return None
    return datetime.fromtimestamp(value / 1000.0, tz=timezone.utc)


def _from_text(value: str) -> Optional[datetime]:
    s = value.strip()
    if not s:
        return None
    try:
        return datetime.fromisoformat(s[:-1] + "+00:00" if s.endswith(("Z", "z")) else s)
    except ValueError:
        pass
    for fmt in _TEXT_FORMATS:
        try:
            return datetime.strptime(s, fmt)
        except ValueError:
            continue
    try:
        return parsedate_to_datetime(s)
    except (TypeError, ValueError, IndexError):
        return None


def _from_convertible(value: Any) -> Optional[datetime]:
    for name in CONVERSION_METHODS:
        method = getattr(value, name, None)
        if callable(method):
            converted = method()
            if isinstance(converted, datetime):
                return converted
            if isinstance(converted, date):
                return _from_date(converted)
            return None
    return None


_CONVERTERS: Dict[InstantKind, Callable[[Any], Optional[datetime]]] = {
    InstantKind.ABSENT: _from_nothing,
    InstantKind.UNKNOWN: _from_nothing,
    InstantKind.DATETIME: _from_datetime,
    InstantKind.DATE: _from_date,
    InstantKind.EPOCH: _from_epoch,
    InstantKind.TEXT: _from_text,
    InstantKind.CONVERTIBLE: _from_convertible,
}


def to_datetime(value: Any) -> Optional[datetime]:
    try:
        instant = RawInstant.classify(value)
    except Exception:
        return None
    return instant.to_datetime()


def to_timestamp(value: Any) -> int:
    """Epoch milliseconds for any accepted upload-time value, 0 if unknown."""
    dt = to_datetime(value)
    if dt is None:
        return 0
    return int(round(dt.timestamp() * 1000))


def format_uploaded_at(value: Any, include_year: bool = True) -> str:
    """Short en-US date such as ``Jan 5, 2024``; empty when unknown."""
    dt = to_datetime(value)
    if dt is None:
        return ""
    label = f"{MONTH_ABBR[dt.month - 1]} {dt.day}"
    return f"{label}, {dt.year}" if include_year else label
