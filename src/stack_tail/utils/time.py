"""Time-related helpers."""

from __future__ import annotations

from datetime import datetime, timedelta, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


class UnknownTimezoneError(ValueError):
    """Raised when a timezone name is not in the IANA database."""


def resolve_timezone(name: str) -> ZoneInfo:
    """Look up an IANA timezone such as ``America/New_York``."""

    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        msg = f"Unknown timezone '{name}'"
        raise UnknownTimezoneError(msg) from exc


def _clock(value: datetime) -> str:
    text = f"{value:%Y-%m-%d %H:%M:%S}"
    if value.microsecond:
        text = f"{text}.{value.microsecond:06d}"
    return text


def _offset(value: datetime) -> str:
    offset = value.utcoffset() or timedelta(0)
    sign = "-" if offset < timedelta(0) else "+"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def format_timestamp(value: datetime, timezone: tzinfo | None = None) -> str:
    """Render a timestamp in its own offset, or as local time in ``timezone``."""

    if timezone is None:
        return f"{_clock(value)} {_offset(value)}"
    local = value.astimezone(timezone)
    return f"{_clock(local)} {local.tzname()}"
