"""Utility helpers."""

from .time import UnknownTimezoneError, format_timestamp, resolve_timezone

__all__ = ["UnknownTimezoneError", "format_timestamp", "resolve_timezone"]
