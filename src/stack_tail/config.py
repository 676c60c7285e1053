"""Lightweight application configuration loader."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Any


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        msg = f"{name} must be a number, got {raw!r}"
        raise ValueError(msg) from exc


@dataclass(frozen=True)
class AppSettings:
    """Immutable configuration sourced from environment variables."""

    region: str | None = None
    profile: str | None = None
    poll_interval_seconds: float = 1.0
    metadata_service_timeout: int = 1
    connect_timeout: float = 10.0
    read_timeout: float = 30.0
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> AppSettings:
        return cls(
            region=os.getenv("STACK_TAIL_REGION") or None,
            profile=os.getenv("STACK_TAIL_PROFILE") or None,
            poll_interval_seconds=_env_float(
                "STACK_TAIL_POLL_INTERVAL", cls.poll_interval_seconds
            ),
            metadata_service_timeout=int(
                _env_float("STACK_TAIL_METADATA_TIMEOUT", cls.metadata_service_timeout)
            ),
            connect_timeout=_env_float("STACK_TAIL_CONNECT_TIMEOUT", cls.connect_timeout),
            read_timeout=_env_float("STACK_TAIL_READ_TIMEOUT", cls.read_timeout),
            log_level=os.getenv("STACK_TAIL_LOG_LEVEL", cls.log_level).upper(),
        )

    def with_overrides(self, **values: Any) -> AppSettings:
        """Return a copy with every non-``None`` override applied."""

        updates = {key: value for key, value in values.items() if value is not None}
        return replace(self, **updates)


__all__ = ["AppSettings"]
