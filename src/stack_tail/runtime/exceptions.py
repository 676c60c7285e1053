"""Exceptions for the follow runtime."""

from __future__ import annotations


class EngineExhaustedError(RuntimeError):
    """Raised when a follow engine is asked to produce ticks a second time."""


__all__ = ["EngineExhaustedError"]
