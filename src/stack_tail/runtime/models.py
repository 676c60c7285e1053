"""Runtime result models."""

from __future__ import annotations

from dataclasses import dataclass

from stack_tail.domain import StatusRecord


@dataclass(frozen=True, slots=True)
class Tick:
    """One fetch of stack state, paired with the row count drawn before it."""

    previous_count: int
    records: tuple[StatusRecord, ...]
