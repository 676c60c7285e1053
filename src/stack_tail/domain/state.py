"""Follow state machine shared by the poll engine."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Init:
    """State before the first fetch."""

    follow: bool

    @property
    def previous_count(self) -> int:
        return 0

    @property
    def is_complete(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Next:
    """State after a fetch, carrying the number of rows drawn on that tick."""

    follow: bool
    previous_count: int

    @property
    def is_complete(self) -> bool:
        """A ``Next`` state that no longer follows ends the tick sequence."""

        return not self.follow


FollowState = Init | Next


__all__ = ["FollowState", "Init", "Next"]
