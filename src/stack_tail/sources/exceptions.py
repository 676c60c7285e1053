"""Exceptions raised while fetching stack state."""

from __future__ import annotations

from stack_tail.domain import SourceKind


class FetchError(RuntimeError):
    """Raised when a snapshot of stack state could not be fetched."""

    kind: SourceKind | None = None

    def __init__(self, stack_name: str, detail: str | None = None) -> None:
        self.stack_name = stack_name
        what = self.kind or "state"
        msg = f"Failed to fetch {what} for stack {stack_name}"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)


class EventsFetchError(FetchError):
    """Raised when ``DescribeStackEvents`` fails."""

    kind = SourceKind.EVENTS


class ResourcesFetchError(FetchError):
    """Raised when ``DescribeStackResources`` fails."""

    kind = SourceKind.RESOURCES


__all__ = ["EventsFetchError", "FetchError", "ResourcesFetchError"]
