"""Source contracts."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

from stack_tail.domain import SourceKind, StatusRecord


@runtime_checkable
class StatusSource(Protocol):
    """Fetches one snapshot of stack state and knows when it has settled."""

    kind: SourceKind

    async def fetch(self) -> tuple[StatusRecord, ...]: ...

    def is_done(self, batch: Sequence[StatusRecord], follow: bool) -> bool: ...


class CloudFormationClient(Protocol):
    """Subset of the boto3 CloudFormation client used by the sources."""

    def describe_stack_events(self, **kwargs: Any) -> dict[str, Any]: ...

    def describe_stack_resources(self, **kwargs: Any) -> dict[str, Any]: ...


__all__ = ["CloudFormationClient", "StatusSource"]
