"""Stack event timeline source."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from botocore.exceptions import BotoCoreError, ClientError

from stack_tail.domain import SourceKind, StatusRecord

from .base import CloudFormationClient
from .exceptions import EventsFetchError

logger = logging.getLogger(__name__)


class EventSource:
    """Reports the stack's change events in chronological order."""

    kind = SourceKind.EVENTS

    def __init__(self, client: CloudFormationClient, stack_name: str) -> None:
        self._client = client
        self._stack_name = stack_name

    @property
    def stack_name(self) -> str:
        return self._stack_name

    async def fetch(self) -> tuple[StatusRecord, ...]:
        try:
            response = await asyncio.to_thread(
                self._client.describe_stack_events,
                StackName=self._stack_name,
            )
        except (ClientError, BotoCoreError) as exc:
            raise EventsFetchError(self._stack_name, str(exc)) from exc

        # CloudFormation lists events newest first.
        events = response.get("StackEvents") or []
        records = [StatusRecord.from_event(event) for event in reversed(events)]
        logger.debug("Fetched %d events for stack %s", len(records), self._stack_name)
        return tuple(records)

    def is_done(self, batch: Sequence[StatusRecord], follow: bool) -> bool:
        """Done once the latest event is a terminal status on the stack itself."""

        if not follow:
            return True
        if not batch:
            return False
        latest = batch[-1]
        return latest.is_stack() and latest.is_terminal()


__all__ = ["EventSource"]
