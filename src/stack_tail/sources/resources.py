"""Stack resource snapshot source."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from botocore.exceptions import BotoCoreError, ClientError

from stack_tail.domain import SourceKind, StatusRecord

from .base import CloudFormationClient
from .exceptions import ResourcesFetchError

logger = logging.getLogger(__name__)


class ResourceSource:
    """Reports the current status of every resource in the stack."""

    kind = SourceKind.RESOURCES

    def __init__(self, client: CloudFormationClient, stack_name: str) -> None:
        self._client = client
        self._stack_name = stack_name

    @property
    def stack_name(self) -> str:
        return self._stack_name

    async def fetch(self) -> tuple[StatusRecord, ...]:
        try:
            response = await asyncio.to_thread(
                self._client.describe_stack_resources,
                StackName=self._stack_name,
            )
        except (ClientError, BotoCoreError) as exc:
            raise ResourcesFetchError(self._stack_name, str(exc)) from exc

        resources = response.get("StackResources") or []
        records = tuple(StatusRecord.from_resource(resource) for resource in resources)
        logger.debug("Fetched %d resources for stack %s", len(records), self._stack_name)
        return records

    def is_done(self, batch: Sequence[StatusRecord], follow: bool) -> bool:
        """Done once every resource has settled."""

        if not follow:
            return True
        return all(record.is_terminal() for record in batch)


__all__ = ["ResourceSource"]
