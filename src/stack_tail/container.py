"""Service container wiring application components."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import boto3
from botocore.config import Config
from botocore.session import get_session

from stack_tail.config import AppSettings
from stack_tail.runtime import FollowEngine
from stack_tail.sources import EventSource, ResourceSource, StatusSource

DEFAULT_REGION = "us-east-1"

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ServiceContainer:
    """Aggregates the CloudFormation client with shared configuration."""

    settings: AppSettings
    cloudformation: Any

    def source_for(self, stack_name: str, *, resources: bool) -> StatusSource:
        """Pick the source for the requested view of the stack."""

        if resources:
            return ResourceSource(self.cloudformation, stack_name)
        return EventSource(self.cloudformation, stack_name)

    def engine_for(self, source: StatusSource, *, follow: bool) -> FollowEngine:
        return FollowEngine(
            source,
            follow=follow,
            poll_interval_seconds=self.settings.poll_interval_seconds,
        )


def _build_session(settings: AppSettings) -> boto3.Session:
    botocore_session = get_session()
    botocore_session.set_config_variable(
        "metadata_service_timeout", settings.metadata_service_timeout
    )
    return boto3.Session(botocore_session=botocore_session, profile_name=settings.profile)


def build_container(settings: AppSettings | None = None) -> ServiceContainer:
    """Construct the primary service container."""

    resolved_settings = settings or AppSettings.from_env()
    session = _build_session(resolved_settings)
    region = resolved_settings.region or session.region_name or DEFAULT_REGION
    logger.debug("Using AWS region %s", region)

    client = session.client(
        "cloudformation",
        region_name=region,
        config=Config(
            connect_timeout=resolved_settings.connect_timeout,
            read_timeout=resolved_settings.read_timeout,
        ),
    )
    return ServiceContainer(settings=resolved_settings, cloudformation=client)


__all__ = ["DEFAULT_REGION", "ServiceContainer", "build_container"]
