"""Normalized status records built from CloudFormation payloads."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import AwareDatetime

from .base import DomainModel
from .enums import StatusClass

STACK_RESOURCE_TYPE = "AWS::CloudFormation::Stack"


class StatusRecord(DomainModel):
    """One unit of remote state: a stack event or a resource snapshot entry."""

    resource_type: str
    timestamp: AwareDatetime
    status: str
    resource_id: str
    reason: str = ""

    @classmethod
    def from_event(cls, event: Mapping[str, Any]) -> StatusRecord:
        """Build a record from a ``DescribeStackEvents`` entry."""

        return cls(
            resource_type=event.get("ResourceType") or "",
            timestamp=event["Timestamp"],
            status=event.get("ResourceStatus") or "",
            resource_id=event.get("LogicalResourceId") or "",
            reason=event.get("ResourceStatusReason") or "",
        )

    @classmethod
    def from_resource(cls, resource: Mapping[str, Any]) -> StatusRecord:
        """Build a record from a ``DescribeStackResources`` entry."""

        return cls(
            resource_type=resource["ResourceType"],
            timestamp=resource["Timestamp"],
            status=resource["ResourceStatus"],
            resource_id=resource["LogicalResourceId"],
            reason=resource.get("ResourceStatusReason") or "",
        )

    @property
    def status_class(self) -> StatusClass:
        return StatusClass.of(self.status)

    def is_terminal(self) -> bool:
        """Return whether the status indicates the unit finished changing."""

        return self.status_class is not StatusClass.IN_PROGRESS

    def is_stack(self) -> bool:
        return self.resource_type == STACK_RESOURCE_TYPE

    def is_deletion(self) -> bool:
        return self.status.startswith("DELETE")


__all__ = ["STACK_RESOURCE_TYPE", "StatusRecord"]
