"""Enumerations used across the stack-tail domain layer."""

from __future__ import annotations

from enum import StrEnum

COMPLETE_SUFFIX = "_COMPLETE"
FAILED_SUFFIX = "_FAILED"


class StatusClass(StrEnum):
    """Lifecycle class derived from a CloudFormation status code."""

    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    FAILED = "failed"

    @classmethod
    def of(cls, status: str) -> StatusClass:
        if status.endswith(COMPLETE_SUFFIX):
            return cls.COMPLETED
        if status.endswith(FAILED_SUFFIX):
            return cls.FAILED
        return cls.IN_PROGRESS


class SourceKind(StrEnum):
    """Kinds of remote state a source can report on."""

    EVENTS = "events"
    RESOURCES = "resources"
