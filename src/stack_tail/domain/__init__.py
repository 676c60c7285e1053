"""Domain layer public exports."""

from .base import DomainModel
from .enums import COMPLETE_SUFFIX, FAILED_SUFFIX, SourceKind, StatusClass
from .records import STACK_RESOURCE_TYPE, StatusRecord
from .state import FollowState, Init, Next

__all__ = [
    "COMPLETE_SUFFIX",
    "FAILED_SUFFIX",
    "STACK_RESOURCE_TYPE",
    "DomainModel",
    "FollowState",
    "Init",
    "Next",
    "SourceKind",
    "StatusClass",
    "StatusRecord",
]
