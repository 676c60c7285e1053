"""Source layer public exports."""

from .base import CloudFormationClient, StatusSource
from .events import EventSource
from .exceptions import EventsFetchError, FetchError, ResourcesFetchError
from .resources import ResourceSource

__all__ = [
    "CloudFormationClient",
    "EventSource",
    "EventsFetchError",
    "FetchError",
    "ResourceSource",
    "ResourcesFetchError",
    "StatusSource",
]
