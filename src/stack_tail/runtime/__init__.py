"""Runtime layer exports."""

from .exceptions import EngineExhaustedError
from .follow import FollowEngine
from .models import Tick

__all__ = [
    "EngineExhaustedError",
    "FollowEngine",
    "Tick",
]
