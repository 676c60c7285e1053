"""Shared CLI dependency helpers."""

from __future__ import annotations

from functools import lru_cache

from dotenv import load_dotenv

from stack_tail.config import AppSettings
from stack_tail.container import ServiceContainer, build_container


def load_settings() -> AppSettings:
    """Resolve settings from the environment and any local ``.env`` file."""

    load_dotenv()
    return AppSettings.from_env()


@lru_cache(maxsize=1)
def get_container(settings: AppSettings) -> ServiceContainer:
    """Return a cached service container for CLI commands."""

    return build_container(settings)


def reset_container() -> None:
    """Clear the cached container (useful for tests)."""

    get_container.cache_clear()
