"""Polling engine that follows a source until it settles."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator, Awaitable, Callable

from stack_tail.domain import FollowState, Init, Next
from stack_tail.sources import StatusSource

from .exceptions import EngineExhaustedError
from .models import Tick

Sleep = Callable[[float], Awaitable[object]]

logger = logging.getLogger(__name__)


class FollowEngine:
    """Drives repeated fetches of a source on a fixed interval.

    The first fetch happens immediately. Later fetches wait
    ``poll_interval_seconds`` first. The sequence ends after one tick when
    ``follow`` is false, or after the tick on which the source reports that
    it is done. Fetch errors propagate and end the sequence.
    """

    def __init__(
        self,
        source: StatusSource,
        *,
        follow: bool,
        poll_interval_seconds: float = 1.0,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self._source = source
        self._follow = follow
        self._poll_interval_seconds = poll_interval_seconds
        self._sleep = sleep
        self._started = False

    @property
    def source(self) -> StatusSource:
        return self._source

    @property
    def poll_interval_seconds(self) -> float:
        return self._poll_interval_seconds

    async def ticks(self) -> AsyncIterator[Tick]:
        if self._started:
            msg = "Follow engine already ran; construct a new engine to poll again"
            raise EngineExhaustedError(msg)
        self._started = True

        state: FollowState = Init(self._follow)
        while not state.is_complete:
            if isinstance(state, Next):
                await self._sleep(self._poll_interval_seconds)

            batch = await self._source.fetch()
            done = self._source.is_done(batch, state.follow)
            logger.debug(
                "Fetched %d %s records (previous=%d, done=%s)",
                len(batch),
                self._source.kind,
                state.previous_count,
                done,
            )
            yield Tick(previous_count=state.previous_count, records=batch)
            state = Next(follow=state.follow and not done, previous_count=len(batch))


__all__ = ["FollowEngine"]
