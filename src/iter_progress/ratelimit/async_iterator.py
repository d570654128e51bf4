"""Async counterpart of :mod:`iter_progress.ratelimit.iterator`."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterable, AsyncIterator, Awaitable, Callable
from datetime import timedelta
from typing import Generic, TypeVar

from .gate import RateLimit

logger = logging.getLogger(__name__)

T = TypeVar("T")

_EMPTY = object()


class AsyncRateLimitIterator(Generic[T]):
    """Paces an async iterator the same way RateLimitIterator paces a sync one.

    The wait is awaited, so cancelling the consuming task aborts it
    immediately with ``asyncio.CancelledError``. The item already pulled
    for that call is kept and returned by the next one.
    """

    def __init__(
        self,
        aiterable: AsyncIterable[T],
        interval: float | timedelta,
        *,
        clock: Callable[[], float] | None = None,
        sleep: Callable[[float], Awaitable[None]] | None = None,
    ) -> None:
        self._gate = RateLimit(interval, clock=clock)
        self._sleep = sleep or asyncio.sleep
        self._iter = aiter(aiterable)
        self._pending: object = _EMPTY
        self._yielded = 0

    @property
    def interval(self) -> float:
        return self._gate.interval

    @property
    def yielded(self) -> int:
        return self._yielded

    def __aiter__(self) -> AsyncRateLimitIterator[T]:
        return self

    async def __anext__(self) -> T:
        if self._pending is not _EMPTY:
            item, self._pending = self._pending, _EMPTY
        else:
            try:
                item = await anext(self._iter)
            except StopAsyncIteration:
                logger.debug(
                    "Rate-limited async iterator exhausted after %d items",
                    self._yielded,
                )
                raise
        shortfall = self._gate.remaining()
        if shortfall > 0:
            logger.debug("Rate limit: waiting %.3fs", shortfall)
            try:
                await self._sleep(shortfall)
            except asyncio.CancelledError:
                # Returned by the next call.
                self._pending = item
                raise
        self._gate.mark()
        self._yielded += 1
        return item


def arate_limit(
    aiterable: AsyncIterable[T],
    interval: float | timedelta,
    *,
    clock: Callable[[], float] | None = None,
    sleep: Callable[[float], Awaitable[None]] | None = None,
) -> AsyncIterator[T]:
    """Async version of :func:`iter_progress.ratelimit.iterator.rate_limit`."""
    return AsyncRateLimitIterator(aiterable, interval, clock=clock, sleep=sleep)
