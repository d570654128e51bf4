"""Async counterpart of :mod:`iter_progress.percent.tracker`."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterable, AsyncIterator
from typing import Generic, TextIO, TypeVar

from iter_progress.config.schema import BarConfig, total_count

from .sinks import BarSink, Sink, close_sink
from .tracker import percent_of

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AsyncPercentIterator(Generic[T]):
    """Reports progress through an async iterator of known length.

    Async iterators carry no length, so *total* is always required.
    """

    def __init__(
        self,
        aiterable: AsyncIterable[T],
        total: int,
        sink: Sink,
    ) -> None:
        self._total = total_count(total)
        self._iter = aiter(aiterable)
        self._sink = sink
        self._count = 0
        self._percent: float | None = None
        self._finished = False

    @property
    def total(self) -> int:
        return self._total

    @property
    def count(self) -> int:
        return self._count

    @property
    def percent(self) -> float | None:
        return self._percent

    def __aiter__(self) -> AsyncPercentIterator[T]:
        return self

    async def __anext__(self) -> T:
        try:
            item = await anext(self._iter)
        except StopAsyncIteration:
            if not self._finished:
                self._finished = True
                logger.debug(
                    "Percent tracking finished: %d/%d items", self._count, self._total
                )
                close_sink(self._sink, percent_of(self._count, self._total))
            raise
        self._count += 1
        self._percent = percent_of(self._count, self._total)
        self._sink(self._percent)
        return item


def atrack_percent_with(
    aiterable: AsyncIterable[T],
    total: int,
    sink: Sink,
) -> AsyncIterator[T]:
    return AsyncPercentIterator(aiterable, total, sink)


def atrack_percent(
    aiterable: AsyncIterable[T],
    total: int,
    *,
    stream: TextIO | None = None,
    config: BarConfig | None = None,
) -> AsyncIterator[T]:
    """Async version of :func:`iter_progress.percent.tracker.track_percent`."""
    return AsyncPercentIterator(aiterable, total, BarSink(stream, config))
