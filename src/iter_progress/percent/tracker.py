"""Iterator adapter that reports how much of a bounded iterator is consumed."""

from __future__ import annotations

import logging
import operator
from collections.abc import Iterable, Iterator
from typing import Generic, TextIO, TypeVar

from iter_progress.config.schema import BarConfig, resolve_total

from .sinks import BarSink, Sink, close_sink

logger = logging.getLogger(__name__)

T = TypeVar("T")


def percent_of(count: int, total: int) -> float:
    """Percentage of *total* represented by *count*.

    A total of zero reports 100.0: yielding anything from a sequence
    declared empty is already past its end.
    """
    if total == 0:
        return 100.0
    return 100.0 * count / total


class PercentIterator(Generic[T]):
    """Wraps a bounded iterator and reports progress after every item.

    After each item is pulled from the wrapped iterator the counter is
    incremented and ``sink(percent)`` is called, so the reported value
    includes the item about to be returned. *total* is trusted: if the
    wrapped iterator yields more items than that, percentages above 100
    are reported rather than clamped.

    Exceptions raised by the wrapped iterator propagate unchanged and do
    not close the sink.
    """

    def __init__(
        self,
        iterable: Iterable[T],
        total: int | None,
        sink: Sink,
    ) -> None:
        self._total = resolve_total(iterable, total)
        self._iter = iter(iterable)
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
        """The last reported percentage, or None before the first item."""
        return self._percent

    def __iter__(self) -> PercentIterator[T]:
        return self

    def __next__(self) -> T:
        try:
            item = next(self._iter)
        except StopIteration:
            self._finish()
            raise
        self._count += 1
        if self._count > self._total:
            logger.debug(
                "Iterator yielded item %d of a declared %d", self._count, self._total
            )
        self._percent = percent_of(self._count, self._total)
        self._sink(self._percent)
        return item

    def _finish(self) -> None:
        if self._finished:
            return
        self._finished = True
        logger.debug("Percent tracking finished: %d/%d items", self._count, self._total)
        close_sink(self._sink, percent_of(self._count, self._total))

    def __length_hint__(self) -> int:
        hint = operator.length_hint(self._iter, -1)
        return NotImplemented if hint < 0 else hint


def track_percent_with(
    iterable: Iterable[T],
    total: int | None,
    sink: Sink,
) -> Iterator[T]:
    """Wrap *iterable*, calling *sink* with the percent consumed after each item.

    When *total* is None it is taken from ``len(iterable)`` or its length
    hint; iterables with neither need an explicit total.
    """
    return PercentIterator(iterable, total, sink)


def track_percent(
    iterable: Iterable[T],
    total: int | None = None,
    *,
    stream: TextIO | None = None,
    config: BarConfig | None = None,
) -> Iterator[T]:
    """Wrap *iterable* and draw a textual progress bar as it is consumed.

        for i in track_percent(range(7)):
            time.sleep(0.01)
    """
    return PercentIterator(iterable, total, BarSink(stream, config))
