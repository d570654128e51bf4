"""Iterator adapter that paces the items of another iterator."""

from __future__ import annotations

import logging
import operator
import threading
from collections.abc import Callable, Iterable, Iterator
from datetime import timedelta
from typing import Generic, TypeVar

from iter_progress.errors import IterationCancelled

from .gate import RateLimit

logger = logging.getLogger(__name__)

T = TypeVar("T")

_EMPTY = object()


class RateLimitIterator(Generic[T]):
    """Wraps an iterator and sleeps if it is called faster than *interval*.

    Items are passed through unchanged. The first item is released
    immediately; every later item is held back until *interval* seconds
    have passed since the previous one was released. The wait happens
    only once the wrapped iterator has produced an item, so exhaustion is
    reported without delay and time spent producing an item counts
    towards the interval.

    Exceptions raised by the wrapped iterator propagate unchanged; only
    ``StopIteration`` is treated as exhaustion. If a wait is cancelled
    through *cancel*, the item it was holding back is returned by the next
    call once the event has been cleared.

    Typically created using :func:`rate_limit`.
    """

    def __init__(
        self,
        iterable: Iterable[T],
        interval: float | timedelta,
        *,
        clock: Callable[[], float] | None = None,
        sleep: Callable[[float], None] | None = None,
        cancel: threading.Event | None = None,
    ) -> None:
        self._gate = RateLimit(interval, clock=clock, sleep=sleep)
        self._iter = iter(iterable)
        self._cancel = cancel
        self._pending: object = _EMPTY
        self._yielded = 0
        logger.debug(
            "Rate limiting %s to one item per %.3fs",
            type(self._iter).__name__,
            self._gate.interval,
        )

    @property
    def interval(self) -> float:
        return self._gate.interval

    @property
    def yielded(self) -> int:
        return self._yielded

    def __iter__(self) -> RateLimitIterator[T]:
        return self

    def __next__(self) -> T:
        if self._cancel is not None and self._cancel.is_set():
            raise IterationCancelled("rate-limited iteration was cancelled")
        if self._pending is not _EMPTY:
            item, self._pending = self._pending, _EMPTY
        else:
            try:
                item = next(self._iter)
            except StopIteration:
                logger.debug(
                    "Rate-limited iterator exhausted after %d items", self._yielded
                )
                raise
        try:
            self._gate.wait(self._cancel)
        except IterationCancelled:
            # Returned by the next call.
            self._pending = item
            raise
        self._gate.mark()
        self._yielded += 1
        return item

    def __length_hint__(self) -> int:
        hint = operator.length_hint(self._iter, -1)
        if hint < 0:
            return NotImplemented
        return hint + (self._pending is not _EMPTY)


def rate_limit(
    iterable: Iterable[T],
    interval: float | timedelta,
    *,
    clock: Callable[[], float] | None = None,
    sleep: Callable[[float], None] | None = None,
    cancel: threading.Event | None = None,
) -> Iterator[T]:
    """Take an iterable and return an iterator that yields at most once per
    *interval* (seconds or timedelta), otherwise transparent.

        start = time.monotonic()
        for i in rate_limit(range(10), 0.01):
            ...
        assert time.monotonic() - start >= 0.09
    """
    return RateLimitIterator(
        iterable, interval, clock=clock, sleep=sleep, cancel=cancel
    )
