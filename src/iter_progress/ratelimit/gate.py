"""A simple never-faster-than-the-interval rate limiter."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable
from datetime import timedelta
from typing import TypeVar

from iter_progress.config.schema import interval_seconds
from iter_progress.errors import IterationCancelled

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RateLimit:
    """Gate that lets an action through at most once per *interval*.

    The gate starts open, so the first action always runs. Actions can
    either be skipped while the gate is closed (``try_act``, ``act``) or
    delayed until it opens (``sleep_act``):

        limiter = RateLimit(5.0)
        ran = [i for i in range(3, 10) if limiter.act(lambda: None)]
        # ran == [3]

    *clock* must be monotonic; *sleep* is only used by the blocking
    methods.
    """

    def __init__(
        self,
        interval: float | timedelta,
        *,
        clock: Callable[[], float] | None = None,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        self._interval = interval_seconds(interval)
        self._clock = clock or time.monotonic
        self._sleep = sleep or time.sleep
        self._last: float | None = None

    @property
    def interval(self) -> float:
        return self._interval

    def remaining(self) -> float:
        """Seconds until the gate opens; 0.0 if it is open now."""
        if self._last is None:
            return 0.0
        shortfall = self._interval - (self._clock() - self._last)
        return shortfall if shortfall > 0 else 0.0

    def mark(self) -> None:
        """Record that an action happened now."""
        self._last = self._clock()

    def reset(self) -> None:
        self._last = None

    def try_act(self, fn: Callable[[], T]) -> T | None:
        """Run *fn* if the gate is open and return its result, else None."""
        if self.remaining() > 0:
            return None
        self.mark()
        return fn()

    def act(self, fn: Callable[[], object]) -> bool:
        """Run *fn* if the gate is open; return whether it ran."""
        if self.remaining() > 0:
            return False
        self.mark()
        fn()
        return True

    def wait(self, cancel: threading.Event | None = None) -> float:
        """Block until the gate opens and return how long was waited.

        With a *cancel* event the wait is done on the event instead of
        *sleep*, and ``IterationCancelled`` is raised as soon as it is set.
        """
        shortfall = self.remaining()
        if cancel is not None and cancel.is_set():
            raise IterationCancelled("cancelled before rate limit wait")
        if shortfall <= 0:
            return 0.0
        logger.debug("Rate limit: waiting %.3fs", shortfall)
        if cancel is not None:
            if cancel.wait(shortfall):
                raise IterationCancelled(
                    f"cancelled during a {shortfall:.3f}s rate limit wait"
                )
        else:
            self._sleep(shortfall)
        return shortfall

    def sleep_act(
        self, fn: Callable[[], T], cancel: threading.Event | None = None
    ) -> T:
        """Run *fn*, sleeping first until the gate opens if necessary.

        The new baseline is read from the clock after the wait so that
        oversleeping does not accumulate across calls.
        """
        self.wait(cancel)
        self.mark()
        return fn()
