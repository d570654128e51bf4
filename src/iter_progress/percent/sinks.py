"""Sinks that receive the percentages reported by PercentIterator."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import Protocol, TextIO, runtime_checkable

from iter_progress.config.schema import BarConfig
from iter_progress.errors import ConfigurationError
from iter_progress.ratelimit.gate import RateLimit


@runtime_checkable
class Sink(Protocol):
    """Anything that accepts one percentage per call.

    A sink may also define ``close(final)``, which the tracker calls once
    when the wrapped iterator is exhausted, passing the percentage actually
    reached (0.0 for an empty run with a non-zero total).
    """

    def __call__(self, percent: float) -> None: ...


def close_sink(sink: Sink, final: float) -> None:
    close = getattr(sink, "close", None)
    if callable(close):
        close(final)


class BarSink:
    """Draws ``|#####     |  42.0%`` on a single, repeatedly rewritten line.

    Redraws are throttled to one per ``config.redraw_interval`` seconds;
    a report at or above 100% is always drawn. Values above 100 (a wrong
    total) are printed as-is but the bar itself never overflows.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        config: BarConfig | None = None,
        *,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self._stream = stream
        self._config = config or BarConfig()
        self._gate = RateLimit(self._config.redraw_interval, clock=clock)
        self._last: float | None = None
        self._closed = False

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def render(self, percent: float) -> str:
        width = self._config.width
        filled = int(min(max(percent, 0.0), 100.0) * width / 100.0)
        bar = self._config.fill * filled + self._config.empty * (width - filled)
        return f"\r|{bar}| {percent:5.1f}%"

    def _draw(self, percent: float) -> None:
        self.stream.write(self.render(percent))
        self.stream.flush()

    def __call__(self, percent: float) -> None:
        self._last = percent
        if percent >= 100.0:
            self._gate.mark()
            self._draw(percent)
        else:
            self._gate.act(lambda: self._draw(percent))

    def close(self, final: float | None = None) -> None:
        """Draw the final state and end the line.

        Without *final* the last reported value is drawn, or a complete
        bar if nothing was reported.
        """
        if self._closed:
            return
        self._closed = True
        if final is None:
            final = 100.0 if self._last is None else self._last
        self.stream.write(self.render(final) + "\n")
        self.stream.flush()


class LoggingSink:
    """Logs progress every *step* percent, and once more at completion."""

    def __init__(
        self,
        logger: logging.Logger | None = None,
        *,
        level: int = logging.INFO,
        step: float = 10.0,
        label: str = "progress",
    ) -> None:
        if step <= 0:
            raise ConfigurationError(f"step must be > 0, got {step!r}")
        self._logger = logger or logging.getLogger(__name__)
        self._level = level
        self._step = step
        self._label = label
        self._next = step
        self._completed = False

    def __call__(self, percent: float) -> None:
        crossed = percent >= self._next
        finished = percent >= 100.0 and not self._completed
        if not (crossed or finished):
            return
        self._logger.log(self._level, "%s %.1f%%", self._label, percent)
        while self._next <= percent:
            self._next += self._step
        if percent >= 100.0:
            self._completed = True
