"""Composable iterator adapters to pace iterators and report their progress.

    for n in track_percent(rate_limit(range(27), 0.01)):
        ...  # do something interesting
"""

from iter_progress.errors import ConfigurationError, IterationCancelled, ProgressError
from iter_progress.percent import (
    AsyncPercentIterator,
    BarSink,
    LoggingSink,
    PercentIterator,
    Sink,
    atrack_percent,
    atrack_percent_with,
    track_percent,
    track_percent_with,
)
from iter_progress.ratelimit import (
    AsyncRateLimitIterator,
    RateLimit,
    RateLimitIterator,
    arate_limit,
    rate_limit,
)

__all__ = [
    "AsyncPercentIterator",
    "AsyncRateLimitIterator",
    "BarSink",
    "ConfigurationError",
    "IterationCancelled",
    "LoggingSink",
    "PercentIterator",
    "ProgressError",
    "RateLimit",
    "RateLimitIterator",
    "Sink",
    "arate_limit",
    "atrack_percent",
    "atrack_percent_with",
    "rate_limit",
    "track_percent",
    "track_percent_with",
]
