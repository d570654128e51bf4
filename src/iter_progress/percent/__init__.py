"""Percent-progress tracking adapters and their sinks."""

from .async_tracker import AsyncPercentIterator, atrack_percent, atrack_percent_with
from .sinks import BarSink, LoggingSink, Sink
from .tracker import PercentIterator, percent_of, track_percent, track_percent_with

__all__ = [
    "AsyncPercentIterator",
    "BarSink",
    "LoggingSink",
    "PercentIterator",
    "Sink",
    "atrack_percent",
    "atrack_percent_with",
    "percent_of",
    "track_percent",
    "track_percent_with",
]
