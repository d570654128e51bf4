"""Exception types raised by the adapters."""

from __future__ import annotations


class ProgressError(Exception):
    """Base class for errors raised by iter_progress itself.

    Errors raised by a wrapped iterator are never wrapped in this type;
    they propagate to the caller unchanged.
    """


class ConfigurationError(ProgressError, ValueError):
    """Raised at construction time when an adapter is given bad settings."""


class IterationCancelled(ProgressError):
    """Raised when a cancel event is set while a rate-limited iterator waits."""
