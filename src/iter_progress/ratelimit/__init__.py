"""Pacing: the RateLimit gate and the rate-limiting iterator adapters."""

from .async_iterator import AsyncRateLimitIterator, arate_limit
from .gate import RateLimit
from .iterator import RateLimitIterator, rate_limit

__all__ = [
    "AsyncRateLimitIterator",
    "RateLimit",
    "RateLimitIterator",
    "arate_limit",
    "rate_limit",
]
