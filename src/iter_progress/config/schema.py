"""Pydantic v2 configuration models for the adapters."""

from __future__ import annotations

import logging
import operator
from datetime import timedelta
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from iter_progress.errors import ConfigurationError


class RateLimitConfig(BaseModel):
    """Minimum interval between yields, in seconds."""

    interval: float = Field(default=0.0, ge=0.0, allow_inf_nan=False)

    @field_validator("interval", mode="before")
    @classmethod
    def _timedelta_to_seconds(cls, value: Any) -> Any:
        if isinstance(value, timedelta):
            return value.total_seconds()
        return value


class PercentConfig(BaseModel):
    total: int = Field(ge=0)


class BarConfig(BaseModel):
    """Rendering options for the default textual progress bar."""

    width: int = Field(default=50, ge=1)
    redraw_interval: float = Field(default=0.1, ge=0.0, allow_inf_nan=False)
    fill: str = Field(default="#", min_length=1, max_length=1)
    empty: str = Field(default=" ", min_length=1, max_length=1)


class ProgressConfig(BaseModel):
    """Top-level configuration, usually loaded from YAML."""

    rate_limit: RateLimitConfig = Field(default_factory=RateLimitConfig)
    bar: BarConfig = Field(default_factory=BarConfig)
    log_level: str = "INFO"
    adapter_log_level: str | None = None

    @field_validator("log_level", "adapter_log_level")
    @classmethod
    def _known_level(cls, value: str | None) -> str | None:
        if value is None:
            return None
        name = value.upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"unknown log level {value!r}")
        return name


def interval_seconds(interval: float | timedelta) -> float:
    """Validate a pacing interval and return it as float seconds."""
    try:
        return RateLimitConfig(interval=interval).interval
    except ValidationError as exc:
        raise ConfigurationError(
            f"invalid interval {interval!r}: expected a non-negative "
            "number of seconds or a timedelta"
        ) from exc


def total_count(total: int) -> int:
    """Validate a caller-supplied item count."""
    try:
        return PercentConfig(total=total).total
    except ValidationError as exc:
        raise ConfigurationError(
            f"invalid total {total!r}: expected a non-negative integer"
        ) from exc


def resolve_total(iterable: Any, total: int | None) -> int:
    """Return *total*, or the length of *iterable* when *total* is None.

    Must be called before ``iter(iterable)`` so that sized containers
    report their full length rather than what remains.
    """
    if total is not None:
        return total_count(total)
    hint = operator.length_hint(iterable, -1)
    if hint < 0:
        raise ConfigurationError(
            f"cannot determine the length of {type(iterable).__name__!r}; "
            "pass total explicitly"
        )
    return hint
