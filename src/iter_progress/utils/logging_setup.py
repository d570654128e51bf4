"""Logging configuration for scripts that drive the adapters."""

from __future__ import annotations

import logging
import sys

from iter_progress.config.schema import ProgressConfig

LOG_FORMAT = "%(asctime)s [%(levelname)-7s] %(name)s: %(message)s"

PACKAGE_LOGGER = "iter_progress"


def _numeric(level: str) -> int:
    return getattr(logging, level.upper(), logging.INFO)


def setup_logging(level: str = "INFO", *, adapter_level: str | None = None) -> None:
    """Configure the root logger for a script.

    The adapters log every rate-limit wait at DEBUG. *adapter_level* sets
    the ``iter_progress`` loggers apart from everything else, so those
    waits can be shown without turning on DEBUG globally. Unknown level
    names fall back to INFO.
    """
    logging.basicConfig(
        level=_numeric(level),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )
    package = logging.getLogger(PACKAGE_LOGGER)
    package.setLevel(_numeric(adapter_level) if adapter_level else logging.NOTSET)


def setup_logging_from_config(config: ProgressConfig) -> None:
    setup_logging(config.log_level, adapter_level=config.adapter_log_level)
