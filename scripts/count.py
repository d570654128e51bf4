#!/usr/bin/env python3
"""Count to 113 behind a progress bar.

Each count is rate limited (100ms unless a config file says otherwise)
so the bar does not complete instantly.

Usage: count.py [config.yaml]
"""

from __future__ import annotations

import sys

from iter_progress import rate_limit, track_percent
from iter_progress.config.loader import load_config
from iter_progress.config.schema import ProgressConfig, RateLimitConfig
from iter_progress.utils.logging_setup import setup_logging_from_config


def main(config_path: str | None = None) -> None:
    if config_path:
        cfg = load_config(config_path)
    else:
        cfg = ProgressConfig(rate_limit=RateLimitConfig(interval=0.1), log_level="WARNING")
    setup_logging_from_config(cfg)
    for _ in track_percent(rate_limit(range(113), cfg.rate_limit.interval), config=cfg.bar):
        pass


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else None)
