#!/usr/bin/env python3
"""Compute a long run of Fibonacci numbers behind a progress bar.

Fibonacci is a sized iterable, so the bar needs no explicit total.

Usage: fib.py [length] [config.yaml]
"""

from __future__ import annotations

import sys
from collections.abc import Iterator

from iter_progress import track_percent
from iter_progress.config.loader import load_config
from iter_progress.config.schema import ProgressConfig
from iter_progress.utils.logging_setup import setup_logging_from_config


class Fibonacci:
    """The first *length* Fibonacci numbers, starting 0, 1, 1, 2, ..."""

    def __init__(self, length: int) -> None:
        self.length = length

    def __len__(self) -> int:
        return self.length

    def __iter__(self) -> Iterator[int]:
        a, b = 0, 1
        for _ in range(self.length):
            yield a
            a, b = b, a + b


def main(length: int = 102043, config_path: str | None = None) -> None:
    cfg = load_config(config_path) if config_path else ProgressConfig(log_level="WARNING")
    setup_logging_from_config(cfg)
    sys.set_int_max_str_digits(0)
    last = 0
    for n in track_percent(Fibonacci(length), config=cfg.bar):
        last = n
    print(f"The {length}th member of the Fibonacci sequence is {len(str(last))} digits long")


if __name__ == "__main__":
    main(
        int(sys.argv[1]) if len(sys.argv) > 1 else 102043,
        sys.argv[2] if len(sys.argv) > 2 else None,
    )
