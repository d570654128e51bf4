"""Load and validate adapter configuration from YAML."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from iter_progress.errors import ConfigurationError

from .schema import ProgressConfig


def load_config(path: Path | str) -> ProgressConfig:
    """Read a YAML file and return a validated ProgressConfig."""
    path = Path(path)
    with path.open("r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh)
    if raw is None:
        raw = {}
    try:
        return ProgressConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigurationError(f"invalid configuration in {path}: {exc}") from exc
