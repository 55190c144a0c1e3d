"""Locate ``patternctl.toml``: env override first, then walk up from cwd."""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "patternctl.toml"
CONFIG_ENV_VAR = "PATTERNCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file governing *start* (default: cwd), or None.

    A set ``PATTERNCTL_CONFIG`` disables the walk-up even when it points
    at a missing file.
    """
    if env_path := os.environ.get(CONFIG_ENV_VAR):
        override = Path(env_path)
        return override if override.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
