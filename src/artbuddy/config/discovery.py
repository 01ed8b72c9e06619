"""Locate ``artbuddy.toml``.

An explicit ``ARTBUDDY_CONFIG`` path wins; otherwise the nearest
``artbuddy.toml`` in the start directory or one of its parents is used.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "artbuddy.toml"
CONFIG_ENV_VAR = "ARTBUDDY_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file for *start* (default: cwd), or None.

    When ``ARTBUDDY_CONFIG`` is set but names no file, the result is None
    and no walk-up happens.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        explicit = Path(env_path)
        return explicit if explicit.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
