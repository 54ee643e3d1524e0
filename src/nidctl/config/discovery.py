"""Locate the ``nidctl.toml`` that settings are read from.

Lookup order: an explicit ``--config`` path, then ``NIDCTL_CONFIG``,
then the nearest ``nidctl.toml`` above the working directory.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "nidctl.toml"
CONFIG_ENV_VAR = "NIDCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for ``nidctl.toml``.

    A set ``NIDCTL_CONFIG`` short-circuits the walk: its file is
    returned when it exists, otherwise the NIDs run on defaults.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        candidate = Path(env_path)
        return candidate if candidate.is_file() else None

    directory = (start or Path.cwd()).resolve()
    for folder in (directory, *directory.parents):
        candidate = folder / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def resolve_config(config_path: str | None = None, start: Path | None = None) -> Path | None:
    """Pick the config file for one CLI invocation.

    An explicit *config_path* that does not name a file yields None
    rather than falling back to discovery.
    """
    if config_path:
        explicit = Path(config_path)
        return explicit if explicit.is_file() else None
    return find_config(start)
