"""Config file location.

A config file is either *explicit* (``--config`` or ``ARRAYPRINT_CONFIG``)
or *discovered* by walking up from the working directory.  Explicit
files are trusted to be wanted: if one is malformed the run fails.
Discovered files are opportunistic: they may only ever add settings,
never break a run.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import NamedTuple

CONFIG_FILENAME = "arrayprint.toml"
CONFIG_ENV_VAR = "ARRAYPRINT_CONFIG"


class ConfigLocation(NamedTuple):
    """Where a config file came from."""

    path: Path
    explicit: bool


def _walk_up(start: Path) -> Path | None:
    for directory in (start, *start.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def locate_config(
    config_path: str | None = None,
    start: Path | None = None,
) -> tuple[ConfigLocation | None, list[str]]:
    """Resolve the config file for this run.

    Order: *config_path*, then ``ARRAYPRINT_CONFIG``, then walk-up from
    *start* (default: cwd).  An explicit path that does not exist is
    skipped with a warning and nothing else is searched.

    Returns:
        The location (or None) and any warnings to report once logging
        is configured.
    """
    explicit = config_path or os.environ.get(CONFIG_ENV_VAR)
    if explicit:
        p = Path(explicit)
        if p.is_file():
            return ConfigLocation(p, explicit=True), []
        return None, [f"Config file {p} not found; using defaults"]

    found = _walk_up((start or Path.cwd()).resolve())
    if found is None:
        return None, []
    return ConfigLocation(found, explicit=False), []
