"""Shared path utilities for configuration file locations.

Policy (portable by default):
- Config: ``<project_root>/config/config.toml`` unless overridden by
  ``SPOTIMETA_CONFIG_FILE``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Final

ENV_CONFIG_FILE: Final[str] = "SPOTIMETA_CONFIG_FILE"

_ROOT_MARKERS: Final[tuple[str, ...]] = ("pyproject.toml", ".git")


def _find_project_root(start: Path | None = None) -> Path | None:
    """Return the nearest directory above ``start`` holding a root marker."""

    origin = start or Path(__file__).resolve()
    for candidate in origin.parents:
        if any((candidate / marker).exists() for marker in _ROOT_MARKERS):
            return candidate
    return None


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the path to the main TOML config file.

    ``SPOTIMETA_CONFIG_FILE`` wins when set to a non-blank value; otherwise
    the file sits under ``config/`` in the project root, or in the working
    directory when no root marker is found.
    """
    override = (env if env is not None else os.environ).get(ENV_CONFIG_FILE, "").strip()
    if override:
        return Path(override).expanduser().resolve()

    root = _find_project_root() or Path.cwd()
    return (root / "config" / "config.toml").resolve()


__all__ = ["ENV_CONFIG_FILE", "default_config_path"]
