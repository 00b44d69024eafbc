"""YAML-based CLI profiles.

A profile file looks like::

    default:
      process: false
      log_level: WARNING
    profiles:
      strict:
        process: true
        output: json

Settings from the named profile override ``default``; unknown profile names
fall back to ``default`` alone.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

PROFILE_KEYS: frozenset[str] = frozenset({"process", "log_level", "output"})


def load_profile(path: str | Path, name: str | None = None) -> dict[str, Any]:
    """Load *path* and return the merged settings for profile *name*."""
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    default = data.get("default", {}) if isinstance(data, dict) else {}
    profiles = data.get("profiles", {}) if isinstance(data, dict) else {}

    selected: dict[str, Any] = {}
    if name and isinstance(profiles, dict):
        cfg = profiles.get(name)
        if isinstance(cfg, dict):
            selected = cfg

    merged: dict[str, Any] = {}
    if isinstance(default, dict):
        merged.update(default)
    merged.update(selected)
    return {k: v for k, v in merged.items() if k in PROFILE_KEYS}
