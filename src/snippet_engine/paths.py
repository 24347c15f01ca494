"""Config and backup path resolution.

Uses environment variables when available, falls back to conventional
defaults.

Environment variables:
    SNIPPET_ENGINE_CONFIG_DIR: settings directory (default: ~/.config/snippet-engine)
    SNIPPET_ENGINE_BACKUP_DIR: backup snapshots (default: <config dir>/backup)
"""

from __future__ import annotations

import os
from pathlib import Path

_DEFAULT_CONFIG_DIR = Path.home() / ".config" / "snippet-engine"


def config_dir() -> Path:
    """Return the directory holding settings.yaml."""
    return Path(os.environ.get("SNIPPET_ENGINE_CONFIG_DIR", str(_DEFAULT_CONFIG_DIR)))


def settings_path() -> Path:
    """Return the path to settings.yaml."""
    return config_dir() / "settings.yaml"


def backup_dir() -> Path:
    """Return the directory that receives source-tree snapshots."""
    env = os.environ.get("SNIPPET_ENGINE_BACKUP_DIR")
    if env:
        return Path(env)
    return config_dir() / "backup"
