"""Persisted user settings in settings.yaml."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from pathlib import Path

import yaml

from snippet_engine.paths import settings_path

DEFAULT_EXTENSIONS = [".cs", ".java", ".js", ".ts", ".c", ".cpp", ".h", ".hpp"]


@dataclass
class Settings:
    """User settings for folder transformation."""

    extensions: list[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    backup_dir: str | None = None
    prefer_special_solution: bool = False

    @property
    def filter_string(self) -> str:
        return " ".join(self.extensions)


def parse_extensions(text: str) -> list[str]:
    """Split a space-separated extension filter such as ``".cs .java"``.

    Raises:
        ValueError: If an entry does not start with a dot.
    """
    extensions = [e for e in text.split(" ") if e]
    for ext in extensions:
        if not ext.startswith("."):
            raise ValueError(f"Extension '{ext}' must start with '.'")
    return extensions


def load_settings(path: Path | str | None = None) -> Settings:
    """Load settings.yaml, or defaults if the file does not exist.

    Args:
        path: Path to settings file. Defaults to the config directory.

    Returns:
        Settings object.

    Raises:
        ValueError: If the file is not a YAML mapping or holds bad values.
        yaml.YAMLError: If the YAML is malformed.
    """
    p = Path(path) if path else settings_path()
    if not p.is_file():
        return Settings()

    with open(p) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"settings file at {p} is not a YAML mapping")

    settings = Settings()
    raw_ext = data.get("extensions")
    if isinstance(raw_ext, str):
        settings.extensions = parse_extensions(raw_ext)
    elif raw_ext is not None:
        settings.extensions = parse_extensions(" ".join(str(e) for e in raw_ext))
    if data.get("backup_dir"):
        settings.backup_dir = str(data["backup_dir"])
    settings.prefer_special_solution = bool(data.get("prefer_special_solution", False))
    return settings


def save_settings(settings: Settings, path: Path | str | None = None) -> Path:
    """Write settings.yaml, creating its directory if needed."""
    p = Path(path) if path else settings_path()
    p.parent.mkdir(parents=True, exist_ok=True)
    with open(p, "w") as f:
        yaml.safe_dump(asdict(settings), f, sort_keys=False)
    return p
