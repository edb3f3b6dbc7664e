"""Finding and loading the configuration file, in order of precedence."""

from __future__ import annotations

import os
from pathlib import Path

from .schema import Config, ConfigError

CONFIG_NAMES = (
    ".secretscanner.yaml",
    ".secretscanner.yml",
    ".secretscannerignore",
)

HOME_CONFIG_NAMES = ("config.yaml", "config.yml")


def load_config(explicit_path: str | os.PathLike | None, scan_path: str | os.PathLike) -> Config:
    """Load the first usable config.

    Searched in order: the explicit path, the scan path, the git repository
    root, ~/.config/secretscanner/, and finally the built-in defaults.
    """
    if explicit_path is not None:
        config = _load_from_path(Path(explicit_path))
        if config is not None:
            return config

    scan_path = Path(scan_path)
    config = _first_config(scan_path, CONFIG_NAMES)
    if config is not None:
        return config

    repo_root = find_git_root(scan_path)
    if repo_root is not None:
        config = _first_config(repo_root, CONFIG_NAMES)
        if config is not None:
            return config

    try:
        home = Path.home()
    except (RuntimeError, KeyError):
        home = None
    if home is not None:
        config = _first_config(home / ".config" / "secretscanner", HOME_CONFIG_NAMES)
        if config is not None:
            return config

    return Config()


def _first_config(directory: Path, names: tuple[str, ...]) -> Config | None:
    for name in names:
        config = _load_from_path(directory / name)
        if config is not None:
            return config
    return None


def _load_from_path(path: Path) -> Config | None:
    """Load a config file, or None if it is missing, unreadable or invalid."""
    if not path.exists():
        return None
    try:
        content = path.read_text(encoding="utf-8")
        return Config.from_yaml(content)
    except (OSError, UnicodeDecodeError, ConfigError):
        return None


def find_git_root(start: str | os.PathLike) -> Path | None:
    """Walk up from start to the first directory holding a .git entry."""
    current = Path(start)
    if current.is_file():
        current = current.parent
    for candidate in (current, *current.parents):
        if (candidate / ".git").exists():
            return candidate
    return None