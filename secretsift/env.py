"""Settings taken from environment variables."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

MIN_SEVERITY_VAR = "SECRET_SCANNER_MIN_SEVERITY"
NO_COLOR_VAR = "SECRET_SCANNER_NO_COLOR"
CONFIG_VAR = "SECRET_SCANNER_CONFIG"


@dataclass
class EnvConfig:
    """Values read from the environment; None where a variable is unset."""

    min_severity: str | None = None
    no_color: bool | None = None
    config_path: Path | None = None

    @classmethod
    def load(cls, environ: Mapping[str, str] | None = None) -> "EnvConfig":
        env = os.environ if environ is None else environ
        no_color_value = env.get(NO_COLOR_VAR)
        config_value = env.get(CONFIG_VAR)
        return cls(
            min_severity=env.get(MIN_SEVERITY_VAR),
            no_color=(
                None
                if no_color_value is None
                else no_color_value == "1" or no_color_value.lower() == "true"
            ),
            config_path=None if config_value is None else Path(config_value),
        )

    @staticmethod
    def no_color_env(environ: Mapping[str, str] | None = None) -> bool:
        """True if NO_COLOR or the scanner's own no-colour variable is set."""
        env = os.environ if environ is None else environ
        return "NO_COLOR" in env or NO_COLOR_VAR in env