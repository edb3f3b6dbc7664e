"""Configuration file schema, with YAML loading and dumping."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

import yaml

DEFAULT_MAX_FILE_SIZE = 1024 * 1024
DEFAULT_FORMAT = "text"
DEFAULT_SEVERITY = "low"
DEFAULT_CONTEXT_LINES = 1
DEFAULT_MAX_COMMIT_DEPTH = 1000


class ConfigError(ValueError):
    """Raised when configuration data does not fit the schema."""


def _is_str(value: Any) -> bool:
    return isinstance(value, str)


def _is_bool(value: Any) -> bool:
    return isinstance(value, bool)


def _is_uint(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _is_str_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def _mapping(value: Any, where: str) -> dict:
    if value is None and where == "config":
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"{where}: expected a mapping, got {value!r}")
    return value


def _optional(data: dict, key: str, check: Callable[[Any], bool], default: Any, where: str) -> Any:
    if key not in data:
        return default
    value = data[key]
    if not check(value):
        raise ConfigError(f"{where}.{key}: invalid value {value!r}")
    return list(value) if isinstance(value, list) else value


def _required_str(data: dict, key: str, where: str) -> str:
    if key not in data:
        raise ConfigError(f"{where}: missing field '{key}'")
    value = data[key]
    if not isinstance(value, str):
        raise ConfigError(f"{where}.{key}: expected a string, got {value!r}")
    return value


def _optional_str_or_none(data: dict, key: str, where: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ConfigError(f"{where}.{key}: expected a string, got {value!r}")
    return value


def _optional_float_or_none(data: dict, key: str, where: str) -> float | None:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"{where}.{key}: expected a number, got {value!r}")
    return float(value)


@dataclass
class ScanConfig:
    """What to scan: path globs, size limit and thread count (0 = auto)."""

    exclude: list[str] = field(default_factory=list)
    include: list[str] = field(default_factory=list)
    max_file_size: int = DEFAULT_MAX_FILE_SIZE
    threads: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> "ScanConfig":
        data = _mapping(data, "scan")
        return cls(
            exclude=_optional(data, "exclude", _is_str_list, [], "scan"),
            include=_optional(data, "include", _is_str_list, [], "scan"),
            max_file_size=_optional(data, "max_file_size", _is_uint, DEFAULT_MAX_FILE_SIZE, "scan"),
            threads=_optional(data, "threads", _is_uint, 0, "scan"),
        )

    def to_dict(self) -> dict:
        return {
            "exclude": list(self.exclude),
            "include": list(self.include),
            "max_file_size": self.max_file_size,
            "threads": self.threads,
        }


@dataclass
class GitConfig:
    """Options for scanning git history."""

    max_commit_depth: int = DEFAULT_MAX_COMMIT_DEPTH
    scan_all_branches: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> "GitConfig":
        data = _mapping(data, "git")
        return cls(
            max_commit_depth=_optional(
                data, "max_commit_depth", _is_uint, DEFAULT_MAX_COMMIT_DEPTH, "git"
            ),
            scan_all_branches=_optional(data, "scan_all_branches", _is_bool, False, "git"),
        )

    def to_dict(self) -> dict:
        return {
            "max_commit_depth": self.max_commit_depth,
            "scan_all_branches": self.scan_all_branches,
        }


@dataclass
class OutputConfig:
    """How results are reported."""

    format: str = DEFAULT_FORMAT
    redact: bool = True
    color: bool = True
    context_lines: int = DEFAULT_CONTEXT_LINES

    @classmethod
    def from_dict(cls, data: Any) -> "OutputConfig":
        data = _mapping(data, "output")
        return cls(
            format=_optional(data, "format", _is_str, DEFAULT_FORMAT, "output"),
            redact=_optional(data, "redact", _is_bool, True, "output"),
            color=_optional(data, "color", _is_bool, True, "output"),
            context_lines=_optional(
                data, "context_lines", _is_uint, DEFAULT_CONTEXT_LINES, "output"
            ),
        )

    def to_dict(self) -> dict:
        return {
            "format": self.format,
            "redact": self.redact,
            "color": self.color,
            "context_lines": self.context_lines,
        }


@dataclass
class AllowlistEntryConfig:
    """An allowlist pattern, optionally limited to certain files."""

    pattern: str
    files: list[str] = field(default_factory=list)
    reason: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "AllowlistEntryConfig":
        where = "rules.allowlist"
        data = _mapping(data, where)
        return cls(
            pattern=_required_str(data, "pattern", where),
            files=_optional(data, "files", _is_str_list, [], where),
            reason=_optional_str_or_none(data, "reason", where),
        )

    def to_dict(self) -> dict:
        return {"pattern": self.pattern, "files": list(self.files), "reason": self.reason}


@dataclass
class CustomRuleConfig:
    """A user-defined detection rule."""

    id: str
    description: str
    pattern: str
    severity: str = DEFAULT_SEVERITY
    entropy_threshold: float | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "CustomRuleConfig":
        where = "rules.custom_rules"
        data = _mapping(data, where)
        return cls(
            id=_required_str(data, "id", where),
            description=_required_str(data, "description", where),
            pattern=_required_str(data, "pattern", where),
            severity=_optional(data, "severity", _is_str, DEFAULT_SEVERITY, where),
            entropy_threshold=_optional_float_or_none(data, "entropy_threshold", where),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "description": self.description,
            "pattern": self.pattern,
            "severity": self.severity,
            "entropy_threshold": self.entropy_threshold,
        }


def _list_of(value: Any, where: str, build: Callable[[Any], Any]) -> list:
    if not isinstance(value, list):
        raise ConfigError(f"{where}: expected a list, got {value!r}")
    return [build(item) for item in value]


@dataclass
class RulesConfig:
    """Rule selection, allowlisting and custom rules."""

    min_severity: str = DEFAULT_SEVERITY
    disable: list[str] = field(default_factory=list)
    allowlist: list[AllowlistEntryConfig] = field(default_factory=list)
    allow_fingerprints: list[str] = field(default_factory=list)
    custom_rules: list[CustomRuleConfig] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "RulesConfig":
        data = _mapping(data, "rules")
        return cls(
            min_severity=_optional(data, "min_severity", _is_str, DEFAULT_SEVERITY, "rules"),
            disable=_optional(data, "disable", _is_str_list, [], "rules"),
            allowlist=_list_of(
                data.get("allowlist", []), "rules.allowlist", AllowlistEntryConfig.from_dict
            ),
            allow_fingerprints=_optional(data, "allow_fingerprints", _is_str_list, [], "rules"),
            custom_rules=_list_of(
                data.get("custom_rules", []), "rules.custom_rules", CustomRuleConfig.from_dict
            ),
        )

    def to_dict(self) -> dict:
        return {
            "min_severity": self.min_severity,
            "disable": list(self.disable),
            "allowlist": [entry.to_dict() for entry in self.allowlist],
            "allow_fingerprints": list(self.allow_fingerprints),
            "custom_rules": [rule.to_dict() for rule in self.custom_rules],
        }


@dataclass
class Config:
    """The complete scanner configuration."""

    scan: ScanConfig = field(default_factory=ScanConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    rules: RulesConfig = field(default_factory=RulesConfig)
    git: GitConfig = field(default_factory=GitConfig)

    @classmethod
    def minimal(cls) -> "Config":
        return cls()

    @classmethod
    def full(cls) -> "Config":
        """A configuration showing every option with sample values."""
        return cls(
            scan=ScanConfig(exclude=["**/test/**", "**/*.test.*"]),
            output=OutputConfig(),
            rules=RulesConfig(
                allowlist=[
                    AllowlistEntryConfig(
                        pattern="EXAMPLE|example|test|fake",
                        reason="Test/example values",
                    )
                ],
                custom_rules=[
                    CustomRuleConfig(
                        id="internal-api-key",
                        description="Internal API key format",
                        pattern="INT_[A-Z0-9]{32}",
                        severity="high",
                    )
                ],
            ),
            git=GitConfig(),
        )

    @classmethod
    def from_dict(cls, data: Any) -> "Config":
        """Build a config from parsed data; missing sections take defaults."""
        data = _mapping(data, "config")
        return cls(
            scan=ScanConfig.from_dict(data["scan"]) if "scan" in data else ScanConfig(),
            output=OutputConfig.from_dict(data["output"]) if "output" in data else OutputConfig(),
            rules=RulesConfig.from_dict(data["rules"]) if "rules" in data else RulesConfig(),
            git=GitConfig.from_dict(data["git"]) if "git" in data else GitConfig(),
        )

    @classmethod
    def from_yaml(cls, text: str) -> "Config":
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigError(f"invalid YAML: {exc}") from exc
        return cls.from_dict(data)

    def to_dict(self) -> dict:
        return {
            "scan": self.scan.to_dict(),
            "output": self.output.to_dict(),
            "rules": self.rules.to_dict(),
            "git": self.git.to_dict(),
        }

    def to_yaml(self) -> str:
        return yaml.safe_dump(self.to_dict(), sort_keys=False, default_flow_style=False)