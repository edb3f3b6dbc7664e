"""Allowlist for ignoring known false positives."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from .schema import AllowlistEntryConfig


@dataclass
class AllowlistEntry:
    """A pattern whose matches are skipped, optionally only in certain files."""

    pattern: re.Pattern
    files: list[str] | None = None
    reason: str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.pattern, str):
            self.pattern = re.compile(self.pattern)

    def matches(self, value: str, file: str | os.PathLike) -> bool:
        """True if the value matches the pattern and the file passes the filter."""
        if not self.pattern.search(value):
            return False
        if self.files is not None:
            file_str = os.fspath(file)
            if not any(fragment in file_str for fragment in self.files):
                return False
        return True


@dataclass
class Allowlist:
    """Allowlist patterns together with fingerprints of ignored findings."""

    entries: list[AllowlistEntry] = field(default_factory=list)
    fingerprints: set[str] = field(default_factory=set)

    def add(self, entry: AllowlistEntry) -> None:
        self.entries.append(entry)

    def add_pattern(self, pattern: str) -> None:
        """Add a pattern; raises re.error if it is not a valid regex."""
        self.entries.append(AllowlistEntry(re.compile(pattern)))

    def add_fingerprint(self, fingerprint: str) -> None:
        self.fingerprints.add(fingerprint)

    def is_fingerprint_allowed(self, fingerprint: str) -> bool:
        return fingerprint in self.fingerprints

    def is_allowed(self, value: str, file: str | os.PathLike) -> bool:
        """True if any entry matches this value in this file."""
        return any(entry.matches(value, file) for entry in self.entries)

    def is_finding_allowed(self, value: str, file: str | os.PathLike, fingerprint: str) -> bool:
        """True if the finding is allowed by fingerprint or by pattern."""
        return self.is_fingerprint_allowed(fingerprint) or self.is_allowed(value, file)

    @classmethod
    def from_config(
        cls,
        entries: Iterable[AllowlistEntryConfig],
        fingerprints: Iterable[str] = (),
    ) -> "Allowlist":
        """Build from configuration; entries with invalid patterns are skipped."""
        allowlist = cls()
        for entry in entries:
            try:
                regex = re.compile(entry.pattern)
            except re.error:
                continue
            allowlist.add(
                AllowlistEntry(
                    pattern=regex,
                    files=list(entry.files) if entry.files else None,
                    reason=entry.reason,
                )
            )
        for fingerprint in fingerprints:
            allowlist.add_fingerprint(fingerprint)
        return allowlist


__all__ = ["AllowlistEntry", "Allowlist", "Path"]