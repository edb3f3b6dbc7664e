"""Deciding which paths to scan: built-in excludes, globs and .gitignore."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

DEFAULT_EXCLUDES = (
    "**/.git/**",
    "**/node_modules/**",
    "**/vendor/**",
    "**/__pycache__/**",
    "**/target/**",
    "**/dist/**",
    "**/build/**",
    "**/*.min.js",
    "**/*.min.css",
    "**/*.map",
    "**/*.lock",
    "**/package-lock.json",
    "**/yarn.lock",
    "**/Cargo.lock",
    "**/poetry.lock",
    "**/*.wasm",
    "**/*.pyc",
    "**/*.pyo",
    "**/*.so",
    "**/*.dylib",
    "**/*.dll",
)


def _translate_class(part: str, start: int) -> tuple[str, int]:
    """Translate a [...] class starting at part[start]; return (regex, next index)."""
    pos = start + 1
    negate = pos < len(part) and part[pos] in "!^"
    if negate:
        pos += 1
    members = []
    first = True
    while pos < len(part):
        char = part[pos]
        if char == "]" and not first:
            body = "".join(members)
            return ("[^" if negate else "[") + body + "]", pos + 1
        members.append("-" if char == "-" else re.escape(char))
        first = False
        pos += 1
    raise ValueError(f"unclosed character class in glob: {part!r}")


def _translate_part(part: str, literal_separator: bool) -> str:
    """Translate one path component (no '/') of a glob into a regex."""
    star = "[^/]*" if literal_separator else ".*"
    single = "[^/]" if literal_separator else "."
    out = []
    pos = 0
    while pos < len(part):
        char = part[pos]
        if char == "*":
            out.append(star)
            pos += 1
        elif char == "?":
            out.append(single)
            pos += 1
        elif char == "[":
            regex, pos = _translate_class(part, pos)
            out.append(regex)
        elif char == "{":
            end = part.find("}", pos)
            if end < 0:
                raise ValueError(f"unclosed alternation in glob: {part!r}")
            options = part[pos + 1 : end].split(",")
            if any("{" in option for option in options):
                raise ValueError(f"nested alternation in glob: {part!r}")
            out.append(
                "(?:" + "|".join(_translate_part(o, literal_separator) for o in options) + ")"
            )
            pos = end + 1
        elif char == "\\":
            if pos + 1 >= len(part):
                raise ValueError(f"dangling escape in glob: {part!r}")
            out.append(re.escape(part[pos + 1]))
            pos += 2
        else:
            out.append(re.escape(char))
            pos += 1
    return "".join(out)


def _translate(pattern: str, literal_separator: bool) -> re.Pattern:
    parts = pattern.split("/")
    if parts == ["**"]:
        return re.compile(".*", re.DOTALL)
    last = len(parts) - 1
    out = []
    for index, part in enumerate(parts):
        if part == "**":
            if index == 0:
                out.append("(?:.*/)?")
            elif index == last:
                out.append("/.*")
            else:
                out.append("(?:/.*)?")
            continue
        after_prefix = index == 1 and parts[0] == "**"
        if index > 0 and not after_prefix:
            out.append("/")
        out.append(_translate_part(part, literal_separator))
    return re.compile("".join(out), re.DOTALL)


def glob_to_regex(pattern: str) -> re.Pattern:
    """Compile a glob into a regex meant for fullmatch against a whole path.

    '*' and '?' may cross '/'; '**/' matches any leading directories,
    '/**' anything below, and '/**/' zero or more directories. Classes
    ([a-z], [!x]) and alternations ({a,b}) are supported. Raises ValueError
    for a malformed glob.
    """
    return _translate(pattern, literal_separator=False)


@dataclass
class _GitignoreRule:
    regex: re.Pattern
    negate: bool
    dir_only: bool


def _parse_gitignore(text: str) -> list[_GitignoreRule]:
    rules = []
    for raw in text.splitlines():
        line = raw
        while line.endswith(" ") and not line.endswith("\\ "):
            line = line[:-1]
        if not line or line.startswith("#"):
            continue
        negate = line.startswith("!")
        if negate:
            line = line[1:]
        dir_only = line.endswith("/")
        if dir_only:
            line = line[:-1]
        if not line:
            continue
        anchored = line.startswith("/")
        if anchored:
            line = line[1:]
        elif "/" not in line:
            line = "**/" + line
        try:
            regex = _translate(line, literal_separator=True)
        except ValueError:
            continue
        rules.append(_GitignoreRule(regex, negate, dir_only))
    return rules


def _as_posix(path: str | os.PathLike) -> str:
    text = os.fspath(path)
    return text.replace(os.sep, "/") if os.sep != "/" else text


class PathFilter:
    """Decides whether a path is scanned.

    A path is skipped if the root's .gitignore ignores it or it matches a
    built-in or extra exclude glob; when include globs are given, it must
    also match one of them.
    """

    def __init__(
        self,
        root: str | os.PathLike,
        exclude_patterns: Iterable[str] = (),
        include_patterns: Iterable[str] = (),
    ) -> None:
        self.root = Path(root)
        self._gitignore: list[_GitignoreRule] | None = None
        gitignore_path = self.root / ".gitignore"
        if gitignore_path.exists():
            try:
                text = gitignore_path.read_text(encoding="utf-8", errors="replace")
            except OSError:
                text = ""
            self._gitignore = _parse_gitignore(text)

        self._excludes = self._compile_all((*DEFAULT_EXCLUDES, *exclude_patterns))
        includes = list(include_patterns)
        self._includes = self._compile_all(includes) if includes else None

    @staticmethod
    def _compile_all(patterns: Iterable[str]) -> list[re.Pattern]:
        compiled = []
        for pattern in patterns:
            try:
                compiled.append(glob_to_regex(pattern))
            except ValueError:
                continue
        return compiled

    def _gitignored(self, path: Path) -> bool:
        if not self._gitignore:
            return False
        try:
            relative = path.relative_to(self.root)
        except ValueError:
            relative = path
        candidate = _as_posix(relative)
        is_dir = path.is_dir()
        for rule in reversed(self._gitignore):
            if rule.dir_only and not is_dir:
                continue
            if rule.regex.fullmatch(candidate):
                return not rule.negate
        return False

    def should_scan(self, path: str | os.PathLike) -> bool:
        path = Path(path)
        if self._gitignored(path):
            return False
        path_str = _as_posix(path)
        if any(regex.fullmatch(path_str) for regex in self._excludes):
            return False
        if self._includes is not None and not any(
            regex.fullmatch(path_str) for regex in self._includes
        ):
            return False
        return True