"""Line-by-line file reading with skipping of large and binary files."""

from __future__ import annotations

import os
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from .binary import is_binary_content

MAX_LINE_LENGTH = 65536
SNIFF_SIZE = 512


@dataclass
class StreamReader:
    """Reads files as numbered lines, truncating overly long ones."""

    max_line_length: int = MAX_LINE_LENGTH

    def should_skip(self, path: str | os.PathLike, max_size: int) -> bool:
        """True if the file is larger than max_size or looks binary."""
        path = Path(path)
        if path.stat().st_size > max_size:
            return True
        with path.open("rb") as handle:
            head = handle.read(SNIFF_SIZE)
        return is_binary_content(head)

    def read_file(self, path: str | os.PathLike) -> Iterator[tuple[int, str]]:
        """Yield (line_number, line) pairs, numbered from 1.

        The file is opened at once, so a missing file raises immediately.
        Iteration stops at the first line that is not valid UTF-8.
        """
        handle = open(path, "rb")
        return self._lines(handle)

    def _lines(self, handle: BinaryIO) -> Iterator[tuple[int, str]]:
        with handle:
            for line_number, raw in enumerate(handle, start=1):
                try:
                    line = raw.decode("utf-8")
                except UnicodeDecodeError:
                    return
                if len(raw) > self.max_line_length:
                    line = raw[: self.max_line_length].decode("utf-8", "ignore")
                if line.endswith("\n"):
                    line = line[:-1]
                    if line.endswith("\r"):
                        line = line[:-1]
                yield line_number, line