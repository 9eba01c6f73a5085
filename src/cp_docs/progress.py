"""Console progress output."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from pathlib import Path

CLEAR_LINE = "\x1b[2K\r"


class ProgressReporter:
    """Human-readable progress on stdout.

    Live lines (the entry being scanned, the running match count) overwrite
    each other and are only written to a terminal.
    """

    def __init__(self, stream: TextIO | None = None, live: bool | None = None, label: str = "docs") -> None:
        self._stream = stream if stream is not None else sys.stdout
        self._live = self._stream.isatty() if live is None else live
        self._label = label

    def _write(self, text: str) -> None:
        self._stream.write(text)
        self._stream.flush()

    def cleaning(self, path: Path) -> None:
        self._write(f"Cleaning the target dir: {path}\n")

    def paths(self, root: Path, destination: Path) -> None:
        self._write(f"root={root}; target={destination}\n")

    def scanning(self, name: str) -> None:
        if self._live:
            self._write(f"{CLEAR_LINE}Scanning {name}")

    def found(self, count: int) -> None:
        if self._live:
            self._write(f"{CLEAR_LINE}Found {count} so far")

    def scan_complete(self, total: int) -> None:
        prefix = CLEAR_LINE if self._live else ""
        self._write(f"{prefix}Found {total} {self._label} directories\n")

    def copied(self, done: int, total: int, relative: Path) -> None:
        width = len(str(total))
        self._write(f"({done:0{width}d}/{total:0{width}d}) finished copying {relative}\n")

    def finished(self, copied: int, total: int) -> None:
        if copied == total:
            self._write(f"✅ All {self._label} directories copied successfully.\n")
        else:
            self._write(f"⚠️ Copied {copied}/{total} {self._label} directories; see errors above.\n")


class NullReporter(ProgressReporter):
    """Reporter that prints nothing, for library callers."""

    def __init__(self) -> None:
        super().__init__(stream=sys.stdout, live=False)

    def _write(self, text: str) -> None:
        pass
