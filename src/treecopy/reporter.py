"""Console progress lines.

These lines are the tool's script-facing output and are written directly,
independent of the structlog configuration.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from pathlib import Path


class Reporter:
    def __init__(self, out: TextIO | None = None, err: TextIO | None = None) -> None:
        self._out = out
        self._err = err

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    @property
    def err(self) -> TextIO:
        return self._err if self._err is not None else sys.stderr

    def _write(self, stream: TextIO, line: str) -> None:
        print(line, file=stream, flush=True)

    def roots(self, source: str, dest: str) -> None:
        self._write(self.out, f"Source: '{source}'")
        self._write(self.out, f"Destination: '{dest}'")

    def creating_directory(self, path: Path) -> None:
        self._write(self.out, f"Creating {path}")

    def copying(self, dest_file: Path) -> None:
        self._write(self.out, str(dest_file))

    def already_exists(self, dest_file: Path) -> None:
        self._write(self.err, f"Already exists: '{dest_file}'")

    def failed(self, path: Path, reason: str) -> None:
        self._write(self.err, f"Failed: '{path}' ({reason})")

    def directory_listing(self, directory: Path, files: list[Path]) -> None:
        self._write(self.out, f"{directory} contains...")
        for file_path in files:
            self._write(self.out, str(file_path))

    def summary(self, created: int, skipped: int, failed: int) -> None:
        self._write(self.out, f"Done: {created} created, {skipped} skipped, {failed} failed")
