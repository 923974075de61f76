"""Shared fixtures for tree copy tests."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

import pytest

from treecopy.reporter import Reporter

if TYPE_CHECKING:
    from pathlib import Path


def write_tree(root: Path, files: dict[str, str]) -> Path:
    """Create files (and their parent directories) under root from a {relative path: content} map."""
    root.mkdir(parents=True, exist_ok=True)
    for rel_path, content in files.items():
        full_path = root / rel_path
        full_path.parent.mkdir(parents=True, exist_ok=True)
        full_path.write_text(content, encoding="utf-8")
    return root


def relative_dirs(root: Path) -> set[str]:
    return {p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_dir()}


def relative_files(root: Path) -> set[str]:
    return {p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file()}


class CapturingReporter(Reporter):
    """Reporter writing to in-memory buffers."""

    def __init__(self) -> None:
        super().__init__(out=io.StringIO(), err=io.StringIO())

    @property
    def out_lines(self) -> list[str]:
        return self.out.getvalue().splitlines()  # type: ignore[attr-defined]

    @property
    def err_lines(self) -> list[str]:
        return self.err.getvalue().splitlines()  # type: ignore[attr-defined]


@pytest.fixture()
def reporter() -> CapturingReporter:
    return CapturingReporter()


@pytest.fixture()
def src(tmp_path: Path) -> Path:
    """Source tree from the two-level example: a/file1.txt and a/b/file2.txt."""
    return write_tree(
        tmp_path / "src",
        {
            "a/file1.txt": "one",
            "a/b/file2.txt": "two",
        },
    )


@pytest.fixture()
def dst(tmp_path: Path) -> Path:
    """Destination root; not created."""
    return tmp_path / "dst"


class RecordingLogger:
    """Stand-in for the structlog logger that keeps (level, event) pairs."""

    def __init__(self) -> None:
        self.events: list[tuple[str, str]] = []

    def _record(self, level: str):  # type: ignore[no-untyped-def]
        def log(event: str, *args, **kwargs) -> None:  # type: ignore[no-untyped-def]
            self.events.append((level, event))

        return log

    def __getattr__(self, level: str):  # type: ignore[no-untyped-def]
        return self._record(level)

    def levels(self, event: str) -> list[str]:
        return [level for level, name in self.events if name == event]
