"""Exceptions raised by the tree copier."""

from __future__ import annotations

from pathlib import Path


class TreeCopyError(Exception):
    """Base class for tree copy errors."""


class SourceNotFoundError(TreeCopyError):
    """The source root is missing or is not a listable directory. Aborts the run."""

    def __init__(self, path: Path, reason: str = "not a directory") -> None:
        super().__init__(f"Source directory cannot be enumerated: '{path}' ({reason})")
        self.path = path
        self.reason = reason


class InvalidRelationError(TreeCopyError):
    """A directory reached by traversal is not under the source root."""

    def __init__(self, root: Path, path: Path) -> None:
        super().__init__(f"{path} is not a subfolder of {root}")
        self.root = root
        self.path = path
