"""Directory enumeration and source-to-destination path mapping."""

from __future__ import annotations

import os
from pathlib import Path, PurePath
from typing import TYPE_CHECKING

from treecopy.errors import InvalidRelationError, SourceNotFoundError
from treecopy.infrastructure.logger import logger

if TYPE_CHECKING:
    from collections.abc import Callable


def _subdirectories(directory: Path) -> list[Path]:
    with os.scandir(directory) as entries:
        return [Path(entry.path) for entry in entries if entry.is_dir(follow_symlinks=False)]


def list_source_dirs(root: Path, on_error: Callable[[Path, OSError], None] | None = None) -> list[Path]:
    """Return root and every directory below it in pre-order, depth-first.

    Sibling order is whatever the filesystem listing returns. Symlinked
    directories are not descended into. A subdirectory that cannot be
    listed is passed to on_error and its subtree is skipped; the root
    failing to list raises SourceNotFoundError.
    """
    if not root.exists():
        raise SourceNotFoundError(root, "does not exist")
    if not root.is_dir():
        raise SourceNotFoundError(root, "not a directory")

    try:
        children = _subdirectories(root)
    except OSError as exc:
        raise SourceNotFoundError(root, exc.strerror or str(exc)) from exc

    dirs = [root]
    stack = list(reversed(children))
    while stack:
        current = stack.pop()
        logger.debug("Found subdirectory", path=str(current))
        dirs.append(current)
        try:
            children = _subdirectories(current)
        except OSError as exc:
            if on_error is None:
                raise
            on_error(current, exc)
            continue
        stack.extend(reversed(children))

    return dirs


def list_files(directory: Path) -> list[Path]:
    """Files directly inside directory; subdirectories are not included."""
    with os.scandir(directory) as entries:
        return [Path(entry.path) for entry in entries if entry.is_file()]


def _normalize(path: Path) -> str:
    return os.path.normcase(os.path.abspath(path))


def relative_to_root(root: Path, path: Path) -> PurePath:
    """Path of a discovered directory relative to the source root.

    The root itself maps to an empty path. Comparison is done on absolute,
    case-normalised paths so trailing separators and letter case on
    case-insensitive platforms do not matter.
    """
    norm_root = _normalize(root)
    norm_path = _normalize(path)
    if norm_path == norm_root:
        return PurePath()

    prefix = norm_root if norm_root.endswith(os.sep) else norm_root + os.sep
    if not norm_path.startswith(prefix):
        raise InvalidRelationError(root, path)

    return PurePath(os.path.abspath(path)[len(prefix) :])


def mirror_path(root: Path, dest_root: Path, path: Path) -> Path:
    """Location under dest_root corresponding to a directory under root."""
    return dest_root / relative_to_root(root, path)
