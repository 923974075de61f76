"""Recursive directory copy that never overwrites existing files."""

from __future__ import annotations

from .copier import TreeCopier, copy_file_exclusive
from .errors import InvalidRelationError, SourceNotFoundError, TreeCopyError
from .paths import list_files, list_source_dirs, mirror_path, relative_to_root
from .reporter import Reporter
from .types import CopyOutcome, CopyReport, CopyStatus

__all__ = [
    # copier
    "TreeCopier",
    "copy_file_exclusive",
    # errors
    "InvalidRelationError",
    "SourceNotFoundError",
    "TreeCopyError",
    # paths
    "list_files",
    "list_source_dirs",
    "mirror_path",
    "relative_to_root",
    # reporter
    "Reporter",
    # types
    "CopyOutcome",
    "CopyReport",
    "CopyStatus",
]
