"""Recursive no-overwrite directory copy."""

from __future__ import annotations

import contextlib
import os
import shutil
from pathlib import Path

from treecopy.errors import InvalidRelationError
from treecopy.infrastructure.config import CHUNK_SIZE, PRESERVE_METADATA
from treecopy.infrastructure.logger import logger
from treecopy.paths import list_files, list_source_dirs, mirror_path
from treecopy.reporter import Reporter
from treecopy.types import ALREADY_EXISTS, CopyOutcome, CopyReport, CopyStatus


def _error_reason(exc: OSError) -> str:
    return exc.strerror or str(exc)


def copy_file_exclusive(src: Path, dest: Path, *, preserve_metadata: bool = True, chunk_size: int = CHUNK_SIZE) -> bool:
    """Copy src to dest only if dest does not exist yet.

    Returns False when dest already exists; it is left untouched. Other
    OSErrors propagate, after removing a partial dest created by this call.
    Metadata is copied best-effort: a failed copystat keeps the copied bytes.
    """
    if os.path.lexists(dest):
        return False

    with open(src, "rb") as fsrc:
        try:
            # Atomic creation -- fails if file already exists
            fdst = open(dest, "xb")
        except FileExistsError:
            return False
        try:
            with fdst:
                shutil.copyfileobj(fsrc, fdst, chunk_size)
        except OSError:
            with contextlib.suppress(OSError):
                dest.unlink()
            raise

    if preserve_metadata:
        try:
            shutil.copystat(src, dest)
        except OSError as exc:
            logger.warning("Metadata not copied", destination=str(dest), error=_error_reason(exc))
    return True


class TreeCopier:
    """Mirror a source tree under a destination root without overwriting files.

    The destination does not need to exist. Construction does no I/O;
    a missing source surfaces from run().
    """

    def __init__(
        self,
        source: str | Path,
        dest: str | Path,
        *,
        reporter: Reporter | None = None,
        preserve_metadata: bool | None = None,
    ) -> None:
        self.source = Path(source.strip() if isinstance(source, str) else source)
        self.dest = Path(dest.strip() if isinstance(dest, str) else dest)
        self.reporter = reporter or Reporter()
        self.preserve_metadata = PRESERVE_METADATA if preserve_metadata is None else preserve_metadata

    def _enumerate(self, source_root: Path) -> tuple[list[Path], dict[Path, OSError]]:
        """Source directories plus the ones that could not be listed, reported later in visit order."""
        unlistable: dict[Path, OSError] = {}
        source_dirs = list_source_dirs(source_root, on_error=lambda directory, exc: unlistable.setdefault(directory, exc))
        return source_dirs, unlistable

    def run(self) -> CopyReport:
        """Copy every file under the source root to its mirrored destination path.

        Raises SourceNotFoundError if the source root cannot be enumerated;
        nothing is created at the destination in that case. Every other
        failure is recorded in the returned report and the run continues.
        """
        source_root = self.source.absolute()
        dest_root = self.dest.absolute()
        report = CopyReport(source=str(source_root), destination=str(dest_root))

        source_dirs, unlistable = self._enumerate(source_root)
        logger.info("Copy started", source=report.source, destination=report.destination, directories=len(source_dirs))

        for src_dir in source_dirs:
            if src_dir in unlistable:
                self._directory_failed(report, src_dir, None, _error_reason(unlistable[src_dir]))
                continue
            self._copy_directory(source_root, dest_root, src_dir, report)

        logger.info("Copy finished", source=report.source, **report.summary())
        return report

    def _directory_failed(self, report: CopyReport | None, src_dir: Path, dest_dir: Path | None, reason: str) -> None:
        logger.info("Directory failed", source=str(src_dir), destination=str(dest_dir or ""), error=reason)
        self.reporter.failed(dest_dir or src_dir, reason)
        if report is not None:
            report.outcomes.append(
                CopyOutcome(
                    kind="directory",
                    source=str(src_dir),
                    destination=str(dest_dir or ""),
                    status=CopyStatus.FAILED,
                    reason=reason,
                )
            )

    def _copy_directory(self, source_root: Path, dest_root: Path, src_dir: Path, report: CopyReport) -> None:
        try:
            dest_dir = mirror_path(source_root, dest_root, src_dir)
        except InvalidRelationError as exc:
            logger.error("Directory outside source root", root=str(exc.root), path=str(exc.path))
            self._directory_failed(report, src_dir, None, str(exc))
            return

        if not dest_dir.is_dir():
            self.reporter.creating_directory(dest_dir)
            try:
                dest_dir.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                self._directory_failed(report, src_dir, dest_dir, _error_reason(exc))
                return
            logger.debug("Directory created", path=str(dest_dir))
            report.directories_created.append(str(dest_dir))

        try:
            files = list_files(src_dir)
        except OSError as exc:
            self._directory_failed(report, src_dir, dest_dir, _error_reason(exc))
            return

        for src_file in files:
            report.outcomes.append(self._copy_file(src_file, dest_dir / src_file.name))

    def _copy_file(self, src_file: Path, dest_file: Path) -> CopyOutcome:
        self.reporter.copying(dest_file)
        try:
            copied = copy_file_exclusive(src_file, dest_file, preserve_metadata=self.preserve_metadata)
        except OSError as exc:
            reason = _error_reason(exc)
            logger.info("Copy failed", source=str(src_file), destination=str(dest_file), error=reason)
            self.reporter.failed(dest_file, reason)
            return CopyOutcome(source=str(src_file), destination=str(dest_file), status=CopyStatus.FAILED, reason=reason)

        if not copied:
            logger.info("Skipped existing file", destination=str(dest_file))
            self.reporter.already_exists(dest_file)
            return CopyOutcome(
                source=str(src_file), destination=str(dest_file), status=CopyStatus.SKIPPED, reason=ALREADY_EXISTS
            )

        return CopyOutcome(source=str(src_file), destination=str(dest_file), status=CopyStatus.CREATED)

    def list_files(self) -> list[tuple[Path, list[Path]]]:
        """Print every source directory followed by the files it holds. Copies nothing."""
        listing: list[tuple[Path, list[Path]]] = []
        source_dirs, unlistable = self._enumerate(self.source.absolute())
        for src_dir in source_dirs:
            if src_dir in unlistable:
                self._directory_failed(None, src_dir, None, _error_reason(unlistable[src_dir]))
                continue
            try:
                files = list_files(src_dir)
            except OSError as exc:
                self._directory_failed(None, src_dir, None, _error_reason(exc))
                continue
            self.reporter.directory_listing(src_dir, files)
            listing.append((src_dir, files))
        return listing
