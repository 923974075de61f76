"""Entry point: python -m treecopy SOURCE DEST"""

from __future__ import annotations

import argparse
import sys

from treecopy.copier import TreeCopier
from treecopy.errors import SourceNotFoundError
from treecopy.infrastructure.config import EXIT_OK, EXIT_PARTIAL_FAILURE, EXIT_SOURCE_NOT_FOUND, EXIT_USAGE
from treecopy.infrastructure.logger import install_exception_hooks, logger
from treecopy.reporter import Reporter

USAGE = """Usage:
treecopy [srcdir] [dstdir]
Will NOT overwrite existing files. Copies all files
from a source directory to a destination
directory. Will create destination
directory structure as needed."""


class _UsageParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        print(USAGE)
        print(message, file=sys.stderr)
        sys.exit(EXIT_USAGE)


def build_parser() -> argparse.ArgumentParser:
    parser = _UsageParser(prog="treecopy", description="Copy a directory tree without overwriting files.")
    parser.add_argument("source", help="Directory to copy from")
    parser.add_argument("dest", help="Directory to copy into; created as needed")
    parser.add_argument("--list", action="store_true", help="List each source directory's files and copy nothing")
    parser.add_argument("--strict", action="store_true", help="Exit non-zero if any file or directory failed")
    return parser


def main(argv: list[str] | None = None, reporter: Reporter | None = None) -> int:
    args = build_parser().parse_args(argv)
    reporter = reporter or Reporter()

    source = args.source.strip()
    dest = args.dest.strip()
    reporter.roots(source, dest)

    copier = TreeCopier(source, dest, reporter=reporter)
    try:
        if args.list:
            copier.list_files()
            return EXIT_OK
        report = copier.run()
    except SourceNotFoundError as exc:
        logger.error("Source directory cannot be enumerated", path=str(exc.path), reason=exc.reason)
        print(str(exc), file=reporter.err, flush=True)
        return EXIT_SOURCE_NOT_FOUND

    reporter.summary(report.created, report.skipped, report.failed)
    if args.strict and report.has_failures:
        return EXIT_PARTIAL_FAILURE
    return EXIT_OK


def run() -> None:
    install_exception_hooks()
    sys.exit(main())


if __name__ == "__main__":
    run()
