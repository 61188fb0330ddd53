"""Orchestrates a check: Source → Tree → Declarations → Diagnostics."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from pkgvisibility.ast.nodes import TreeConsistencyError
from pkgvisibility.check.slicer import TextRangeError
from pkgvisibility.check.verifier import CompilationUnit, VisibilityVerifier
from pkgvisibility.models.config import CheckConfig
from pkgvisibility.models.diagnostics import FileReport
from pkgvisibility.parser.java import JavaSyntaxError, JavaTreeBuilder
from pkgvisibility.parser.source import SourceText, SourceTooLargeError

logger = logging.getLogger("pkgvisibility.check")

# Failures that end one file's check without affecting the others.
FILE_ERRORS: tuple[type[BaseException], ...] = (
    JavaSyntaxError,
    SourceTooLargeError,
    TreeConsistencyError,
    TextRangeError,
    OSError,
    UnicodeDecodeError,
)


def iter_java_files(paths: Iterable[Path]) -> Iterator[Path]:
    """Expand directories to their ``*.java`` files (sorted); pass files through."""
    for path in paths:
        if path.is_dir():
            yield from sorted(p for p in path.rglob("*.java") if p.is_file())
        else:
            yield path


class CheckPipeline:
    """Parses files and runs the visibility verifier over them.

    The marker pattern is compiled once here, so an invalid format fails
    before any file is read.
    """

    def __init__(self, config: CheckConfig | None = None) -> None:
        self.config = config or CheckConfig()
        self._builder = JavaTreeBuilder()
        self._verifier = VisibilityVerifier(
            self.config.compile_pattern(),
            require_trailing_whitespace=self.config.require_trailing_whitespace,
            start_fallback=self.config.start_fallback,
        )

    def check_source(self, source: SourceText, filename: str) -> FileReport:
        tree = self._builder.parse(source)
        unit = CompilationUnit(file=filename, source=source, tree=tree)
        diagnostics = self._verifier.verify(unit)
        logger.debug("%s: %d declaration(s) flagged", filename, len(diagnostics))
        return FileReport(file=filename, diagnostics=diagnostics)

    def check_string(self, content: str, filename: str = "<string>") -> FileReport:
        return self.check_source(SourceText.from_string(content), filename)

    def check_file(self, path: Path) -> FileReport:
        return self.check_source(SourceText.load(path), str(path))

    def check_paths(self, paths: Iterable[Path]) -> list[FileReport]:
        """Check every Java file under ``paths``; per-file failures land on the report."""
        reports: list[FileReport] = []
        for path in iter_java_files(paths):
            try:
                reports.append(self.check_file(path))
            except FILE_ERRORS as exc:
                logger.warning("Could not check %s: %s", path, exc)
                reports.append(FileReport(file=str(path), error=str(exc)))
        logger.info(
            "Checked %d file(s): %d diagnostic(s), %d failure(s)",
            len(reports),
            sum(len(r.diagnostics) for r in reports),
            sum(1 for r in reports if r.error is not None),
        )
        return reports
