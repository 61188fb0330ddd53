"""Visibility verification: one evaluation per declaration, at most one diagnostic."""

from __future__ import annotations

from dataclasses import dataclass

from pkgvisibility.ast.nodes import Declaration, SyntaxTree
from pkgvisibility.ast.scope import (
    Scope,
    classify,
    in_interface_or_annotation_block,
    is_local_variable,
)
from pkgvisibility.ast.walk import iter_declarations
from pkgvisibility.check.pattern import MarkerPattern
from pkgvisibility.check.slicer import slice_window
from pkgvisibility.check.window import StartFallback, resolve_window
from pkgvisibility.models.diagnostics import Diagnostic, MessageKind
from pkgvisibility.parser.source import SourceText


@dataclass(frozen=True)
class CompilationUnit:
    """One parsed file: its name, text and tree, owned by the caller for one check."""

    file: str
    source: SourceText
    tree: SyntaxTree


class VisibilityVerifier:
    """Requires the marker on package-private declarations and rejects it elsewhere.

    Holds only the compiled patterns and options, so one verifier can check
    any number of files.
    """

    def __init__(
        self,
        pattern: MarkerPattern,
        *,
        require_trailing_whitespace: bool = True,
        start_fallback: StartFallback = StartFallback.CONTAINER,
    ) -> None:
        self._pattern = pattern
        self._require_trailing_whitespace = require_trailing_whitespace
        self._start_fallback = start_fallback

    def verify(self, unit: CompilationUnit) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for declaration in iter_declarations(unit.tree):
            diagnostic = self.evaluate(unit, declaration)
            if diagnostic is not None:
                diagnostics.append(diagnostic)
        return diagnostics

    def evaluate(self, unit: CompilationUnit, declaration: Declaration) -> Diagnostic | None:
        if is_local_variable(declaration):
            return None
        # Interface and annotation members are implicitly public.
        if in_interface_or_annotation_block(unit.tree, declaration):
            return None

        window = resolve_window(unit.tree, declaration, self._start_fallback)
        text = slice_window(unit.source, window)

        if classify(declaration.modifiers) is Scope.PACKAGE:
            kind = self._check_marker_present(text)
        else:
            kind = self._check_marker_absent(text)

        if kind is None:
            return None
        return Diagnostic(file=unit.file, line=declaration.line, kind=kind, name=declaration.name)

    def _check_marker_present(self, text: str) -> MessageKind | None:
        required = self._require_trailing_whitespace
        if self._pattern.matches(text, require_trailing_whitespace=required):
            return None
        if self._require_trailing_whitespace and self._pattern.matches(text):
            return MessageKind.MISSING_TRAILING_WHITESPACE
        return MessageKind.MISSING_MARKER

    def _check_marker_absent(self, text: str) -> MessageKind | None:
        if self._pattern.matches(text):
            return MessageKind.UNEXPECTED_MARKER
        return None
