"""Shared test fixtures for pkgvisibility."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import pytest

from pkgvisibility.ast.nodes import Position, SyntaxNode, SyntaxTree
from pkgvisibility.check.pattern import MarkerPattern
from pkgvisibility.check.pipeline import CheckPipeline
from pkgvisibility.check.verifier import CompilationUnit, VisibilityVerifier
from pkgvisibility.parser.java import JavaTreeBuilder
from pkgvisibility.parser.source import SourceText

FIXTURES_DIR = Path(__file__).parent / "fixtures"
PACKAGE_INPUT = FIXTURES_DIR / "PackageVisibilityInput.java"
DEFAULT_PACKAGE_INPUT = FIXTURES_DIR / "DefaultPackageInput.java"


@pytest.fixture
def builder() -> JavaTreeBuilder:
    return JavaTreeBuilder()


@pytest.fixture
def pipeline() -> CheckPipeline:
    return CheckPipeline()


@pytest.fixture
def verifier() -> VisibilityVerifier:
    return VisibilityVerifier(MarkerPattern.compile())


def parse_unit(content: str, filename: str = "<string>") -> CompilationUnit:
    """Parse Java source into a unit ready for the verifier."""
    source = SourceText.from_string(content)
    return CompilationUnit(file=filename, source=source, tree=JavaTreeBuilder().parse(source))


# ---------------------------------------------------------------------------
# Hand-built trees, for shapes the Java grammar never produces
# ---------------------------------------------------------------------------


@dataclass
class N:
    """Node shape for ``build_tree``."""

    kind: str
    line: int
    column: int
    text: str | None = None
    children: list[N] = field(default_factory=list)


def build_tree(root: N) -> SyntaxTree:
    order: list[N] = []
    parents: list[int | None] = []

    def _number(shape: N, parent: int | None) -> None:
        index = len(order)
        order.append(shape)
        parents.append(parent)
        for child in shape.children:
            _number(child, index)

    _number(root, None)
    indices = {id(shape): i for i, shape in enumerate(order)}
    built: list[SyntaxNode] = [None] * len(order)  # type: ignore[list-item]
    for i in range(len(order) - 1, -1, -1):
        shape = order[i]
        built[i] = SyntaxNode(
            index=i,
            kind=shape.kind,
            position=Position(shape.line, shape.column),
            text=shape.text,
            children=tuple(built[indices[id(c)]] for c in shape.children),
        )
    return SyntaxTree(nodes=tuple(built), parents=tuple(parents))


NESTED_CLASSES_JAVA = "class C { class A {} /* package */ class B {} }"

MEMBERS_JAVA = """\
package com.example;

import java.util.List;

/* package */ class Members {
    /* package */ int counter;

    private List<String> names;

    /* package */ Members() {
    }

    /* package */ void reset() {
        int local = 0;
        counter = local;
    }

    public String describe() {
        return "members";
    }
}
"""
