"""Immutable syntax tree snapshot, scope rules and declaration traversal."""

from pkgvisibility.ast.nodes import (
    Declaration,
    DeclarationKind,
    Position,
    SyntaxNode,
    SyntaxTree,
    TreeConsistencyError,
)
from pkgvisibility.ast.scope import Scope, classify
from pkgvisibility.ast.walk import iter_declarations

__all__ = [
    "Declaration",
    "DeclarationKind",
    "Position",
    "Scope",
    "SyntaxNode",
    "SyntaxTree",
    "TreeConsistencyError",
    "classify",
    "iter_declarations",
]
