"""Access scope of declarations: modifier classification and enclosing-block tests."""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum

from pkgvisibility.ast.nodes import Declaration, DeclarationKind, SyntaxTree


class Scope(StrEnum):
    PUBLIC = "public"
    PROTECTED = "protected"
    PACKAGE = "package"
    PRIVATE = "private"


_ACCESS_MODIFIERS: dict[str, Scope] = {
    "public": Scope.PUBLIC,
    "protected": Scope.PROTECTED,
    "private": Scope.PRIVATE,
}

# Bodies whose members are implicitly public.
_IMPLICITLY_PUBLIC_OWNERS = frozenset({"interface_declaration", "annotation_type_declaration"})

# Bodies that end the search for an implicitly public owner.
_CLASS_LIKE_OWNERS = frozenset(
    {"class_declaration", "enum_declaration", "record_declaration", "object_creation_expression"}
)


def classify(modifiers: Iterable[str]) -> Scope:
    """Map a modifier list to its access scope; no access modifier means package."""
    for modifier in modifiers:
        scope = _ACCESS_MODIFIERS.get(modifier)
        if scope is not None:
            return scope
    return Scope.PACKAGE


def is_local_variable(declaration: Declaration) -> bool:
    return declaration.kind is DeclarationKind.VARIABLE


def in_interface_or_annotation_block(tree: SyntaxTree, declaration: Declaration) -> bool:
    """Whether the declaration sits in an interface or annotation body.

    The nearest enclosing type wins: a class nested in an interface is inside
    the interface block, a field of that class is not.
    """
    for ancestor in tree.ancestors(declaration.node):
        if ancestor.kind in _CLASS_LIKE_OWNERS:
            return False
        if ancestor.kind in _IMPLICITLY_PUBLIC_OWNERS:
            return True
    return False
