"""Source-order traversal yielding the declarations to check."""

from __future__ import annotations

from collections.abc import Iterator

from pkgvisibility.ast.nodes import (
    DECLARATION_NODE_KINDS,
    Declaration,
    DeclarationKind,
    SyntaxNode,
    SyntaxTree,
    TreeConsistencyError,
)

_VARIABLE_KINDS = frozenset({DeclarationKind.FIELD, DeclarationKind.VARIABLE})


def _name_token(tree: SyntaxTree, node: SyntaxNode, kind: DeclarationKind) -> SyntaxNode | None:
    # Variables are named by their first declarator: ``int a, b;`` -> ``a``.
    owner: SyntaxNode | None = node
    if kind in _VARIABLE_KINDS:
        owner = tree.first_child_of_kind(node, "variable_declarator")
    if owner is None:
        return None
    return tree.first_child_of_kind(owner, "identifier")


def _modifiers(tree: SyntaxTree, node: SyntaxNode) -> tuple[str, ...]:
    modifiers = tree.first_child_of_kind(node, "modifiers")
    if modifiers is None:
        return ()
    # Keyword children are leaves; annotations are subtrees and carry no access level.
    return tuple(child.text for child in modifiers.children if child.text is not None)


def describe(tree: SyntaxTree, node: SyntaxNode) -> Declaration:
    """Build the ``Declaration`` view of a declaration node."""
    kind = DECLARATION_NODE_KINDS.get(node.kind)
    if kind is None:
        raise TreeConsistencyError(f"{node.kind} at {node.position} is not a declaration")
    name = _name_token(tree, node, kind)
    if name is None or name.text is None:
        raise TreeConsistencyError(f"{node.kind} at {node.position} has no name token")
    return Declaration(
        node=node,
        kind=kind,
        name=name.text,
        name_position=name.position,
        modifiers=_modifiers(tree, node),
    )


def iter_declarations(tree: SyntaxTree) -> Iterator[Declaration]:
    """Yield every checked declaration in source order."""
    stack: list[SyntaxNode] = [tree.root]
    while stack:
        node = stack.pop()
        if node.kind in DECLARATION_NODE_KINDS:
            yield describe(tree, node)
        stack.extend(reversed(node.children))
