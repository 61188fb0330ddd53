"""Immutable syntax tree snapshot. Navigation goes through ``SyntaxTree`` accessors only."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum


class TreeConsistencyError(Exception):
    """Raised when a tree violates a position or shape invariant.

    Indicates a problem upstream of the check (parser or tree builder),
    never a user error in the checked source.
    """


@dataclass(frozen=True, order=True)
class Position:
    """A location in source text: 1-based line, 0-based character column."""

    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


FILE_START = Position(line=1, column=0)


class DeclarationKind(StrEnum):
    CLASS = "class"
    INTERFACE = "interface"
    ENUM = "enum"
    RECORD = "record"
    CONSTRUCTOR = "constructor"
    FIELD = "field"
    VARIABLE = "variable"  # local variable, never visibility-checked
    METHOD = "method"


# Grammar node types that are checked, keyed to their declaration kind.
DECLARATION_NODE_KINDS: dict[str, DeclarationKind] = {
    "class_declaration": DeclarationKind.CLASS,
    "interface_declaration": DeclarationKind.INTERFACE,
    "enum_declaration": DeclarationKind.ENUM,
    "record_declaration": DeclarationKind.RECORD,
    "constructor_declaration": DeclarationKind.CONSTRUCTOR,
    "field_declaration": DeclarationKind.FIELD,
    "local_variable_declaration": DeclarationKind.VARIABLE,
    "method_declaration": DeclarationKind.METHOD,
}


@dataclass(frozen=True)
class SyntaxNode:
    """A node of the snapshot.

    ``kind`` is the grammar type (``class_declaration``, ``identifier``, ``{`` ...).
    ``position`` is the position of the node's first token. Only leaves carry text.
    """

    index: int
    kind: str
    position: Position
    text: str | None = None
    children: tuple[SyntaxNode, ...] = field(default=(), repr=False)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def line(self) -> int:
        return self.position.line


@dataclass(frozen=True)
class Declaration:
    """A checked declaration: its node plus what the verifier needs to know about it."""

    node: SyntaxNode
    kind: DeclarationKind
    name: str
    name_position: Position
    modifiers: tuple[str, ...] = ()

    @property
    def line(self) -> int:
        return self.node.line


class SyntaxTree:
    """Read-only snapshot of one file's syntax tree.

    Parent links live in the tree, not in the nodes, so nodes stay immutable.
    Nodes are addressed by their pre-order ``index``.
    """

    def __init__(self, nodes: tuple[SyntaxNode, ...], parents: tuple[int | None, ...]) -> None:
        if len(nodes) != len(parents):
            raise TreeConsistencyError(
                f"Tree has {len(nodes)} nodes but {len(parents)} parent links"
            )
        if not nodes:
            raise TreeConsistencyError("Tree has no root node")
        self._nodes = nodes
        self._parents = parents

    @property
    def root(self) -> SyntaxNode:
        return self._nodes[0]

    def __len__(self) -> int:
        return len(self._nodes)

    def node(self, index: int) -> SyntaxNode:
        return self._nodes[index]

    def nodes(self) -> Iterator[SyntaxNode]:
        """All nodes in pre-order (source order)."""
        return iter(self._nodes)

    def parent(self, node: SyntaxNode) -> SyntaxNode | None:
        parent_index = self._parents[node.index]
        return None if parent_index is None else self._nodes[parent_index]

    def ancestors(self, node: SyntaxNode) -> Iterator[SyntaxNode]:
        """Enclosing nodes, innermost first."""
        current = self.parent(node)
        while current is not None:
            yield current
            current = self.parent(current)

    def previous_sibling(self, node: SyntaxNode) -> SyntaxNode | None:
        parent = self.parent(node)
        if parent is None:
            return None
        siblings = parent.children
        for i, sibling in enumerate(siblings):
            if sibling.index == node.index:
                return siblings[i - 1] if i > 0 else None
        raise TreeConsistencyError(
            f"Node {node.kind} at {node.position} is not among its parent's children"
        )

    @staticmethod
    def last_child(node: SyntaxNode) -> SyntaxNode | None:
        return node.children[-1] if node.children else None

    def last_descendant(self, node: SyntaxNode) -> SyntaxNode:
        """Follow the last-child chain down to a leaf."""
        current = node
        while (child := self.last_child(current)) is not None:
            current = child
        return current

    @staticmethod
    def first_child_of_kind(node: SyntaxNode, kind: str) -> SyntaxNode | None:
        for child in node.children:
            if child.kind == kind:
                return child
        return None
