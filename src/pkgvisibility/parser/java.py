"""Java syntax trees from tree-sitter, converted to immutable snapshots."""

from __future__ import annotations

from typing import Any

import tree_sitter_java
from tree_sitter import Language, Parser

from pkgvisibility.ast.nodes import FILE_START, Position, SyntaxNode, SyntaxTree
from pkgvisibility.parser.source import SourceText

JAVA_LANGUAGE = Language(tree_sitter_java.language())

_COMMENT_KINDS = frozenset({"line_comment", "block_comment"})


class JavaSyntaxError(Exception):
    """Raised when the source does not parse as Java."""

    def __init__(self, position: Position, detail: str) -> None:
        self.position = position
        super().__init__(f"Syntax error at {position}: {detail}")


class _ColumnMap:
    """Converts tree-sitter byte columns to character columns."""

    def __init__(self, source: SourceText) -> None:
        self._source = source

    def position(self, row: int, byte_column: int) -> Position:
        line = self._source.lines[row] if row < len(self._source.lines) else ""
        if line.isascii():
            column = byte_column
        else:
            prefix = line.encode("utf-8")[:byte_column]
            column = len(prefix.decode("utf-8", errors="ignore"))
        return Position(line=row + 1, column=column)


def _kept_children(ts_node: Any) -> list[Any]:
    return [
        child
        for child in ts_node.children
        if not child.is_extra and child.type not in _COMMENT_KINDS
    ]


def _first_error(ts_node: Any) -> Any | None:
    stack = [ts_node]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            return node
        if node.has_error:
            stack.extend(reversed(node.children))
    return None


class JavaTreeBuilder:
    """Parses Java source and builds a ``SyntaxTree`` without comments.

    Node positions follow their first kept token, so a comment in front of a
    declaration never moves the declaration's line. The root is pinned to the
    start of the file.
    """

    def __init__(self) -> None:
        self._parser = Parser(JAVA_LANGUAGE)

    def parse(self, source: SourceText) -> SyntaxTree:
        content = source.content.encode("utf-8")
        ts_tree = self._parser.parse(content)
        columns = _ColumnMap(source)

        if ts_tree.root_node.has_error:
            error = _first_error(ts_tree.root_node) or ts_tree.root_node
            row, col = error.start_point
            detail = f"missing {error.type}" if error.is_missing else "unexpected input"
            raise JavaSyntaxError(columns.position(row, col), detail)

        return self._convert(ts_tree.root_node, content, columns)

    @staticmethod
    def _convert(ts_root: Any, content: bytes, columns: _ColumnMap) -> SyntaxTree:
        # Pre-order numbering first, then build bottom-up so children exist
        # before their parents. Iterative: Java trees can nest very deeply.
        order: list[Any] = []
        parents: list[int | None] = []
        child_indices: list[list[int]] = []
        stack: list[tuple[Any, int | None]] = [(ts_root, None)]
        while stack:
            ts_node, parent_index = stack.pop()
            index = len(order)
            order.append(ts_node)
            parents.append(parent_index)
            child_indices.append([])
            if parent_index is not None:
                child_indices[parent_index].append(index)
            for child in reversed(_kept_children(ts_node)):
                stack.append((child, index))

        built: list[SyntaxNode | None] = [None] * len(order)
        for index in range(len(order) - 1, -1, -1):
            ts_node = order[index]
            children = tuple(built[i] for i in child_indices[index])
            if index == 0:
                position = FILE_START
            elif children:
                position = children[0].position
            else:
                row, col = ts_node.start_point
                position = columns.position(row, col)
            text = None
            if not children and index != 0:
                text = content[ts_node.start_byte : ts_node.end_byte].decode("utf-8")
            built[index] = SyntaxNode(
                index=index,
                kind=ts_node.type,
                position=position,
                text=text,
                children=children,  # type: ignore[arg-type]
            )

        return SyntaxTree(nodes=tuple(built), parents=tuple(parents))  # type: ignore[arg-type]
