"""Search window derivation: where a declaration's marker comment may legitimately sit.

The window runs from the last token of whatever precedes the declaration to
the first character of the declaration's name, so it covers annotations,
modifiers and any comments in between.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from pkgvisibility.ast.nodes import (
    FILE_START,
    Declaration,
    Position,
    SyntaxTree,
    TreeConsistencyError,
)


class StartFallback(StrEnum):
    """Where the window starts when a declaration has no previous sibling."""

    CONTAINER = "container"  # the enclosing node's opening position
    FILE_START = "file-start"  # always line 1, column 0


@dataclass(frozen=True)
class SearchWindow:
    start: Position
    end: Position


def start_bound(
    tree: SyntaxTree,
    declaration: Declaration,
    fallback: StartFallback = StartFallback.CONTAINER,
) -> Position:
    previous = tree.previous_sibling(declaration.node)
    if previous is not None:
        # The deepest last leaf is the real end of the previous element,
        # e.g. the closing brace of a preceding class.
        return tree.last_descendant(previous).position

    if fallback is StartFallback.CONTAINER:
        container = tree.parent(declaration.node)
        if container is not None:
            return container.position
    return FILE_START


def end_bound(declaration: Declaration) -> Position:
    return declaration.name_position


def resolve_window(
    tree: SyntaxTree,
    declaration: Declaration,
    fallback: StartFallback = StartFallback.CONTAINER,
) -> SearchWindow:
    start = start_bound(tree, declaration, fallback)
    end = end_bound(declaration)
    if start > end:
        raise TreeConsistencyError(
            f"Search window for '{declaration.name}' starts at {start}, after its name at {end}"
        )
    return SearchWindow(start=start, end=end)
