"""Exact text covered by a search window, across line boundaries."""

from __future__ import annotations

from pkgvisibility.check.window import SearchWindow
from pkgvisibility.parser.source import SourceText


class TextRangeError(Exception):
    """Raised when a window does not fit inside the source lines."""


def slice_window(source: SourceText, window: SearchWindow) -> str:
    """Return the text from ``window.start`` to ``window.end``, both characters included.

    Lines are joined with ``\\n``. The character under the start position
    (the last token of the previous element) and the first character of the
    name are part of the result.
    """
    start, end = window.start, window.end
    try:
        lines = source.lines_between(start.line, end.line)
    except IndexError as exc:
        raise TextRangeError(f"Window {start}..{end} is outside the source: {exc}") from exc

    front = start.column
    back = (len(lines[-1]) - 1) - end.column
    if front < 0 or front > len(lines[0]):
        raise TextRangeError(
            f"Start column {front} is outside line {start.line} ({len(lines[0])} chars)"
        )
    if back < 0:
        raise TextRangeError(
            f"End column {end.column} is outside line {end.line} ({len(lines[-1])} chars)"
        )

    joined = "\n".join(lines)
    return joined[front : len(joined) - back]
