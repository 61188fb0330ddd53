"""Line-addressable source text."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

_MAX_DOCUMENT_SIZE = 5_000_000  # 5M characters


class SourceTooLargeError(Exception):
    """Raised when a source file exceeds the maximum accepted size."""


@dataclass(frozen=True)
class SourceText:
    """A file's content as lines addressed by 1-based line number.

    Lines are split on ``\\n`` only, matching how the tree builder counts rows;
    a trailing ``\\r`` is dropped from each line.
    """

    lines: tuple[str, ...]
    content: str = ""

    @classmethod
    def from_string(cls, content: str) -> SourceText:
        if len(content) > _MAX_DOCUMENT_SIZE:
            raise SourceTooLargeError(
                f"Source exceeds maximum size "
                f"({len(content):,} chars > {_MAX_DOCUMENT_SIZE:,} limit)"
            )
        lines = tuple(line.removesuffix("\r") for line in content.split("\n"))
        return cls(lines=lines, content=content)

    @classmethod
    def load(cls, path: Path) -> SourceText:
        with path.open("r", encoding="utf-8", newline="") as handle:
            content = handle.read()
        return cls.from_string(content)

    def __len__(self) -> int:
        return len(self.lines)

    def line(self, number: int) -> str:
        """Return line ``number`` (1-based)."""
        if not 1 <= number <= len(self.lines):
            raise IndexError(f"Line {number} outside 1..{len(self.lines)}")
        return self.lines[number - 1]

    def lines_between(self, first: int, last: int) -> list[str]:
        """Lines ``first`` through ``last``, both inclusive and 1-based."""
        if first > last:
            raise IndexError(f"Line range {first}..{last} is reversed")
        return [self.line(number) for number in range(first, last + 1)]
