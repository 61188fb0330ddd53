"""Marker comment patterns: the configured format and its trailing-whitespace variant."""

from __future__ import annotations

import re
from dataclasses import dataclass

DEFAULT_FORMAT = r"/\* package \*/"

# Inline global flags must stay at the very start of a pattern, so they are
# hoisted out of the group that wraps the format.
_LEADING_FLAGS_RE = re.compile(r"^\(\?[aiLmsux]+\)")


class PatternConfigError(ValueError):
    """Raised when the configured marker format is not a valid regular expression."""

    def __init__(self, fmt: str, reason: str) -> None:
        self.format = fmt
        self.reason = reason
        super().__init__(f"Invalid marker format {fmt!r}: {reason}")


@dataclass(frozen=True)
class MarkerPattern:
    """Compiled marker patterns, built once per configuration and shared read-only."""

    base: re.Pattern[str]
    with_trailing_whitespace: re.Pattern[str]

    @classmethod
    def compile(cls, fmt: str = DEFAULT_FORMAT, flags: int = 0) -> MarkerPattern:
        match = _LEADING_FLAGS_RE.match(fmt)
        prefix = match.group(0) if match else ""
        body = fmt[len(prefix) :]
        try:
            base = re.compile(fmt, flags)
            trailing = re.compile(f"{prefix}(?:{body})\\s+", flags)
        except re.error as exc:
            raise PatternConfigError(fmt, str(exc)) from exc
        return cls(base=base, with_trailing_whitespace=trailing)

    @property
    def format(self) -> str:
        return self.base.pattern

    def matches(self, text: str, *, require_trailing_whitespace: bool = False) -> bool:
        """Whether the marker occurs anywhere in ``text``."""
        pattern = self.with_trailing_whitespace if require_trailing_whitespace else self.base
        return pattern.search(text) is not None
