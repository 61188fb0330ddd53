"""Diagnostic models and their rendered messages."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class MessageKind(StrEnum):
    MISSING_MARKER = "MissingMarker"
    MISSING_TRAILING_WHITESPACE = "MissingTrailingWhitespace"
    UNEXPECTED_MARKER = "UnexpectedMarker"


MESSAGE_TEMPLATES: dict[MessageKind, str] = {
    MessageKind.MISSING_MARKER: "'{name}' should be commented for package visibility.",
    MessageKind.MISSING_TRAILING_WHITESPACE: (
        "Comment of '{name}' for package visibility should add trailing whitespace."
    ),
    MessageKind.UNEXPECTED_MARKER: "Is visibility of '{name}' package?",
}


def render_message(kind: MessageKind, name: str) -> str:
    return MESSAGE_TEMPLATES[kind].format(name=name)


class Diagnostic(BaseModel):
    """One finding: the declaration's line, what is wrong, and the declaration's name."""

    file: str = "<string>"
    line: int
    kind: MessageKind
    name: str

    @property
    def message(self) -> str:
        return render_message(self.kind, self.name)

    def format(self) -> str:
        return f"{self.file}:{self.line}: {self.message}"


class FileReport(BaseModel):
    """Result of checking one file."""

    file: str
    diagnostics: list[Diagnostic] = []
    error: str | None = None

    @property
    def clean(self) -> bool:
        return self.error is None and not self.diagnostics
