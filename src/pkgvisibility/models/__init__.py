"""Pydantic models: check configuration and diagnostics."""

from pkgvisibility.models.config import CheckConfig
from pkgvisibility.models.diagnostics import Diagnostic, FileReport, MessageKind

__all__ = [
    "CheckConfig",
    "Diagnostic",
    "FileReport",
    "MessageKind",
]
