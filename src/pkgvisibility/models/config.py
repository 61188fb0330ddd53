"""Check configuration."""

from __future__ import annotations

import re

from pydantic import BaseModel, Field, field_validator

from pkgvisibility.check.pattern import DEFAULT_FORMAT, MarkerPattern
from pkgvisibility.check.window import StartFallback


class CheckConfig(BaseModel):
    """Options of the commented package visibility check.

    File keys use camelCase (``requireTrailingWhitespace``); Python names work too.
    """

    format: str = DEFAULT_FORMAT
    require_trailing_whitespace: bool = Field(True, alias="requireTrailingWhitespace")
    start_fallback: StartFallback = Field(StartFallback.CONTAINER, alias="startFallback")
    ignore_case: bool = Field(False, alias="ignoreCase")

    model_config = {"populate_by_name": True, "extra": "forbid", "frozen": True}

    @field_validator("format")
    @classmethod
    def _format_compiles(cls, value: str) -> str:
        # PatternConfigError is a ValueError, so pydantic reports it as a validation error.
        MarkerPattern.compile(value)
        return value

    def overlay(self, other: CheckConfig) -> CheckConfig:
        """Return a copy with the options explicitly set on ``other`` taking precedence."""
        return self.model_copy(
            update={name: getattr(other, name) for name in other.model_fields_set}
        )

    @property
    def regex_flags(self) -> int:
        return re.IGNORECASE if self.ignore_case else 0

    def compile_pattern(self) -> MarkerPattern:
        return MarkerPattern.compile(self.format, self.regex_flags)
