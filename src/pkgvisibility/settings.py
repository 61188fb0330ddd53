"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from pkgvisibility.check.pattern import DEFAULT_FORMAT
from pkgvisibility.check.window import StartFallback
from pkgvisibility.models.config import CheckConfig


class Settings(BaseSettings):
    """Configuration for the pkgvisibility command.

    Values are read from ``PKGVISIBILITY_*`` environment variables and from a
    ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="PKGVISIBILITY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "WARNING"

    # Check options
    format: str = DEFAULT_FORMAT
    require_trailing_whitespace: bool = True
    start_fallback: StartFallback = StartFallback.CONTAINER
    ignore_case: bool = False

    config_file: Path | None = None  # YAML file overlaid on these values

    def check_config(self) -> CheckConfig:
        """Check options from the environment; only explicitly set values count as set."""
        fields = ("format", "require_trailing_whitespace", "start_fallback", "ignore_case")
        return CheckConfig(
            **{name: getattr(self, name) for name in fields if name in self.model_fields_set}
        )
