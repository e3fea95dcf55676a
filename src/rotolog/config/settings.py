"""Environment-aware default settings.

This module defines a `Settings` class (pydantic `BaseSettings`) holding the
defaults used when the shared logger is created lazily, plus the verbosity of
rotolog's own diagnostic output. Every value may be overridden through an
environment variable with the `ROTOLOG_` prefix.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from rotolog.config.models import (
    DEFAULT_MAX_FILE_SIZE,
    ColorChoice,
    LoggerConfig,
    build_config,
)
from rotolog.models import Severity
from rotolog.rotation.naming import ArchiveMatch


class Settings(BaseSettings):
    """Top-level pydantic Settings container for rotolog configuration.

    The file sink is only enabled when `file_enabled` is set (for example with
    ``ROTOLOG_FILE_ENABLED=1``); the console sink is on unless disabled.
    """

    # Global threshold
    level: Severity = Severity.INFO

    # Console sink
    console_enabled: bool = True
    color_choice: ColorChoice = ColorChoice.AUTO

    # File sink
    file_enabled: bool = False
    log_dir: Path = Path(".")
    log_name: str = "log.log"
    max_file_size: int = DEFAULT_MAX_FILE_SIZE
    logs_to_keep: int = 1
    archive_match: ArchiveMatch = ArchiveMatch.SUFFIX

    # Line prefix toggles
    log_date: bool = False
    log_time: bool = False
    log_path: bool = False

    # Verbosity of rotolog's own loguru diagnostics (sink failures, rotations)
    diagnostic_level: str = "WARNING"

    model_config = SettingsConfigDict(env_prefix="ROTOLOG_")

    @field_validator("level", mode="before")
    @classmethod
    def coerce_level(cls, value: Any) -> Severity:
        return Severity.coerce(value)

    def to_config(self) -> LoggerConfig:
        """Build a validated `LoggerConfig` from these settings.

        Raises:
            ConfigError: When the combined options are invalid.

        """
        options: dict[str, Any] = {
            "level": self.level,
            "console": {"color_choice": self.color_choice} if self.console_enabled else None,
            "log_date": self.log_date,
            "log_time": self.log_time,
            "log_path": self.log_path,
        }
        if self.file_enabled:
            options["file"] = {
                "directory": self.log_dir,
                "log_name": self.log_name,
                "max_file_size": self.max_file_size,
                "logs_to_keep": self.logs_to_keep,
                "archive_match": self.archive_match,
            }
        return build_config(**options)


settings = Settings()
