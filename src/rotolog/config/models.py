"""Configuration models for the logger and its sinks.

Each model is an immutable pydantic model whose defaults are declared once on
the field. `build_config` is the validating entry point used when options come
from untyped sources; it reports problems as `ConfigError`.
"""

from __future__ import annotations

import enum
import os
import pathlib
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from rotolog.errors import ConfigError
from rotolog.models import Severity
from rotolog.rotation.naming import ArchiveMatch

DEFAULT_MAX_FILE_SIZE = 1024 * 1024


class Color(str, enum.Enum):
    """The eight basic ANSI terminal colors."""

    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"


class ColorChoice(str, enum.Enum):
    """When the console sink emits color escape sequences."""

    ALWAYS = "always"
    AUTO = "auto"
    NEVER = "never"


def _coerce_severity(value: Any) -> Severity:
    return Severity.coerce(value)


class ConsoleSinkConfig(BaseModel):
    """Options of the colorized console sink."""

    model_config = ConfigDict(frozen=True)

    level: Severity = Severity.TRACE
    color_choice: ColorChoice = ColorChoice.AUTO
    error_color: Color = Color.RED
    warn_color: Color = Color.RED
    info_color: Color = Color.WHITE
    debug_color: Color = Color.GREEN
    trace_color: Color = Color.WHITE

    coerce_level = field_validator("level", mode="before")(_coerce_severity)

    def color_for(self, severity: Severity) -> Color:
        """Return the configured color for `severity`."""
        return {
            Severity.ERROR: self.error_color,
            Severity.WARN: self.warn_color,
            Severity.INFO: self.info_color,
            Severity.DEBUG: self.debug_color,
        }.get(severity, self.trace_color)


class FileSinkConfig(BaseModel):
    """Options of the size-rotated file sink.

    `directory` / `log_name` is the active file; archives are written next to
    it. `max_file_size` is the size in bytes above which the file is rotated
    and `logs_to_keep` the number of archives the retention pass keeps.
    """

    model_config = ConfigDict(frozen=True)

    directory: pathlib.Path = pathlib.Path(".")
    log_name: str = "log.log"
    max_file_size: int = Field(default=DEFAULT_MAX_FILE_SIZE, ge=1)
    logs_to_keep: int = Field(default=1, ge=0)
    level: Severity = Severity.TRACE
    archive_match: ArchiveMatch = ArchiveMatch.SUFFIX

    coerce_level = field_validator("level", mode="before")(_coerce_severity)

    @field_validator("log_name")
    @classmethod
    def check_log_name(cls, value: str) -> str:
        if not value or value in (".", ".."):
            raise ValueError("log_name must be a non-empty file name")
        separators = [sep for sep in (os.sep, os.altsep, "/") if sep]
        if any(sep in value for sep in separators):
            raise ValueError(f"log_name must not contain a path separator: {value!r}")
        return value


class LoggerConfig(BaseModel):
    """Top-level logger options.

    `level` is the global threshold applied before any sink sees a record; it
    defaults to `OFF` so an unconfigured logger stays silent. The console sink
    is present by default, the file sink only when configured.
    """

    model_config = ConfigDict(frozen=True)

    level: Severity = Severity.OFF
    console: ConsoleSinkConfig | None = Field(default_factory=ConsoleSinkConfig)
    file: FileSinkConfig | None = None
    log_date: bool = False
    log_time: bool = False
    log_path: bool = False

    coerce_level = field_validator("level", mode="before")(_coerce_severity)


def build_config(**options: Any) -> LoggerConfig:
    """Validate `options` into a `LoggerConfig`.

    Nested sink options may be given as mappings, e.g.
    ``build_config(level="info", file={"directory": "logs", "logs_to_keep": 5})``.

    Raises:
        ConfigError: When any option is invalid.

    """
    try:
        return LoggerConfig.model_validate(options)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
