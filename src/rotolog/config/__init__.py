"""Configuration models and environment settings.

Expose the logger and sink configuration models together with the
`Settings` class; the environment-backed instance lives in
`rotolog.config.settings`.
"""

from .models import (
    Color,
    ColorChoice,
    ConsoleSinkConfig,
    FileSinkConfig,
    LoggerConfig,
    build_config,
)
from .settings import Settings

__all__ = [
    "Color",
    "ColorChoice",
    "ConsoleSinkConfig",
    "FileSinkConfig",
    "LoggerConfig",
    "Settings",
    "build_config",
]
