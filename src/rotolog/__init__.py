"""rotolog: a logging backend with colored console and size-rotated file sinks."""

from rotolog.bridge import StdlibHandler, install
from rotolog.config.models import (
    Color,
    ColorChoice,
    ConsoleSinkConfig,
    FileSinkConfig,
    LoggerConfig,
    build_config,
)
from rotolog.dispatch import Dispatcher
from rotolog.errors import (
    AlreadyInitializedError,
    ConfigError,
    FileError,
    ParseError,
    RotologError,
)
from rotolog.logger import Logger, get_logger, init, reset_default
from rotolog.models import LogRecord, Severity
from rotolog.rotation import ArchiveMatch

__all__ = [
    "AlreadyInitializedError",
    "ArchiveMatch",
    "Color",
    "ColorChoice",
    "ConfigError",
    "ConsoleSinkConfig",
    "Dispatcher",
    "FileError",
    "FileSinkConfig",
    "LogRecord",
    "Logger",
    "LoggerConfig",
    "ParseError",
    "RotologError",
    "Severity",
    "StdlibHandler",
    "build_config",
    "get_logger",
    "init",
    "install",
    "reset_default",
]
