"""Exception types raised by rotolog.

Per-write failures (`FileError`) are caught by the dispatcher and reported to
the diagnostic channel; initialization failures (`ConfigError`) are raised to
whoever is setting up the logger.
"""

from __future__ import annotations

import pathlib


class RotologError(Exception):
    """Base class for all rotolog errors."""


class FileError(RotologError):
    """An open, write, rename, delete, stat or listing operation failed.

    Args:
        message (str): Human readable description of the failed operation.
        path (pathlib.Path | None): The file or directory involved, if known.

    """

    def __init__(self, message: str, path: pathlib.Path | None = None):
        super().__init__(message)
        self.path = path


class ParseError(RotologError):
    """An archive file name does not carry a recognisable rotation timestamp."""


class ConfigError(RotologError, ValueError):
    """Invalid configuration or an unusable log directory."""


class AlreadyInitializedError(RotologError):
    """The shared default logger has already been initialized."""
