"""Bridge from the standard library `logging` module.

`StdlibHandler` lets code that logs through `logging.getLogger(...)` write to
a rotolog `Logger`. `install` attaches one to the root logger.
"""

from __future__ import annotations

import datetime
import logging

from rotolog.logger import Logger, get_logger
from rotolog.models import LogRecord, Severity


def severity_from_stdlib(levelno: int) -> Severity:
    """Map a stdlib logging level number to a rotolog severity."""
    if levelno >= logging.ERROR:
        return Severity.ERROR
    if levelno >= logging.WARNING:
        return Severity.WARN
    if levelno >= logging.INFO:
        return Severity.INFO
    if levelno >= logging.DEBUG:
        return Severity.DEBUG
    return Severity.TRACE


class StdlibHandler(logging.Handler):
    """A `logging.Handler` forwarding records to a rotolog logger.

    Args:
        target (Logger | None): Logger to forward to; the shared default
            (`get_logger()`) is looked up per record when omitted.
        level (int): Minimum stdlib level handled.

    """

    def __init__(self, target: Logger | None = None, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.target = target
        self._formatter = logging.Formatter()

    def emit(self, record: logging.LogRecord) -> None:
        severity = severity_from_stdlib(record.levelno)
        try:
            # building the default logger may fail; never raise into the caller
            target = self.target or get_logger()
            if not target.enabled(severity):
                return
            message = record.getMessage()
            if record.exc_info:
                message = f"{message}\n{self._formatter.formatException(record.exc_info)}"
        except Exception:
            self.handleError(record)
            return
        target.emit(
            LogRecord(
                severity=severity,
                timestamp=datetime.datetime.fromtimestamp(record.created),
                origin_path=record.name,
                message=message,
            )
        )


def install(target: Logger | None = None, level: int | None = None) -> StdlibHandler:
    """Attach a `StdlibHandler` to the root logger and return it.

    Args:
        target (Logger | None): Logger to forward to; the shared default when omitted.
        level (int | None): When given, also set the root logger level.

    """
    handler = StdlibHandler(target)
    root = logging.getLogger()
    root.addHandler(handler)
    if level is not None:
        root.setLevel(level)
    return handler
