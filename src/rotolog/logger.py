"""The logger handle and the shared default instance.

Application code holds a `Logger` and calls its leveled methods::

    log = Logger(build_config(level="info", file={"directory": "logs"}))
    log.info("started %s workers", 4)

Where a process-wide logger is wanted, `init` installs one explicitly and
`get_logger` returns it, creating it from environment settings on first use
when nothing was installed. The default is created at most once.
"""

from __future__ import annotations

import datetime
import sys
import threading
from typing import Any, Callable, Sequence

from loguru import logger

from rotolog.config.models import LoggerConfig
from rotolog.dispatch import Dispatcher
from rotolog.errors import AlreadyInitializedError
from rotolog.models import LogRecord, Severity
from rotolog.sinks import ConsoleSink, FileSink, Sink


def build_sinks(
    config: LoggerConfig,
    *,
    clock: Callable[[], datetime.datetime] = datetime.datetime.now,
) -> list[Sink]:
    """Create the sinks described by `config`, console first.

    Raises:
        ConfigError: When the file sink directory cannot be used.

    """
    sinks: list[Sink] = []
    if config.console is not None:
        sinks.append(ConsoleSink(config.console))
    if config.file is not None:
        sinks.append(FileSink(config.file, clock=clock))
    return sinks


def _caller_module(depth: int) -> str | None:
    try:
        frame = sys._getframe(depth + 1)
    except ValueError:
        return None
    return frame.f_globals.get("__name__")


class Logger:
    """Explicit logger handle applying the global threshold.

    Args:
        config (LoggerConfig | None): Logger options; the defaults when omitted.
        sinks (Sequence[Sink] | None): Sinks to use instead of the ones
            described by `config`.
        clock (Callable[[], datetime.datetime]): Source of record timestamps
            and rotation instants.

    """

    def __init__(
        self,
        config: LoggerConfig | None = None,
        *,
        sinks: Sequence[Sink] | None = None,
        clock: Callable[[], datetime.datetime] = datetime.datetime.now,
    ) -> None:
        self.config = config or LoggerConfig()
        self._clock = clock
        if sinks is None:
            sinks = build_sinks(self.config, clock=clock)
        self.dispatcher = Dispatcher(
            sinks,
            log_date=self.config.log_date,
            log_time=self.config.log_time,
            log_path=self.config.log_path,
        )
        self.logger = logger.bind(component=self.__class__.__name__)

    def __enter__(self) -> Logger:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def level(self) -> Severity:
        return self.config.level

    def enabled(self, severity: Severity) -> bool:
        return self.config.level.accepts(severity)

    def emit(self, record: LogRecord) -> None:
        """Hand an already accepted record to the dispatcher."""
        self.dispatcher.emit(record)

    def log(self, severity: Severity | str, message: str, *args: Any) -> None:
        """Log `message % args` at `severity` when it passes the threshold."""
        self._log(Severity.coerce(severity), message, args)

    def trace(self, message: str, *args: Any) -> None:
        self._log(Severity.TRACE, message, args)

    def debug(self, message: str, *args: Any) -> None:
        self._log(Severity.DEBUG, message, args)

    def info(self, message: str, *args: Any) -> None:
        self._log(Severity.INFO, message, args)

    def warn(self, message: str, *args: Any) -> None:
        self._log(Severity.WARN, message, args)

    warning = warn

    def error(self, message: str, *args: Any) -> None:
        self._log(Severity.ERROR, message, args)

    def flush(self) -> None:
        self.dispatcher.flush()

    def close(self) -> None:
        self.dispatcher.close()

    def _log(self, severity: Severity, message: str, args: tuple) -> None:
        if not self.enabled(severity):
            return
        # caller -> public method -> _log
        origin = _caller_module(2)
        self.emit(LogRecord(severity, self._clock(), origin, self._format(message, args)))

    def _format(self, message: str, args: tuple) -> str:
        message = str(message)
        if not args:
            return message
        try:
            return message % args
        except (TypeError, ValueError) as exc:
            self.logger.warning("Bad log format {!r}: {}", message, exc)
            return f"{message} {args!r}"


_default: Logger | None = None
_default_lock = threading.Lock()


def init(config: LoggerConfig | None = None) -> Logger:
    """Install the shared default logger.

    Raises:
        AlreadyInitializedError: When a default logger already exists.
        ConfigError: When the logger cannot be built from `config`.

    """
    global _default
    with _default_lock:
        if _default is not None:
            raise AlreadyInitializedError("The default rotolog logger is already initialized")
        _default = Logger(config)
        return _default


def get_logger() -> Logger:
    """Return the shared default logger, creating it from settings on first use."""
    global _default
    with _default_lock:
        if _default is None:
            from rotolog.config.settings import settings

            _default = Logger(settings.to_config())
        return _default


def reset_default() -> None:
    """Close and forget the shared default logger.

    Intended for tests; not safe while other threads are logging through it.
    """
    global _default
    with _default_lock:
        if _default is not None:
            _default.close()
        _default = None
