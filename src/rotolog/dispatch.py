"""Serialized dispatch of log records to sinks.

This module exposes `Dispatcher`, the single entry point between the logger
handle and its sinks. Every call runs under one lock so lines never interleave
and a rotation triggered by one call (rename and prune) finishes before the
next call writes. Sink failures stop at this boundary: they are reported to
rotolog's diagnostic channel and never reach the caller.
"""

from __future__ import annotations

import threading
from typing import Iterable

from loguru import logger

from rotolog.models import LogRecord
from rotolog.rotation.naming import TIMESTAMP_FORMAT
from rotolog.sinks.base import Sink

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%I:%M:%S%p"


class Dispatcher:
    """Render records once and write them to every accepting sink.

    Args:
        sinks (Iterable[Sink]): Sinks to write to, in order.
        log_date (bool): Prefix lines with the record date.
        log_time (bool): Prefix lines with the record time of day.
        log_path (bool): Prefix lines with the record origin path.

    """

    def __init__(
        self,
        sinks: Iterable[Sink],
        *,
        log_date: bool = False,
        log_time: bool = False,
        log_path: bool = False,
    ) -> None:
        self._sinks = list(sinks)
        self.log_date = log_date
        self.log_time = log_time
        self.log_path = log_path
        self._lock = threading.Lock()
        # sinks whose last call failed
        self._failing: set[int] = set()
        self.logger = logger.bind(component=self.__class__.__name__)

    @property
    def sinks(self) -> tuple[Sink, ...]:
        return tuple(self._sinks)

    def _timestamp_format(self) -> str | None:
        if self.log_date and self.log_time:
            return TIMESTAMP_FORMAT
        if self.log_date:
            return DATE_FORMAT
        if self.log_time:
            return TIME_FORMAT
        return None

    def render(self, record: LogRecord) -> str:
        """Render `record` as ``[timestamp ][origin ]LEVEL::message``."""
        parts = []
        fmt = self._timestamp_format()
        if fmt is not None:
            parts.append(record.timestamp.strftime(fmt))
        if self.log_path and record.origin_path:
            parts.append(record.origin_path)
        parts.append(f"{record.severity.name}::{record.message}")
        return " ".join(parts)

    def emit(self, record: LogRecord) -> None:
        """Write `record` to every sink that accepts its severity.

        Never raises because of a sink; failures go to the diagnostic channel.
        """
        with self._lock:
            line = self.render(record)
            for sink in self._sinks:
                if not sink.accepts(record.severity):
                    continue
                try:
                    sink.emit(line, record)
                except Exception as exc:
                    self._report_failure(sink, "write", exc)
                else:
                    self._report_success(sink)

    def flush(self) -> None:
        with self._lock:
            for sink in self._sinks:
                try:
                    sink.flush()
                except Exception as exc:
                    self._report_failure(sink, "flush", exc)

    def close(self) -> None:
        with self._lock:
            for sink in self._sinks:
                try:
                    sink.close()
                except Exception as exc:
                    self._report_failure(sink, "close", exc)

    def _report_failure(self, sink: Sink, action: str, exc: Exception) -> None:
        key = id(sink)
        if key in self._failing:
            self.logger.debug("{} sink still failing to {}: {}", sink.name, action, exc)
            return
        self._failing.add(key)
        self.logger.warning("{} sink failed to {}: {}", sink.name, action, exc)

    def _report_success(self, sink: Sink) -> None:
        key = id(sink)
        if key in self._failing:
            self._failing.discard(key)
            self.logger.info("{} sink recovered", sink.name)
