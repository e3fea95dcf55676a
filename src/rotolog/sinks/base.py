"""Sink interface (adapter pattern)."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from rotolog.models import LogRecord, Severity


@runtime_checkable
class Sink(Protocol):
    """A destination for rendered log lines.

    Sinks are only ever called by the dispatcher while it holds its lock.
    """

    name: str

    def accepts(self, severity: Severity) -> bool:
        """Return True when records of `severity` should be written."""
        ...

    def emit(self, line: str, record: LogRecord) -> None:
        """Write one rendered line."""
        ...

    def flush(self) -> None: ...

    def close(self) -> None: ...
