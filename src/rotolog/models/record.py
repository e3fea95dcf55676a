"""Value types shared by the dispatcher, the sinks and the rotation engine."""

from __future__ import annotations

import dataclasses
import datetime
import enum
import pathlib
from typing import Any


class Severity(enum.IntEnum):
    """Ordered log levels; `OFF` is only meaningful as a filter threshold."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    OFF = 5

    @classmethod
    def coerce(cls, value: Any) -> Severity:
        """Return a Severity from a member, an integer value or a level name.

        Names are matched case-insensitively; `WARNING` and `CRITICAL` are
        accepted as aliases so stdlib-style names work in environment settings.

        Raises:
            ValueError: When the value does not name a level.

        """
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            return cls(value)
        if isinstance(value, str):
            name = value.strip().upper()
            name = _ALIASES.get(name, name)
            try:
                return cls[name]
            except KeyError:
                pass
        raise ValueError(f"Unknown severity: {value!r}")

    def accepts(self, severity: Severity) -> bool:
        """Return True when a record of `severity` passes this threshold."""
        return severity is not Severity.OFF and severity >= self


_ALIASES = {"WARNING": "WARN", "CRITICAL": "ERROR", "FATAL": "ERROR", "NONE": "OFF"}


@dataclasses.dataclass(frozen=True)
class LogRecord:
    """A single log event, built per call and consumed synchronously."""

    severity: Severity
    timestamp: datetime.datetime
    origin_path: str | None
    message: str

    def __post_init__(self) -> None:
        if self.severity is Severity.OFF:
            raise ValueError("OFF is a filter threshold, not a record severity")


@dataclasses.dataclass(frozen=True)
class ArchiveEntry:
    """A rotated file found during a retention pass.

    `parsed_timestamp` is None when the name could not be parsed; such entries
    order after every parsed one (newest) and are never pruned.
    """

    file_name: str
    path: pathlib.Path
    parsed_timestamp: datetime.datetime | None = None
    sequence: int = 0

    @property
    def parsed(self) -> bool:
        return self.parsed_timestamp is not None

    def sort_key(self) -> tuple:
        # oldest first, unparseable last
        if self.parsed_timestamp is None:
            return (1, datetime.datetime.min, 0, self.file_name)
        return (0, self.parsed_timestamp, self.sequence, self.file_name)
