"""Value types used across rotolog.

Expose the severity enum, the log record and the archive entry model.
"""

from .record import ArchiveEntry, LogRecord, Severity

__all__ = ["ArchiveEntry", "LogRecord", "Severity"]
