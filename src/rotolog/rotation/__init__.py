"""Rotation and retention engine for the file sink.

Expose the archive naming helpers, the retention scanner and the rotator.
"""

from .naming import TIMESTAMP_FORMAT, ArchiveMatch, archive_name, parse_archive_name
from .retention import RetentionScanner
from .rotator import Rotator

__all__ = [
    "TIMESTAMP_FORMAT",
    "ArchiveMatch",
    "RetentionScanner",
    "Rotator",
    "archive_name",
    "parse_archive_name",
]
