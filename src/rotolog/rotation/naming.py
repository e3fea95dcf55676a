"""Archive file naming for rotated logs.

Archives are named ``<timestamp>[.N]-<base_name>`` where the timestamp is the
rotation instant rendered with `TIMESTAMP_FORMAT` (second precision, 12-hour
clock) and ``.N`` is an optional disambiguator used when several rotations
happen within the same second.
"""

from __future__ import annotations

import datetime
import enum
import re

from rotolog.errors import ParseError

TIMESTAMP_FORMAT = "%Y-%m-%d.%I:%M:%S%p"

_PREFIX_RE = re.compile(
    r"^(?P<stamp>\d{4}-\d{2}-\d{2}\.\d{2}:\d{2}:\d{2}[AP]M)(?:\.(?P<sequence>[1-9]\d*))?$"
)


class ArchiveMatch(str, enum.Enum):
    """How files in the log directory are recognised as archives of a base name."""

    # name ends with "-<base_name>"
    SUFFIX = "suffix"
    # name contains <base_name> anywhere
    SUBSTRING = "substring"


def format_timestamp(instant: datetime.datetime) -> str:
    """Render `instant` in the archive timestamp format."""
    return instant.strftime(TIMESTAMP_FORMAT)


def archive_name(instant: datetime.datetime, base_name: str, sequence: int = 0) -> str:
    """Build the archive file name for a rotation at `instant`.

    Args:
        instant (datetime.datetime): The rotation instant.
        base_name (str): Name of the active log file.
        sequence (int): Same-second disambiguator; 0 means none.

    Returns:
        str: The archive file name.

    """
    if sequence < 0:
        raise ValueError("sequence must be >= 0")
    stamp = format_timestamp(instant)
    if sequence:
        stamp = f"{stamp}.{sequence}"
    return f"{stamp}-{base_name}"


def parse_archive_name(file_name: str, base_name: str) -> tuple[datetime.datetime, int]:
    """Recover the rotation instant and disambiguator from an archive name.

    Args:
        file_name (str): Candidate archive file name.
        base_name (str): Name of the active log file.

    Returns:
        tuple[datetime.datetime, int]: The naive rotation instant (second
            precision) and the sequence number (0 when absent).

    Raises:
        ParseError: When the name is not ``<timestamp>[.N]-<base_name>``.

    """
    suffix = f"-{base_name}"
    if not file_name.endswith(suffix):
        raise ParseError(f"{file_name!r} does not end with {suffix!r}")
    prefix = file_name[: -len(suffix)]
    match = _PREFIX_RE.match(prefix)
    if match is None:
        raise ParseError(f"{prefix!r} is not a rotation timestamp")
    try:
        instant = datetime.datetime.strptime(match.group("stamp"), TIMESTAMP_FORMAT)
    except ValueError as exc:
        raise ParseError(str(exc)) from exc
    return instant, int(match.group("sequence") or 0)


def matches(file_name: str, base_name: str, mode: ArchiveMatch = ArchiveMatch.SUFFIX) -> bool:
    """Return True when `file_name` is an archive candidate for `base_name`.

    The active file itself (``file_name == base_name``) never matches.
    """
    if file_name == base_name:
        return False
    if mode is ArchiveMatch.SUBSTRING:
        return base_name in file_name
    return file_name.endswith(f"-{base_name}")
