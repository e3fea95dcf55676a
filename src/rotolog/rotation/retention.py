"""Retention pass over rotated log files.

`RetentionScanner` lists the archives that belong to a base log name, orders
them by rotation timestamp and removes the single oldest one when more than
the configured number are present.
"""

from __future__ import annotations

import os
import pathlib

from loguru import logger

from rotolog.errors import FileError, ParseError
from rotolog.models import ArchiveEntry
from rotolog.rotation.naming import ArchiveMatch, matches, parse_archive_name


class RetentionScanner:
    """Enumerate and prune the archives of a base log name.

    Args:
        match (ArchiveMatch): How archive candidates are recognised; defaults
            to a strict ``-<base_name>`` suffix match.

    """

    def __init__(self, match: ArchiveMatch = ArchiveMatch.SUFFIX) -> None:
        self.match = ArchiveMatch(match)
        self.logger = logger.bind(component=self.__class__.__name__)

    def scan(self, directory: pathlib.Path | str, base_name: str) -> list[ArchiveEntry]:
        """Return the archive candidates in `directory`, oldest first.

        Candidates whose name cannot be parsed are placed last.

        Raises:
            FileError: When the directory cannot be listed.

        """
        directory = pathlib.Path(directory)
        try:
            with os.scandir(directory) as it:
                names = [entry.name for entry in it if entry.is_file()]
        except OSError as exc:
            raise FileError(f"Cannot list log directory {directory}: {exc}", directory) from exc

        entries = []
        for name in names:
            if not matches(name, base_name, self.match):
                continue
            try:
                instant, sequence = parse_archive_name(name, base_name)
            except ParseError as exc:
                self.logger.debug("Keeping unrecognised archive {}: {}", name, exc)
                entries.append(ArchiveEntry(file_name=name, path=directory / name))
                continue
            entries.append(
                ArchiveEntry(
                    file_name=name,
                    path=directory / name,
                    parsed_timestamp=instant,
                    sequence=sequence,
                )
            )
        entries.sort(key=ArchiveEntry.sort_key)
        return entries

    def prune(
        self, directory: pathlib.Path | str, base_name: str, retain_count: int
    ) -> pathlib.Path | None:
        """Remove the oldest archive when more than `retain_count` exist.

        At most one file is removed per call. Unparseable candidates count
        toward the total but are never removed.

        Args:
            directory (pathlib.Path | str): Directory holding the log files.
            base_name (str): Name of the active log file.
            retain_count (int): Number of archives to keep.

        Returns:
            pathlib.Path | None: The removed archive, or None when nothing was pruned.

        Raises:
            FileError: When listing or deleting fails; the pass is abandoned.

        """
        entries = self.scan(directory, base_name)
        if len(entries) <= retain_count:
            return None

        oldest = next((entry for entry in entries if entry.parsed), None)
        if oldest is None:
            self.logger.debug(
                "{} archives of {} exceed {} but none has a parseable timestamp",
                len(entries),
                base_name,
                retain_count,
            )
            return None

        try:
            oldest.path.unlink()
        except OSError as exc:
            raise FileError(f"Cannot remove archive {oldest.path}: {exc}", oldest.path) from exc
        self.logger.debug("Pruned archive {}", oldest.file_name)
        return oldest.path
