"""Size-triggered rotation of the active log file."""

from __future__ import annotations

import datetime
import os
import pathlib
from typing import TYPE_CHECKING, Callable

from loguru import logger

from rotolog.errors import FileError, ParseError
from rotolog.rotation.naming import archive_name, format_timestamp, parse_archive_name
from rotolog.rotation.retention import RetentionScanner

if TYPE_CHECKING:
    from rotolog.config.models import FileSinkConfig


class Rotator:
    """Rename the active file to a timestamped archive once it grows too large.

    The rotator relies on the caller (the dispatcher) holding its lock; the
    rename and the following retention pass are not otherwise synchronized.

    Args:
        directory (pathlib.Path | str): Directory holding the log files.
        base_name (str): Name of the active log file.
        max_file_size (int): Size in bytes above which the file is rotated.
        logs_to_keep (int): Number of archives kept by the retention pass.
        scanner (RetentionScanner | None): Retention scanner; a suffix-matching
            one is created when omitted.
        clock (Callable[[], datetime.datetime]): Source of rotation instants.

    """

    def __init__(
        self,
        directory: pathlib.Path | str,
        base_name: str,
        *,
        max_file_size: int,
        logs_to_keep: int,
        scanner: RetentionScanner | None = None,
        clock: Callable[[], datetime.datetime] = datetime.datetime.now,
    ) -> None:
        self.directory = pathlib.Path(directory)
        self.base_name = base_name
        self.max_file_size = max_file_size
        self.logs_to_keep = logs_to_keep
        self.scanner = scanner or RetentionScanner()
        self._clock = clock
        self.logger = logger.bind(component=self.__class__.__name__)

    @classmethod
    def from_config(
        cls,
        config: FileSinkConfig,
        *,
        clock: Callable[[], datetime.datetime] = datetime.datetime.now,
    ) -> Rotator:
        return cls(
            config.directory,
            config.log_name,
            max_file_size=config.max_file_size,
            logs_to_keep=config.logs_to_keep,
            scanner=RetentionScanner(config.archive_match),
            clock=clock,
        )

    @property
    def active_path(self) -> pathlib.Path:
        return self.directory / self.base_name

    def archive_path_for(self, instant: datetime.datetime) -> pathlib.Path:
        """Return a free archive path for a rotation at `instant`.

        The ``.N`` disambiguator continues after the highest one already used
        for the same second, so the new archive sorts after all of them even
        when lower numbers have been pruned.

        Raises:
            FileError: When the directory cannot be listed.

        """
        second = instant.replace(microsecond=0)
        stamp = format_timestamp(instant)
        try:
            with os.scandir(self.directory) as it:
                names = [entry.name for entry in it if entry.name.startswith(stamp)]
        except OSError as exc:
            raise FileError(
                f"Cannot list log directory {self.directory}: {exc}", self.directory
            ) from exc

        used = []
        for name in names:
            try:
                parsed, sequence = parse_archive_name(name, self.base_name)
            except ParseError:
                continue
            if parsed == second:
                used.append(sequence)
        sequence = max(used) + 1 if used else 0
        return self.directory / archive_name(instant, self.base_name, sequence)

    def maybe_rotate(self, current_size: int) -> pathlib.Path | None:
        """Rotate the active file when `current_size` exceeds the threshold.

        Args:
            current_size (int): Size of the active file after the last write.

        Returns:
            pathlib.Path | None: The archive path when a rotation happened.

        Raises:
            FileError: When the rename or the retention pass fails.

        """
        if current_size <= self.max_file_size:
            return None

        target = self.archive_path_for(self._clock())
        try:
            os.rename(self.active_path, target)
        except OSError as exc:
            raise FileError(
                f"Cannot rotate {self.active_path} to {target.name}: {exc}", self.active_path
            ) from exc
        self.logger.debug(
            "Rotated {} at {} bytes to {}", self.base_name, current_size, target.name
        )

        self.scanner.prune(self.directory, self.base_name, self.logs_to_keep)
        return target
