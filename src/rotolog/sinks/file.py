"""Append-only file sink with size-based rotation.

`FileSink` appends every rendered line to ``directory/log_name`` and hands the
resulting file size to its `Rotator`, which archives the file once it grows
past the configured threshold.
"""

from __future__ import annotations

import datetime
import os
from typing import Callable

from rotolog.config.models import FileSinkConfig
from rotolog.errors import ConfigError, FileError
from rotolog.models import LogRecord, Severity
from rotolog.rotation import Rotator


class FileSink:
    """Write log lines to the active file and rotate it when needed.

    The log directory is created on construction; a path that cannot be used
    as a directory raises `ConfigError`. The active file itself is opened in
    append mode for each write and created when absent.

    Args:
        config (FileSinkConfig): File sink options.
        rotator (Rotator | None): Rotation policy; built from `config` when omitted.
        clock (Callable[[], datetime.datetime]): Source of rotation instants,
            only used when `rotator` is omitted.

    """

    name = "file"

    def __init__(
        self,
        config: FileSinkConfig,
        *,
        rotator: Rotator | None = None,
        clock: Callable[[], datetime.datetime] = datetime.datetime.now,
    ) -> None:
        self.config = config
        try:
            config.directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ConfigError(f"Cannot use {config.directory} as a log directory: {exc}") from exc
        self.path = config.directory / config.log_name
        self.rotator = rotator or Rotator.from_config(config, clock=clock)

    def accepts(self, severity: Severity) -> bool:
        return self.config.level.accepts(severity)

    def write(self, rendered_text: str) -> int:
        """Append `rendered_text` and a line terminator to the active file.

        Returns:
            int: The size of the active file in bytes after the write.

        Raises:
            FileError: When the file cannot be opened, written or stat'ed.

        """
        try:
            with self.path.open("a", encoding="utf-8") as handle:
                handle.write(f"{rendered_text}\n")
                handle.flush()
                return os.fstat(handle.fileno()).st_size
        except OSError as exc:
            raise FileError(f"Cannot write to {self.path}: {exc}", self.path) from exc

    def emit(self, line: str, record: LogRecord) -> None:
        size = self.write(line)
        self.rotator.maybe_rotate(size)

    def flush(self) -> None:
        # every write closes its handle
        pass

    def close(self) -> None:
        pass
