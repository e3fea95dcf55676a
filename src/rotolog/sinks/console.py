"""Console sink writing colored lines to standard output."""

from __future__ import annotations

import sys
from typing import TextIO

from rotolog.config.models import Color, ColorChoice, ConsoleSinkConfig
from rotolog.models import LogRecord, Severity

ANSI_CODES = {
    Color.BLACK: 30,
    Color.RED: 31,
    Color.GREEN: 32,
    Color.YELLOW: 33,
    Color.BLUE: 34,
    Color.MAGENTA: 35,
    Color.CYAN: 36,
    Color.WHITE: 37,
}
RESET = "\033[0m"


class ConsoleSink:
    """Write each line to a text stream, colored by severity.

    Args:
        config (ConsoleSinkConfig): Console options.
        stream (TextIO | None): Target stream; `sys.stdout` as found at write
            time when omitted.

    """

    name = "console"

    def __init__(self, config: ConsoleSinkConfig | None = None, *, stream: TextIO | None = None):
        self.config = config or ConsoleSinkConfig()
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def accepts(self, severity: Severity) -> bool:
        return self.config.level.accepts(severity)

    def use_color(self) -> bool:
        choice = self.config.color_choice
        if choice is ColorChoice.AUTO:
            isatty = getattr(self.stream, "isatty", None)
            return bool(isatty and isatty())
        return choice is ColorChoice.ALWAYS

    def colorize(self, line: str, severity: Severity) -> str:
        code = ANSI_CODES[self.config.color_for(severity)]
        return f"\033[{code}m{line}{RESET}"

    def emit(self, line: str, record: LogRecord) -> None:
        if self.use_color():
            line = self.colorize(line, record.severity)
        self.stream.write(f"{line}\n")

    def flush(self) -> None:
        self.stream.flush()

    def close(self) -> None:
        # the stream is not ours to close
        self.flush()
