"""Logging utilities to configure rotolog's own diagnostic output.

rotolog reports sink failures, rotations and pruning through the global
`loguru` logger. This module configures that diagnostic channel; it is not run
at import time so applications keep control of loguru's handlers.
"""

from __future__ import annotations

import sys

from loguru import logger

from rotolog.config.settings import settings

DIAGNOSTIC_FORMAT = "rotolog | {level: <8} | {extra[component]} | {message}"


def configure_logging(level: str | None = None) -> int:
    """Route rotolog diagnostics to stderr.

    This helper removes loguru's existing handlers and adds a single stderr
    handler showing records bound with a ``component``.

    Args:
        level (str | None): Minimum loguru level; `settings.diagnostic_level`
            when omitted.

    Returns:
        int: The loguru handler id, usable with `logger.remove`.

    """
    logger.remove()
    return logger.add(
        sys.stderr,
        level=level or settings.diagnostic_level,
        format=DIAGNOSTIC_FORMAT,
        filter=lambda record: "component" in record["extra"],
        backtrace=False,
        diagnose=False,
    )
