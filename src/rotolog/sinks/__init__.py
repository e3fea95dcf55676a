"""Sinks package exports.

Expose the sink protocol and the console and file sink implementations.
"""

from .base import Sink
from .console import ConsoleSink
from .file import FileSink

__all__ = ["ConsoleSink", "FileSink", "Sink"]
