"""Destinations for formatted log lines."""

from __future__ import annotations

from .console import ConsoleSink
from .file import DEFAULT_LOG_PATH, FileSink
from .null import NullSink

__all__ = ["ConsoleSink", "DEFAULT_LOG_PATH", "FileSink", "NullSink"]
