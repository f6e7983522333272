"""Concrete adapters for reading numbers, observing runs, and sinking logs."""

from __future__ import annotations

from .observers import CountObserver, PrintObserver
from .reader import FileNumberReader
from .sinks import ConsoleSink, FileSink, NullSink

__all__ = [
    "ConsoleSink",
    "CountObserver",
    "FileNumberReader",
    "FileSink",
    "NullSink",
    "PrintObserver",
]
