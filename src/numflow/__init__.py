"""Public package surface for the number pipeline and the switchable logger.

``numflow`` bundles two small programs: a file-driven integer filter that
notifies observers, and a logging facility that routes tagged lines to one
sink at a time. The names exported here cover both without reaching into the
layered subpackages.
"""

from __future__ import annotations

from .adapters import ConsoleSink, CountObserver, FileNumberReader, FileSink, NullSink, PrintObserver
from .application.filter_factory import FilterFactory, parse_filter_spec
from .application.use_cases import RunSummary, create_process_numbers
from .config import LoggingSettings
from .domain import CallerLocation, ErrorKind, Failure, LogRecord, Outcome, SinkKind
from .runtime import LogFacility

__all__ = [
    "CallerLocation",
    "ConsoleSink",
    "CountObserver",
    "ErrorKind",
    "Failure",
    "FileNumberReader",
    "FileSink",
    "FilterFactory",
    "LogFacility",
    "LogRecord",
    "LoggingSettings",
    "NullSink",
    "Outcome",
    "PrintObserver",
    "RunSummary",
    "SinkKind",
    "create_process_numbers",
    "parse_filter_spec",
]
