"""Append-only file sink.

Purpose
-------
Persist formatted log lines to a file that is opened once per sink instance
in append mode and never truncated or rotated.

Failure handling
----------------
If the file cannot be opened the sink stays usable: the open failure is
reported once and every later write reports that the file is not open. A write
that fails mid-way is reported as well. Nothing is raised from :meth:`write`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

from numflow.application.ports.sink import LogSinkPort
from numflow.domain.outcome import ErrorKind, Outcome

from ._reporting import Reporter, stderr_reporter

logger = logging.getLogger(__name__)

DEFAULT_LOG_PATH = Path("app.log")


class FileSink(LogSinkPort):
    """Append lines to ``path``, one line per write."""

    def __init__(self, path: Path | str = DEFAULT_LOG_PATH, *, report: Reporter | None = None) -> None:
        self._path = Path(path)
        self._report = report if report is not None else stderr_reporter
        self._handle: TextIO | None = None
        try:
            self._handle = self._path.open("a", encoding="utf-8")
        except OSError as exc:
            logger.debug("cannot open log file %s: %s", self._path, exc)
            self._report(f"Error opening file {self._path} for writing.")

    @property
    def path(self) -> Path:
        return self._path

    @property
    def is_open(self) -> bool:
        return self._handle is not None and not self._handle.closed

    def write(self, line: str) -> Outcome[None]:
        if self._handle is None or self._handle.closed:
            message = f"Error: File {self._path} is not open."
            self._report(message)
            return Outcome.fail(ErrorKind.SINK_UNAVAILABLE, message)
        try:
            self._handle.write(f"{line}\n")
            self._handle.flush()
        except (OSError, ValueError) as exc:
            logger.debug("write to %s failed: %s", self._path, exc)
            message = f"Error writing to file {self._path}."
            self._report(message)
            return Outcome.fail(ErrorKind.SINK_UNAVAILABLE, message)
        return Outcome.success(None)

    def close(self) -> None:
        if self._handle is not None and not self._handle.closed:
            self._handle.close()


__all__ = ["DEFAULT_LOG_PATH", "FileSink"]
