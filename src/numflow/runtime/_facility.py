"""Logging facility owning exactly one active sink.

Purpose
-------
Route formatted ``[file:function:line] message`` lines to whichever sink is
currently selected and let callers switch sinks at runtime.

Lifecycle
---------
A :class:`LogFacility` is constructed explicitly at startup (console sink by
default) and passed to the code that logs. :meth:`LogFacility.close` (or
leaving the ``with`` block) releases the active sink, closing any file handle.
A closed facility has no kind and refuses further switches.

Invariants
----------
* Exactly one sink is owned between construction and :meth:`close`.
* Switching builds the new sink, installs it, then closes the previous one;
  the lock keeps writes from observing a half-finished switch.
* An unrecognised kind leaves the active sink untouched.
"""

from __future__ import annotations

import logging
from threading import RLock
from types import TracebackType
from typing import Any

from rich.console import Console

from numflow.adapters.sinks._reporting import Reporter, stderr_reporter
from numflow.application.ports.sink import LogSinkPort
from numflow.config import LoggingSettings
from numflow.domain.outcome import ErrorKind, Outcome
from numflow.domain.records import CallerLocation, LogRecord
from numflow.domain.sinks import SinkKind

from ._composition import build_sink, describe_switch

logger = logging.getLogger(__name__)


def _stdout_notice(console: Console) -> Reporter:
    def announce(message: str) -> None:
        console.print(message, markup=False, highlight=False, soft_wrap=True)

    return announce


class LogFacility:
    """Single-owner logging front end with switchable sinks.

    Examples
    --------
    >>> from io import StringIO
    >>> console = Console(file=StringIO(), width=120)
    >>> notices = []
    >>> facility = LogFacility(console=console, notice=notices.append)
    >>> facility.log("ready", CallerLocation("app.py", "main", 3)).ok
    True
    >>> console.file.getvalue()
    '[app.py:main:3] ready\\n'
    >>> facility.set_sink(SinkKind.NONE).unwrap()
    <SinkKind.NONE: 'none'>
    >>> notices
    ['Logging disabled.']
    >>> facility.close()
    """

    def __init__(
        self,
        settings: LoggingSettings | None = None,
        *,
        initial: SinkKind = SinkKind.CONSOLE,
        console: Console | None = None,
        notice: Reporter | None = None,
        report: Reporter | None = None,
    ) -> None:
        self._settings = settings if settings is not None else LoggingSettings()
        self._console = console
        self._notice = notice if notice is not None else _stdout_notice(console or Console(highlight=False, emoji=False))
        self._report = report if report is not None else stderr_reporter
        self._lock = RLock()
        self._closed = False
        self._kind: SinkKind | None = initial
        self._sink: LogSinkPort | None = build_sink(initial, self._settings, report=self._report, console=console)

    @property
    def current_kind(self) -> SinkKind | None:
        """Kind of the active sink, ``None`` once the facility is closed."""

        with self._lock:
            return self._kind

    @property
    def closed(self) -> bool:
        with self._lock:
            return self._closed

    @property
    def settings(self) -> LoggingSettings:
        return self._settings

    def set_sink(self, kind: Any) -> Outcome[SinkKind]:
        """Replace the active sink with a new one of ``kind``.

        ``kind`` may be a :class:`SinkKind` or its name. Anything else is
        reported and leaves the current sink in place. A closed facility stays
        closed and refuses every switch.
        """

        if self.closed:
            return self._refuse_closed()

        resolved = _coerce_kind(kind)
        if resolved is None:
            message = "Unknown sink type. Previous sink remains."
            self._report(message)
            logger.debug("rejected sink selector %r", kind)
            return Outcome.fail(ErrorKind.UNKNOWN_SINK_KIND, message)

        replacement = build_sink(resolved, self._settings, report=self._report, console=self._console)
        with self._lock:
            if self._closed:
                replacement.close()
                return self._refuse_closed()
            previous, self._sink, self._kind = self._sink, replacement, resolved
            if previous is not None:
                previous.close()
        logger.debug("sink switched to %s", resolved.value)
        self._notice(describe_switch(resolved, self._settings))
        return Outcome.success(resolved)

    def log(self, message: str, location: CallerLocation | None = None) -> Outcome[None]:
        """Format ``message`` with ``location`` and hand it to the active sink.

        When ``location`` is omitted the immediate caller is captured.
        """

        where = location if location is not None else CallerLocation.here(depth=2)
        line = LogRecord(location=where, message=message).format()
        with self._lock:
            sink = self._sink
            if sink is None:
                error = "Error: Sink not set."
                self._report(error)
                return Outcome.fail(ErrorKind.SINK_UNAVAILABLE, error)
            return sink.write(line)

    def close(self) -> None:
        """Release the active sink; later ``log`` calls report instead of writing."""

        with self._lock:
            sink, self._sink, self._kind = self._sink, None, None
            self._closed = True
        if sink is not None:
            sink.close()

    def _refuse_closed(self) -> Outcome[SinkKind]:
        message = "Error: Logging facility is closed."
        self._report(message)
        return Outcome.fail(ErrorKind.SINK_UNAVAILABLE, message)

    def __enter__(self) -> "LogFacility":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def _coerce_kind(kind: Any) -> SinkKind | None:
    if isinstance(kind, SinkKind):
        return kind
    if isinstance(kind, str):
        try:
            return SinkKind.from_name(kind)
        except ValueError:
            return None
    return None


__all__ = ["LogFacility"]
