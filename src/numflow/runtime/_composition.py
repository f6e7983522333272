"""Sink construction keyed by :class:`SinkKind`.

Purpose
-------
Keep the mapping from sink kind to adapter constructor in one declarative
table so :class:`LogFacility` never branches on concrete adapter types.
"""

from __future__ import annotations

from typing import Callable, Mapping

from rich.console import Console

from numflow.adapters.sinks import ConsoleSink, FileSink, NullSink
from numflow.adapters.sinks._reporting import Reporter
from numflow.application.ports.sink import LogSinkPort
from numflow.config import LoggingSettings
from numflow.domain.sinks import SinkKind

SinkBuilder = Callable[[LoggingSettings, Reporter, Console | None], LogSinkPort]


def _build_console(settings: LoggingSettings, report: Reporter, console: Console | None) -> LogSinkPort:
    return ConsoleSink(console=console)


def _build_file(settings: LoggingSettings, report: Reporter, console: Console | None) -> LogSinkPort:
    return FileSink(settings.log_path, report=report)


def _build_null(settings: LoggingSettings, report: Reporter, console: Console | None) -> LogSinkPort:
    return NullSink()


SINK_BUILDERS: Mapping[SinkKind, SinkBuilder] = {
    SinkKind.CONSOLE: _build_console,
    SinkKind.FILE: _build_file,
    SinkKind.NONE: _build_null,
}


def build_sink(
    kind: SinkKind,
    settings: LoggingSettings,
    *,
    report: Reporter,
    console: Console | None = None,
) -> LogSinkPort:
    """Return a freshly constructed sink for ``kind``."""

    return SINK_BUILDERS[kind](settings, report, console)


def describe_switch(kind: SinkKind, settings: LoggingSettings) -> str:
    """Return the notice announced after switching to ``kind``.

    >>> describe_switch(SinkKind.NONE, LoggingSettings())
    'Logging disabled.'
    """

    if kind is SinkKind.CONSOLE:
        return "Logging redirected to console."
    if kind is SinkKind.FILE:
        return f"Logging redirected to file {settings.log_path}."
    return "Logging disabled."


__all__ = ["SINK_BUILDERS", "SinkBuilder", "build_sink", "describe_switch"]
