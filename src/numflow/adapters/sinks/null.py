"""Sink that discards everything."""

from __future__ import annotations

from numflow.application.ports.sink import LogSinkPort
from numflow.domain.outcome import Outcome


class NullSink(LogSinkPort):
    """Accept and drop every line without reporting anything."""

    def write(self, line: str) -> Outcome[None]:
        return Outcome.success(None)

    def close(self) -> None:
        return None


__all__ = ["NullSink"]
