"""Sink port for destinations of formatted log lines.

Purpose
-------
Let the logging facility swap destinations without knowing whether a line ends
up on the terminal, in an append-only file, or nowhere.

System Role
-----------
Implemented by the adapters in :mod:`numflow.adapters.sinks`; consumed by
:class:`numflow.runtime.LogFacility`.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from numflow.domain.outcome import Outcome


@runtime_checkable
class LogSinkPort(Protocol):
    """Accept formatted lines and release held resources on ``close``."""

    def write(self, line: str) -> Outcome[None]:
        """Deliver ``line``; failures are reported, never raised."""

    def close(self) -> None:
        """Release the sink; further writes are undefined."""


__all__ = ["LogSinkPort"]
