"""Scripted sink-switching walkthrough used by the ``logdemo`` command."""

from __future__ import annotations

from numflow.domain.records import CallerLocation
from numflow.domain.sinks import SinkKind

from ._facility import LogFacility


def logdemo(facility: LogFacility, requested: SinkKind) -> list[SinkKind]:
    """Exercise every sink once and return the kinds visited, in order.

    The sequence starts on ``requested``, logs two messages, then walks
    through file, discard, and back to console with one message each.
    """

    visited: list[SinkKind] = []

    def switch(kind: SinkKind) -> None:
        outcome = facility.set_sink(kind)
        if outcome.ok:
            visited.append(outcome.unwrap())

    switch(requested)
    facility.log("First test message.", CallerLocation.here())
    facility.log("Second test message.", CallerLocation.here())
    switch(SinkKind.FILE)
    facility.log("Message to file.", CallerLocation.here())
    switch(SinkKind.NONE)
    facility.log("This message should go nowhere.", CallerLocation.here())
    switch(SinkKind.CONSOLE)
    facility.log("Back to console output.", CallerLocation.here())
    return visited


__all__ = ["logdemo"]
