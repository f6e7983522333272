"""Observer port notified of each kept number and of stream completion."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class NumberObserverPort(Protocol):
    """Receive ``on_number`` for every kept value, then one ``on_finished``."""

    def on_number(self, number: int) -> None: ...

    def on_finished(self) -> None: ...


__all__ = ["NumberObserverPort"]
