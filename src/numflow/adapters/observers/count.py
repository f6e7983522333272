"""Observer tallying kept numbers and reporting the total at the end."""

from __future__ import annotations

from rich.console import Console

from numflow.application.ports.observer import NumberObserverPort


class CountObserver(NumberObserverPort):
    """Count kept numbers; the total is printed by ``on_finished``."""

    def __init__(self, *, console: Console | None = None) -> None:
        self._console = console if console is not None else Console(highlight=False)
        self._count = 0

    @property
    def count(self) -> int:
        return self._count

    def on_number(self, number: int) -> None:
        self._count += 1

    def on_finished(self) -> None:
        self._console.print(f"Total number of filtered numbers: {self._count}", markup=False, highlight=False, soft_wrap=True)


__all__ = ["CountObserver"]
