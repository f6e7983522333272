"""Observer echoing every kept number to the console."""

from __future__ import annotations

from rich.console import Console

from numflow.application.ports.observer import NumberObserverPort


class PrintObserver(NumberObserverPort):
    """Print each kept number as it arrives, then a completion notice.

    Examples
    --------
    >>> from io import StringIO
    >>> console = Console(file=StringIO(), width=120)
    >>> observer = PrintObserver(console=console)
    >>> observer.on_number(7)
    >>> observer.on_finished()
    >>> console.file.getvalue().splitlines()
    ['Read and filtered number: 7', 'Number processing finished.']
    """

    def __init__(self, *, console: Console | None = None) -> None:
        self._console = console if console is not None else Console(highlight=False)

    def on_number(self, number: int) -> None:
        self._console.print(f"Read and filtered number: {number}", markup=False, highlight=False, soft_wrap=True)

    def on_finished(self) -> None:
        self._console.print("Number processing finished.", markup=False, highlight=False, soft_wrap=True)


__all__ = ["PrintObserver"]
