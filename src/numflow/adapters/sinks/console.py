"""Console sink writing formatted lines to standard output."""

from __future__ import annotations

from rich.console import Console

from numflow.application.ports.sink import LogSinkPort
from numflow.domain.outcome import Outcome


class ConsoleSink(LogSinkPort):
    """Write each line verbatim to the console's stream.

    Lines skip Rich rendering, so markup-like prefixes, tabs and control
    characters reach the stream exactly as the file sink would store them.

    Examples
    --------
    >>> from io import StringIO
    >>> console = Console(file=StringIO(), width=40)
    >>> ConsoleSink(console=console).write("[a.py:f:1] hi\\tthere").ok
    True
    >>> console.file.getvalue()
    '[a.py:f:1] hi\\tthere\\n'
    """

    def __init__(self, *, console: Console | None = None) -> None:
        self._console = console if console is not None else Console(highlight=False, emoji=False)

    def write(self, line: str) -> Outcome[None]:
        stream = self._console.file
        stream.write(f"{line}\n")
        stream.flush()
        return Outcome.success(None)

    def close(self) -> None:
        return None


__all__ = ["ConsoleSink"]
