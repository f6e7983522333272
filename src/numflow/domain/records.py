"""Caller location and log record value objects.

Purpose
-------
Carry the ``file:function:line`` tag of a log call explicitly, so the logging
facility never has to inspect the interpreter stack on its own.

Contents
--------
* :class:`CallerLocation` - immutable source position.
* :class:`LogRecord` - location plus message with the canonical formatting.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True, frozen=True)
class CallerLocation:
    """Source position attached to a log call."""

    file_name: str
    function_name: str
    line: int

    @classmethod
    def here(cls, depth: int = 1) -> "CallerLocation":
        """Capture the position of the frame ``depth`` levels above this call.

        ``depth=1`` returns the location of the code that called :meth:`here`.

        Examples
        --------
        >>> def probe():
        ...     return CallerLocation.here()
        >>> probe().function_name
        'probe'
        """
        frame = inspect.currentframe()
        try:
            target = frame
            for _ in range(depth):
                if target is None or target.f_back is None:
                    break
                target = target.f_back
            if target is None:
                return cls(file_name="<unknown>", function_name="<unknown>", line=0)
            return cls(
                file_name=Path(target.f_code.co_filename).name,
                function_name=target.f_code.co_name,
                line=target.f_lineno,
            )
        finally:
            del frame

    def __str__(self) -> str:
        return f"{self.file_name}:{self.function_name}:{self.line}"


@dataclass(slots=True, frozen=True)
class LogRecord:
    """Ephemeral record handed to a sink after formatting."""

    location: CallerLocation
    message: str

    def format(self) -> str:
        """Return ``[file:function:line] message``.

        >>> LogRecord(CallerLocation("app.py", "main", 7), "ready").format()
        '[app.py:main:7] ready'
        """
        return f"[{self.location}] {self.message}"


__all__ = ["CallerLocation", "LogRecord"]
