"""Domain values and predicates shared by the pipeline and the logger."""

from __future__ import annotations

from .filters import EvenFilter, GreaterThanFilter, NumberFilter, OddFilter
from .outcome import ErrorKind, Failure, Outcome
from .records import CallerLocation, LogRecord
from .sinks import SinkKind
from .values import INT_MAX, INT_MIN, parse_int, split_tokens

__all__ = [
    "CallerLocation",
    "ErrorKind",
    "EvenFilter",
    "Failure",
    "GreaterThanFilter",
    "INT_MAX",
    "INT_MIN",
    "LogRecord",
    "NumberFilter",
    "OddFilter",
    "Outcome",
    "SinkKind",
    "parse_int",
    "split_tokens",
]
