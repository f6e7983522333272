"""Explicit success/failure values returned by fallible operations.

Purpose
-------
Give every fallible step (integer parsing, file reading, filter construction,
sink selection) a single return shape so callers branch on ``ok`` instead of
catching exceptions across layer boundaries.

Contents
--------
* :class:`ErrorKind` - enumerated failure categories.
* :class:`Failure` - failure kind plus a rendered message.
* :class:`Outcome` - generic result carrying either a value or a failure.

System Role
-----------
Shared by the domain, application, and adapter layers; the CLI is the only
place that turns a failed outcome into a process exit code.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(Enum):
    """Failure categories reported by the pipeline and the logging facility."""

    INVALID_NUMBER = "invalid_number"
    NUMBER_OUT_OF_RANGE = "number_out_of_range"
    UNKNOWN_FILTER_TYPE = "unknown_filter_type"
    INVALID_ARGUMENT = "invalid_argument"
    ARGUMENT_OUT_OF_RANGE = "argument_out_of_range"
    FILE_UNAVAILABLE = "file_unavailable"
    UNKNOWN_SINK_KIND = "unknown_sink_kind"
    SINK_UNAVAILABLE = "sink_unavailable"


@dataclass(slots=True, frozen=True)
class Failure:
    """Failure kind paired with the message shown to the user."""

    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(slots=True, frozen=True)
class Outcome(Generic[T]):
    """Result of a fallible operation.

    Examples
    --------
    >>> Outcome.success(3).ok
    True
    >>> failed = Outcome.fail(ErrorKind.INVALID_NUMBER, "bad token")
    >>> failed.ok, failed.failure.kind.value
    (False, 'invalid_number')
    """

    value: T | None = None
    failure: Failure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, value: T) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, kind: ErrorKind, message: str) -> "Outcome[T]":
        return cls(failure=Failure(kind=kind, message=message))

    def unwrap(self) -> T:
        """Return the value; calling this on a failure is a programming error."""

        if self.failure is not None:
            raise ValueError(f"unwrap() called on failed outcome: {self.failure.message}")
        return self.value  # type: ignore[return-value]


__all__ = ["ErrorKind", "Failure", "Outcome"]
