"""Reader port describing how numbers enter the pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from numflow.domain.outcome import Failure, Outcome


@dataclass(slots=True, frozen=True)
class ReadReport:
    """Numbers read from a source together with the tokens that were skipped."""

    numbers: tuple[int, ...] = ()
    warnings: tuple[Failure, ...] = field(default_factory=tuple)


@runtime_checkable
class NumberReaderPort(Protocol):
    """Produce the ordered integers contained in ``source``."""

    def read(self, source: str) -> Outcome[ReadReport]: ...


__all__ = ["NumberReaderPort", "ReadReport"]
