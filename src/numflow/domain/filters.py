"""Number filter predicates applied by the pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class NumberFilter(Protocol):
    """Decide whether a number continues down the pipeline."""

    def keep(self, number: int) -> bool: ...


@dataclass(slots=True, frozen=True)
class EvenFilter:
    """Keep multiples of two.

    >>> EvenFilter().keep(-4), EvenFilter().keep(3)
    (True, False)
    """

    def keep(self, number: int) -> bool:
        return number % 2 == 0


@dataclass(slots=True, frozen=True)
class OddFilter:
    """Keep everything that is not a multiple of two."""

    def keep(self, number: int) -> bool:
        return number % 2 != 0


@dataclass(slots=True, frozen=True)
class GreaterThanFilter:
    """Keep values strictly greater than ``threshold``.

    >>> GreaterThanFilter(5).keep(5), GreaterThanFilter(5).keep(6)
    (False, True)
    """

    threshold: int

    def keep(self, number: int) -> bool:
        return number > self.threshold


__all__ = ["EvenFilter", "GreaterThanFilter", "NumberFilter", "OddFilter"]
