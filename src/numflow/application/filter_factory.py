"""Name-to-constructor registry producing number filters.

Purpose
-------
Translate the filter names accepted on the command line (``EVEN``, ``ODD``,
``GT<n>``) into predicate instances while staying open for additional kinds.

Contents
--------
* :data:`FilterCreator` - callable signature registered per filter name.
* :class:`FilterFactory` - registry with the three built-in filters.
* :func:`parse_filter_spec` - split ``GT5`` style specs into name/argument.
"""

from __future__ import annotations

import logging
from typing import Callable

from numflow.domain.filters import EvenFilter, GreaterThanFilter, NumberFilter, OddFilter
from numflow.domain.outcome import ErrorKind, Outcome
from numflow.domain.values import parse_int

logger = logging.getLogger(__name__)

FilterCreator = Callable[[str], Outcome[NumberFilter]]

GREATER_THAN = "GT"


def _create_even(_: str) -> Outcome[NumberFilter]:
    return Outcome.success(EvenFilter())


def _create_odd(_: str) -> Outcome[NumberFilter]:
    return Outcome.success(OddFilter())


def _create_greater_than(argument: str) -> Outcome[NumberFilter]:
    parsed = parse_int(argument)
    if parsed.failure is None:
        return Outcome.success(GreaterThanFilter(parsed.unwrap()))
    if parsed.failure.kind is ErrorKind.NUMBER_OUT_OF_RANGE:
        return Outcome.fail(ErrorKind.ARGUMENT_OUT_OF_RANGE, f"Argument out of range for GT filter: {argument}")
    return Outcome.fail(ErrorKind.INVALID_ARGUMENT, f"Invalid argument for GT filter: {argument}")


class FilterFactory:
    """Build filters by name; new kinds register without touching old ones.

    Examples
    --------
    >>> factory = FilterFactory()
    >>> factory.create("GT", "3").unwrap().keep(4)
    True
    >>> factory.create("PRIME").failure.message
    'Unknown filter type: PRIME'
    """

    def __init__(self) -> None:
        self._creators: dict[str, FilterCreator] = {}
        self.register("EVEN", _create_even)
        self.register("ODD", _create_odd)
        self.register(GREATER_THAN, _create_greater_than)

    def register(self, name: str, creator: FilterCreator) -> None:
        """Associate ``name`` with ``creator``; re-registering replaces it."""

        self._creators[name] = creator

    def names(self) -> tuple[str, ...]:
        """Return registered filter names in registration order."""

        return tuple(self._creators)

    def create(self, filter_type: str, filter_arg: str = "") -> Outcome[NumberFilter]:
        creator = self._creators.get(filter_type)
        if creator is None:
            return Outcome.fail(ErrorKind.UNKNOWN_FILTER_TYPE, f"Unknown filter type: {filter_type}")
        outcome = creator(filter_arg)
        if outcome.ok:
            logger.debug("created filter %s(%r)", filter_type, filter_arg)
        return outcome


def parse_filter_spec(spec: str) -> tuple[str, str]:
    """Split a command-line filter spec into ``(type, argument)``.

    >>> parse_filter_spec("GT5")
    ('GT', '5')
    >>> parse_filter_spec("EVEN")
    ('EVEN', '')
    """

    if spec.startswith(GREATER_THAN):
        return GREATER_THAN, spec[len(GREATER_THAN) :]
    return spec, ""


__all__ = ["FilterCreator", "FilterFactory", "parse_filter_spec"]
