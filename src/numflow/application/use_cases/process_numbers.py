"""Use case driving one pass of the number pipeline.

Purpose
-------
Read every number from a source, keep those accepted by the active filter, and
fan the kept numbers out to the registered observers in registration order.

Contents
--------
* :class:`RunSummary` - counters describing a completed run.
* :func:`create_process_numbers` - factory returning the run callable.

System Role
-----------
Application-layer orchestrator wired by :mod:`numflow.cli`; depends only on
the reader and observer ports so adapters stay replaceable in tests.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from numflow.application.ports import NumberObserverPort, NumberReaderPort
from numflow.domain.filters import NumberFilter
from numflow.domain.outcome import Outcome

logger = logging.getLogger(__name__)

Diagnostic = Callable[[str], None]
ProcessNumbers = Callable[[str], Outcome["RunSummary"]]


@dataclass(slots=True, frozen=True)
class RunSummary:
    """Counters for a finished run."""

    read: int
    kept: int
    skipped: int


def create_process_numbers(
    *,
    reader: NumberReaderPort,
    number_filter: NumberFilter,
    observers: Sequence[NumberObserverPort],
    diagnostic: Diagnostic | None = None,
) -> ProcessNumbers:
    """Freeze the pipeline wiring into a callable accepting a file name.

    Parameters
    ----------
    reader:
        Source of numbers; a failed read aborts the run before any observer
        is notified.
    number_filter:
        Predicate deciding which numbers reach the observers.
    observers:
        Notified in the given order for every kept number and once at the end.
    diagnostic:
        Receives per-token warnings and the fatal error line, if any.

    Examples
    --------
    >>> from numflow.application.ports import ReadReport
    >>> from numflow.domain.filters import OddFilter
    >>> class Reader:
    ...     def read(self, source):
    ...         return Outcome.success(ReadReport(numbers=(1, 2, 3)))
    >>> class Collect:
    ...     def __init__(self):
    ...         self.seen = []
    ...     def on_number(self, number):
    ...         self.seen.append(number)
    ...     def on_finished(self):
    ...         self.seen.append("done")
    >>> sink = Collect()
    >>> run = create_process_numbers(reader=Reader(), number_filter=OddFilter(), observers=[sink])
    >>> run("numbers.txt").unwrap()
    RunSummary(read=3, kept=2, skipped=0)
    >>> sink.seen
    [1, 3, 'done']
    """

    registered = tuple(observers)
    report_line = diagnostic if diagnostic is not None else _log_diagnostic

    def notify_number(number: int) -> None:
        for observer in registered:
            observer.on_number(number)

    def notify_finished() -> None:
        for observer in registered:
            observer.on_finished()

    def run(filename: str) -> Outcome[RunSummary]:
        outcome = reader.read(filename)
        if outcome.failure is not None:
            report_line(f"Error during processing: {outcome.failure.message}")
            logger.debug("run aborted for %s: %s", filename, outcome.failure.kind.value)
            return Outcome(failure=outcome.failure)

        report = outcome.unwrap()
        for warning in report.warnings:
            report_line(warning.message)

        kept = 0
        for number in report.numbers:
            if number_filter.keep(number):
                kept += 1
                notify_number(number)
        notify_finished()

        summary = RunSummary(read=len(report.numbers), kept=kept, skipped=len(report.warnings))
        logger.info("processed %s: read=%d kept=%d skipped=%d", filename, summary.read, summary.kept, summary.skipped)
        return Outcome.success(summary)

    return run


def _log_diagnostic(line: str) -> None:
    logger.warning("%s", line)


__all__ = ["Diagnostic", "ProcessNumbers", "RunSummary", "create_process_numbers"]
