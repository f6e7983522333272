"""Text-file reader turning whitespace-separated tokens into integers.

Malformed tokens are skipped and reported in the returned
:class:`~numflow.application.ports.ReadReport`; only an unreadable file fails
the whole read.
"""

from __future__ import annotations

import logging
from pathlib import Path

from numflow.application.ports.reader import NumberReaderPort, ReadReport
from numflow.domain.outcome import ErrorKind, Failure, Outcome
from numflow.domain.values import parse_int, split_tokens

logger = logging.getLogger(__name__)

_WARNING_TEMPLATES = {
    ErrorKind.INVALID_NUMBER: "Warning: Invalid number in file: {token}. Skipping.",
    ErrorKind.NUMBER_OUT_OF_RANGE: "Warning: Number out of range in file: {token}. Skipping.",
}


class FileNumberReader(NumberReaderPort):
    """Read integers line by line from a UTF-8 text file."""

    def __init__(self, *, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def read(self, source: str) -> Outcome[ReadReport]:
        path = Path(source)
        numbers: list[int] = []
        warnings: list[Failure] = []
        try:
            with path.open("r", encoding=self._encoding, errors="replace") as handle:
                for line in handle:
                    for token in split_tokens(line):
                        parsed = parse_int(token)
                        if parsed.failure is None:
                            numbers.append(parsed.unwrap())
                            continue
                        template = _WARNING_TEMPLATES[parsed.failure.kind]
                        warnings.append(Failure(parsed.failure.kind, template.format(token=token)))
        except OSError as exc:
            logger.debug("cannot open %s: %s", path, exc)
            return Outcome.fail(ErrorKind.FILE_UNAVAILABLE, f"Could not open file: {source}")

        return Outcome.success(ReadReport(numbers=tuple(numbers), warnings=tuple(warnings)))


__all__ = ["FileNumberReader"]
