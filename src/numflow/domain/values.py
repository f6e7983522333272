"""Integer parsing bounded to the signed 32-bit range."""

from __future__ import annotations

import re

from .outcome import ErrorKind, Outcome

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_INTEGER_PREFIX = re.compile(r"[+-]?[0-9]+")


def parse_int(text: str) -> Outcome[int]:
    """Parse the leading decimal integer of ``text``.

    Leading whitespace is skipped, then an optional sign followed by ASCII
    digits is read; anything after the digits is ignored. Text that does not
    start with such a prefix fails with :attr:`ErrorKind.INVALID_NUMBER`.
    Prefixes outside ``[INT_MIN, INT_MAX]`` fail with
    :attr:`ErrorKind.NUMBER_OUT_OF_RANGE`.

    Examples
    --------
    >>> parse_int("-42").value
    -42
    >>> parse_int("4x").value
    4
    >>> parse_int("x4").failure.kind.name
    'INVALID_NUMBER'
    >>> parse_int("99999999999").failure.kind.name
    'NUMBER_OUT_OF_RANGE'
    """

    match = _INTEGER_PREFIX.match(text.lstrip())
    if match is None:
        return Outcome.fail(ErrorKind.INVALID_NUMBER, f"not an integer: {text!r}")
    value = int(match.group())
    if value < INT_MIN or value > INT_MAX:
        return Outcome.fail(ErrorKind.NUMBER_OUT_OF_RANGE, f"integer out of range: {text!r}")
    return Outcome.success(value)


def split_tokens(line: str) -> list[str]:
    """Split ``line`` on any run of whitespace."""

    return line.split()


__all__ = ["INT_MAX", "INT_MIN", "parse_int", "split_tokens"]
