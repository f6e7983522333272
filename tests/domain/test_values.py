from __future__ import annotations

import pytest

from numflow.domain.outcome import ErrorKind
from numflow.domain.values import INT_MAX, INT_MIN, parse_int, split_tokens


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0", 0),
        ("42", 42),
        ("-2", -2),
        ("+7", 7),
        ("007", 7),
        (str(INT_MAX), INT_MAX),
        (str(INT_MIN), INT_MIN),
    ],
)
def test_parse_int_accepts_signed_decimals(text: str, expected: int) -> None:
    outcome = parse_int(text)
    assert outcome.ok
    assert outcome.value == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("4x", 4),
        ("1.5", 1),
        ("-7abc", -7),
        ("0x10", 0),
        ("12e3", 12),
    ],
)
def test_parse_int_reads_leading_integer_prefix(text: str, expected: int) -> None:
    assert parse_int(text).value == expected


@pytest.mark.parametrize("text", ["x", "", "x4", "--3", "+", "-", ".5", "٣"])
def test_parse_int_rejects_text_without_leading_digits(text: str) -> None:
    outcome = parse_int(text)
    assert not outcome.ok
    assert outcome.failure is not None
    assert outcome.failure.kind is ErrorKind.INVALID_NUMBER


@pytest.mark.parametrize("text", [str(INT_MAX + 1), str(INT_MIN - 1), "99999999999999999999", "3000000000x"])
def test_parse_int_reports_out_of_range_separately(text: str) -> None:
    outcome = parse_int(text)
    assert outcome.failure is not None
    assert outcome.failure.kind is ErrorKind.NUMBER_OUT_OF_RANGE


def test_split_tokens_handles_mixed_whitespace() -> None:
    assert split_tokens("  2\t3   x\n") == ["2", "3", "x"]
    assert split_tokens("   ") == []
