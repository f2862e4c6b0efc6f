from __future__ import annotations

from decimal import Decimal

import pytest

from tunnel_guard.domain.steps import SkipReason, StepParseError, parse_step


def test_parse_step_accepts_unsigned_integers() -> None:
    for raw, expected in (("42", 42), ("  7 ", 7), ("+3", 3), ("0", 0)):
        assert parse_step(raw) == expected


def test_parse_step_keeps_wide_integers_exact() -> None:
    # Python ints give headroom far beyond 64-bit sums.
    assert parse_step("340282366920938463463374607431768211455") == 2**128 - 1


@pytest.mark.parametrize(
    ("raw", "reason"),
    [
        ("", SkipReason.BLANK_LINE),
        ("   ", SkipReason.BLANK_LINE),
        ("-5", SkipReason.NEGATIVE_VALUE),
        ("abc", SkipReason.NOT_A_NUMBER),
        ("1.5", SkipReason.NOT_A_NUMBER),
        ("1 2", SkipReason.NOT_A_NUMBER),
        ("1e3", SkipReason.NOT_A_NUMBER),
    ],
)
def test_parse_step_rejects_invalid_integer_lines(raw: str, reason: SkipReason) -> None:
    with pytest.raises(StepParseError) as exc:
        parse_step(raw)
    assert exc.value.reason == reason


def test_parse_step_decimal_kind() -> None:
    assert parse_step("1.25", kind="decimal") == Decimal("1.25")
    assert parse_step("3", kind="decimal") == Decimal("3")
    assert parse_step(".5", kind="decimal") == Decimal("0.5")


@pytest.mark.parametrize("raw", ["NaN", "Infinity", "1.2.3", "1,5"])
def test_parse_step_decimal_rejects_non_finite_and_garbage(raw: str) -> None:
    with pytest.raises(StepParseError) as exc:
        parse_step(raw, kind="decimal")
    assert exc.value.reason == SkipReason.NOT_A_NUMBER


def test_step_parse_error_is_value_error() -> None:
    assert isinstance(StepParseError(SkipReason.BLANK_LINE), ValueError)


@pytest.mark.parametrize("kind", ["int", "decimal"])
def test_parse_step_rejects_non_ascii_digits(kind: str) -> None:
    # Arabic-Indic and full-width digits are not steps.
    for raw in ("١٢", "１２"):
        with pytest.raises(StepParseError) as exc:
            parse_step(raw, kind=kind)  # type: ignore[arg-type]
        assert exc.value.reason == SkipReason.NOT_A_NUMBER
