from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Literal, Protocol, TypeVar

StepKind = Literal["int", "decimal"]


class SupportsStep(Protocol):
    # Numeric contract for tunnel steps: total order, closed addition, scaling by int.
    def __lt__(self, other: SupportsStep, /) -> bool: ...

    def __le__(self, other: SupportsStep, /) -> bool: ...

    def __add__(self, other: SupportsStep, /) -> SupportsStep: ...

    def __mul__(self, other: int, /) -> SupportsStep: ...


S = TypeVar("S", bound=SupportsStep)


class SkipReason(str, Enum):
    BLANK_LINE = "BLANK_LINE"
    NOT_A_NUMBER = "NOT_A_NUMBER"
    NEGATIVE_VALUE = "NEGATIVE_VALUE"


class StepParseError(ValueError):
    def __init__(self, reason: SkipReason) -> None:
        super().__init__(reason.value)
        self.reason = reason


# ASCII digits with an optional leading "+", as unsigned parsing allows; no separators or exponents.
_INT_PATTERN = re.compile(r"^\+?\d+$", re.ASCII)
_DECIMAL_PATTERN = re.compile(r"^\+?(?:\d+(?:\.\d*)?|\.\d+)$", re.ASCII)


def parse_step(raw: str, *, kind: StepKind = "int") -> int | Decimal:
    """Parse one input line into a step value.

    Steps are non-negative: the pair search prunes on the assumption that a
    sum never shrinks when an addend grows.
    """
    text = raw.strip()
    if not text:
        raise StepParseError(SkipReason.BLANK_LINE)
    if text.startswith("-"):
        raise StepParseError(SkipReason.NEGATIVE_VALUE)

    if kind == "int":
        if not _INT_PATTERN.match(text):
            raise StepParseError(SkipReason.NOT_A_NUMBER)
        return int(text)

    if not _DECIMAL_PATTERN.match(text):
        raise StepParseError(SkipReason.NOT_A_NUMBER)
    try:
        return Decimal(text)
    except InvalidOperation as exc:
        raise StepParseError(SkipReason.NOT_A_NUMBER) from exc
