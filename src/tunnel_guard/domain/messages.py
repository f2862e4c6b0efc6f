from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class RawLine:
    # RawLine keeps the physical 1-based line number of the input source.
    line_no: int
    raw_text: str


@dataclass(frozen=True, slots=True)
class ParsedStep(Generic[T]):
    # ParsedStep pairs a parsed value with the line it came from.
    line_no: int
    value: T


@dataclass(frozen=True, slots=True)
class IndexedStep(Generic[T]):
    """Step at which the tunnel collapses.

    `index` is the 0-based position in the filtered sequence, counting the
    seed values, so the first value of the input has index 0.
    """

    step: T
    index: int

    def __iter__(self) -> Iterator[object]:
        # Allows `value, index = result` at call sites that want a plain pair.
        yield self.step
        yield self.index


@dataclass(frozen=True, slots=True)
class ScanReport(Generic[T]):
    # ScanReport is what the presenter consumes; result is None for a safe tunnel.
    result: IndexedStep[T] | None
    steps_seen: int
    line_no: int | None = None

    @property
    def safe(self) -> bool:
        return self.result is None
