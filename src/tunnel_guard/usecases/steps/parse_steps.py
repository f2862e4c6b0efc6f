from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from decimal import Decimal

from tunnel_guard.domain.messages import ParsedStep, RawLine
from tunnel_guard.domain.steps import StepKind, StepParseError, parse_step
from tunnel_guard.observability.logging import ScanLogger


@dataclass(frozen=True, slots=True)
class ParseSteps:
    # Unparsable lines are dropped; the scanner only ever sees valid steps.
    kind: StepKind = "int"
    log: ScanLogger | None = None

    def __call__(self, lines: Iterable[RawLine]) -> Iterator[ParsedStep[int | Decimal]]:
        for line in lines:
            try:
                value = parse_step(line.raw_text, kind=self.kind)
            except StepParseError as exc:
                if self.log is not None:
                    self.log.debug("parse.skipped", line_no=line.line_no, reason=exc.reason.value)
                continue
            yield ParsedStep(line_no=line.line_no, value=value)
