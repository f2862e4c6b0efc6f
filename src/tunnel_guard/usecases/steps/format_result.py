from __future__ import annotations

import json
from collections import OrderedDict
from dataclasses import dataclass
from decimal import Decimal
from typing import Literal

from tunnel_guard.domain.messages import ScanReport


@dataclass(frozen=True, slots=True)
class FormatResult:
    # Renders a ScanReport as one line of text or compact JSON.
    fmt: Literal["text", "json"] = "text"
    # Presentation offset only; ScanReport indices are 0-based.
    index_base: int = 0

    def __call__(self, report: ScanReport) -> str:
        if self.fmt == "json":
            return self._json(report)
        return self._text(report)

    def _text(self, report: ScanReport) -> str:
        if report.result is None:
            return f"tunnel is safe (checked {report.steps_seen} steps)"
        text = f"critical number {report.result.step} at index {report.result.index + self.index_base}"
        if report.line_no is not None:
            text += f" (line {report.line_no})"
        return text

    def _json(self, report: ScanReport) -> str:
        # Key order is fixed so output is byte-for-byte deterministic.
        if report.result is None:
            payload = OrderedDict([("safe", True), ("steps", report.steps_seen)])
        else:
            payload = OrderedDict(
                [
                    ("safe", False),
                    ("step", _json_number(report.result.step)),
                    ("index", report.result.index + self.index_base),
                    ("line_no", report.line_no),
                ]
            )
        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def _json_number(value: object) -> object:
    # Decimal keeps its exact text; JSON floats would round it.
    if isinstance(value, Decimal):
        return str(value)
    return value
