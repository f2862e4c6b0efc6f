from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from tunnel_guard.domain.errors import WindowInvariantError
from tunnel_guard.domain.messages import ParsedStep, ScanReport
from tunnel_guard.ports.input_source import InputSource
from tunnel_guard.ports.output_sink import OutputSink
from tunnel_guard.observability.logging import ScanLogger
from tunnel_guard.usecases.scanner import get_critical_number
from tunnel_guard.usecases.steps.format_result import FormatResult
from tunnel_guard.usecases.steps.parse_steps import ParseSteps


@dataclass
class _LineTracker:
    # Remembers the line of the last step handed to the scanner.
    # The scanner stops right after pulling a violating step, so that line is the violation's line.
    parsed: Iterable[ParsedStep]
    last_line_no: int | None = field(default=None, init=False)
    count: int = field(default=0, init=False)

    def __iter__(self) -> Iterator[object]:
        for item in self.parsed:
            self.last_line_no = item.line_no
            self.count += 1
            yield item.value


@dataclass(frozen=True, slots=True)
class ValidateTunnel:
    """Read, parse, scan, format and write one tunnel validation.

    The input is streamed: only the scanner window is held in memory.
    """

    window_length: int
    parser: ParseSteps
    formatter: FormatResult
    log: ScanLogger

    def scan(self, source: InputSource) -> ScanReport:
        self.log.info("scan.started", window_length=self.window_length)
        tracker = _LineTracker(self.parser(source.read()))
        try:
            result = get_critical_number(tracker, self.window_length)
        except WindowInvariantError as exc:
            self.log.error("scan.internal_error", error=str(exc), steps_seen=tracker.count)
            raise

        if result is None:
            self.log.info("scan.safe", steps_seen=tracker.count)
            return ScanReport(result=None, steps_seen=tracker.count)

        self.log.info(
            "scan.violation",
            step=result.step,
            index=result.index,
            line_no=tracker.last_line_no,
        )
        return ScanReport(result=result, steps_seen=tracker.count, line_no=tracker.last_line_no)

    def __call__(self, source: InputSource, sink: OutputSink) -> ScanReport:
        report = self.scan(source)
        try:
            sink.write_line(self.formatter(report))
        finally:
            sink.close()
        return report
