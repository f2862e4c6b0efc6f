from __future__ import annotations

from typing import Protocol, runtime_checkable


# OutputSink port: receives the single rendered verdict of a scan.
@runtime_checkable
class OutputSink(Protocol):
    def write_line(self, line: str) -> None:
        """Write the formatted verdict (critical number or safe) as one line."""
        raise NotImplementedError("OutputSink is a port; use a concrete adapter.")

    def close(self) -> None:
        """Flush the verdict; file sinks also release the handle or commit the temp file."""
        raise NotImplementedError("OutputSink is a port; use a concrete adapter.")
