from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from tunnel_guard.observability.logging import LogMessage, LogSink


class NullLogSink(LogSink):
    # Default sink when logging is disabled.
    def emit(self, message: LogMessage) -> None:
        _ = message

    def close(self) -> None:
        return None


@dataclass
class StreamLogSink(LogSink):
    # One compact JSON object per record on a text stream.
    stream: TextIO = field(default_factory=lambda: sys.stderr)

    def emit(self, message: LogMessage) -> None:
        self.stream.write(_log_to_json(message) + "\n")

    def close(self) -> None:
        self.stream.flush()


class JsonlLogSink(LogSink):
    # File-backed structured log sink; appends so repeated runs accumulate.
    def __init__(self, path: Path) -> None:
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self._path.open("a", encoding="utf-8")

    def emit(self, message: LogMessage) -> None:
        self._file.write(_log_to_json(message) + "\n")
        self._file.flush()

    def close(self) -> None:
        self._file.close()


def _log_to_json(message: LogMessage) -> str:
    payload = {
        "level": message.level,
        "message": message.message,
        "timestamp": message.timestamp.isoformat().replace("+00:00", "Z"),
        "fields": message.fields,
    }
    # default=str covers Decimal step values in fields.
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False, default=str)
