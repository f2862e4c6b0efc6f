from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Literal, Protocol, runtime_checkable

LogLevel = Literal["debug", "info", "warning", "error"]

_LEVEL_ORDER: dict[str, int] = {"debug": 10, "info": 20, "warning": 30, "error": 40}


@dataclass(frozen=True, slots=True)
class LogMessage:
    # Structured log payload; sinks decide how to serialize it.
    level: str
    message: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(tz=UTC))
    fields: dict[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.level or not self.message:
            raise ValueError("LogMessage requires non-empty level/message")


@runtime_checkable
class LogSink(Protocol):
    def emit(self, message: LogMessage) -> None:
        """Persist or print a single structured log record."""
        raise NotImplementedError("LogSink is a port; use a concrete adapter.")


@dataclass(slots=True)
class ScanLogger:
    # Level-filtering front for a LogSink; records below min_level are dropped.
    sink: LogSink
    min_level: LogLevel = "info"

    def enabled_for(self, level: LogLevel) -> bool:
        return _LEVEL_ORDER[level] >= _LEVEL_ORDER[self.min_level]

    def log(self, level: LogLevel, message: str, **fields: object) -> None:
        if not self.enabled_for(level):
            return
        self.sink.emit(LogMessage(level=level, message=message, fields=dict(fields)))

    def debug(self, message: str, **fields: object) -> None:
        self.log("debug", message, **fields)

    def info(self, message: str, **fields: object) -> None:
        self.log("info", message, **fields)

    def warning(self, message: str, **fields: object) -> None:
        self.log("warning", message, **fields)

    def error(self, message: str, **fields: object) -> None:
        self.log("error", message, **fields)
