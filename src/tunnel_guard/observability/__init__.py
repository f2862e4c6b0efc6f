from .logging import LogLevel, LogMessage, LogSink, ScanLogger

__all__ = ["LogLevel", "LogMessage", "LogSink", "ScanLogger"]
