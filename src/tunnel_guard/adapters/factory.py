from __future__ import annotations

import sys
from pathlib import Path

from tunnel_guard.adapters.input_source import FileInputSource, TextStreamInputSource
from tunnel_guard.adapters.log_sinks import JsonlLogSink, NullLogSink, StreamLogSink
from tunnel_guard.adapters.output_sink import FileOutputSink, StreamOutputSink
from tunnel_guard.observability.logging import LogSink
from tunnel_guard.ports.input_source import InputSource
from tunnel_guard.ports.output_sink import OutputSink
from tunnel_guard.usecases.config_models import InputConfig, LoggingConfig, OutputConfig

# "-" selects the process standard stream instead of a file.
STDIO_PATH = "-"


def input_source(path: str, config: InputConfig) -> InputSource:
    if path == STDIO_PATH:
        return TextStreamInputSource(sys.stdin)
    return FileInputSource(Path(path), encoding=config.encoding)


def output_sink(config: OutputConfig) -> OutputSink:
    if config.file_path is None or config.file_path == STDIO_PATH:
        return StreamOutputSink(sys.stdout)
    return FileOutputSink(Path(config.file_path), atomic_replace=config.atomic_replace)


def log_sink(config: LoggingConfig) -> LogSink:
    if config.sink == "stdout":
        return StreamLogSink(sys.stdout)
    if config.sink == "stderr":
        return StreamLogSink(sys.stderr)
    if config.sink == "jsonl":
        assert config.path is not None
        return JsonlLogSink(Path(config.path))
    return NullLogSink()
