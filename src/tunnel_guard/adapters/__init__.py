from .input_source import FileInputSource, TextStreamInputSource
from .log_sinks import JsonlLogSink, NullLogSink, StreamLogSink
from .output_sink import FileOutputSink, StreamOutputSink

# Public adapter exports make wiring simpler.
__all__ = [
    "FileInputSource",
    "FileOutputSink",
    "JsonlLogSink",
    "NullLogSink",
    "StreamLogSink",
    "StreamOutputSink",
    "TextStreamInputSource",
]
