from tunnel_guard.observability.logging import LogSink

from .input_source import InputSource
from .output_sink import OutputSink

# Public port exports keep wiring explicit at composition time.
__all__ = ["InputSource", "LogSink", "OutputSink"]
