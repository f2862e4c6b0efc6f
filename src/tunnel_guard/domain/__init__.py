from .errors import WindowInvariantError
from .messages import IndexedStep, ParsedStep, RawLine, ScanReport
from .steps import SkipReason, StepKind, StepParseError, SupportsStep, parse_step

# Public domain exports keep imports explicit across layers.
__all__ = [
    "IndexedStep",
    "ParsedStep",
    "RawLine",
    "ScanReport",
    "SkipReason",
    "StepKind",
    "StepParseError",
    "SupportsStep",
    "WindowInvariantError",
    "parse_step",
]
