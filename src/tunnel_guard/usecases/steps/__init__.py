from .format_result import FormatResult
from .parse_steps import ParseSteps

__all__ = ["FormatResult", "ParseSteps"]
