"""Utilities for finding the step at which a tunnel may collapse."""

from .domain.errors import WindowInvariantError
from .domain.messages import IndexedStep
from .services.ordered_window import OrderedWindow
from .usecases.scanner import get_critical_number, scan

__all__ = ["IndexedStep", "OrderedWindow", "WindowInvariantError", "get_critical_number", "scan"]
