from .scanner import get_critical_number, scan
from .validate_tunnel import ValidateTunnel

__all__ = ["ValidateTunnel", "get_critical_number", "scan"]
