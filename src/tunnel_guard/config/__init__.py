from .loader import ConfigError, load_config

# Config exports are intentionally small.
__all__ = ["ConfigError", "load_config"]
