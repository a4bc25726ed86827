"""
Configuration for the board client, layouts and logging.
"""

from .defaults import BoardConfig, get_default_config
from .loader import ConfigLoader
from .validation import ConfigValidator, ValidationError

__all__ = ["BoardConfig", "ConfigLoader", "ConfigValidator", "ValidationError", "get_default_config"]
