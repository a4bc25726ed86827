"""
Logging configuration and utilities for the board layout engine.
"""
from .config import configure_logging, get_layout_logger, get_logger, log_board_write

__all__ = ["configure_logging", "get_logger", "get_layout_logger", "log_board_write"]
