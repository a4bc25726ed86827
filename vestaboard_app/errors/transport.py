"""
Board transport and setup error classifications.

Transport errors are raised by board clients. They are opaque to the layout
code and propagate to whoever issued the write.
"""

from typing import Any, Dict, Optional


class BoardTransportError(Exception):
    """Base class for failures talking to the board."""

    def __init__(self, message: str, status_code: Optional[int] = None,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.status_code = status_code
        self.context = context or {}


class BoardRetryableError(BoardTransportError):
    """Server or network failure that may succeed if repeated."""

    retryable = True


class BoardPermanentError(BoardTransportError):
    """Request rejected by the board API; repeating it will not help."""

    retryable = False


class ConfigError(Exception):
    """Loaded configuration failed validation."""

    def __init__(self, message: str, errors: Optional[list] = None):
        super().__init__(message)
        self.errors = errors or []
