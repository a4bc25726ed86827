"""
Error classification for board layout and delivery.

Layout errors are fatal to a single layout call and carry the offending
content. Transport errors come from the board client and propagate as-is.
"""

from .layout import (
    LayoutError,
    LineTooLongError,
    UnsplittableLineError,
    TooManyLinesError,
    GridOverflowError,
    GridShapeError,
    ContentError,
)
from .transport import (
    BoardTransportError,
    BoardRetryableError,
    BoardPermanentError,
    ConfigError,
)

__all__ = [
    # Layout Errors
    "LayoutError",
    "LineTooLongError",
    "UnsplittableLineError",
    "TooManyLinesError",
    "GridOverflowError",
    "GridShapeError",
    "ContentError",
    # Transport and Setup Errors
    "BoardTransportError",
    "BoardRetryableError",
    "BoardPermanentError",
    "ConfigError",
]
