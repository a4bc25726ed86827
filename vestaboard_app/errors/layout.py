"""
Layout error classifications.

These exceptions are raised when content cannot fit the 6x22 board under the
layout rules. They are fatal to the layout call, never to the process.
"""

from typing import Any, Dict, Optional


class LayoutError(Exception):
    """Base class for content that cannot be laid out on the board."""

    def __init__(self, message: str, content: Optional[Any] = None,
                 context: Optional[Dict[str, Any]] = None):
        if content is not None:
            message = f"{message}: {content!r}"
        super().__init__(message)
        self.content = content
        self.context = context or {}
        self.recoverable = True


class LineTooLongError(LayoutError):
    """A single line cannot fit in two physical rows."""

    def __init__(self, message: str = "line too long", content: Optional[str] = None,
                 max_length: Optional[int] = None, **kwargs):
        super().__init__(message, content, **kwargs)
        self.max_length = max_length


class UnsplittableLineError(LayoutError):
    """An overlong line has no usable break point."""

    def __init__(self, message: str = "cannot split line", content: Optional[str] = None, **kwargs):
        super().__init__(message, content, **kwargs)


class TooManyLinesError(LayoutError):
    """Content needs more rows than the board has."""

    def __init__(self, message: str = "too many lines", content: Optional[list] = None,
                 line_count: Optional[int] = None, **kwargs):
        super().__init__(message, content, **kwargs)
        self.line_count = line_count


class GridOverflowError(LayoutError):
    """Content handed to the compositor exceeds the grid bounds."""

    def __init__(self, message: str, row: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.row = row


class GridShapeError(LayoutError):
    """A cell or code matrix is not exactly ROWS x COLS."""


class ContentError(LayoutError, ValueError):
    """Content record is missing fields or has values of the wrong type."""

    def __init__(self, message: str, raw_data: Optional[Any] = None,
                 missing_fields: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_data = raw_data
        self.missing_fields = missing_fields or []
