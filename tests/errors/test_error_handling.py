"""
Error handling tests for the board layout engine.

Covers the error hierarchy, message content and the non-fatal handling of
unmapped symbols.
"""

import pytest

from vestaboard_app.board.grid import Grid
from vestaboard_app.board.symbols import DEFAULT_CODEC
from vestaboard_app.errors import (
    BoardPermanentError,
    BoardRetryableError,
    BoardTransportError,
    ContentError,
    GridOverflowError,
    GridShapeError,
    LayoutError,
    LineTooLongError,
    TooManyLinesError,
    UnsplittableLineError,
)


class TestErrorClassification:
    """Test error classification system."""

    def test_layout_error_hierarchy(self):
        """Test that layout errors share a recoverable base."""
        base_error = LayoutError("base error")
        assert base_error.recoverable is True
        assert base_error.context == {}
        assert str(base_error) == "base error"

        for error in (
            LineTooLongError(content="x"),
            UnsplittableLineError(content="x"),
            TooManyLinesError(content=["a"]),
            GridOverflowError("too wide"),
            GridShapeError("ragged"),
            ContentError("bad record"),
        ):
            assert isinstance(error, LayoutError)

    def test_messages_echo_content(self):
        """Test the offending content is part of the message."""
        error = LineTooLongError(content="a very long line", max_length=40)
        assert str(error) == "line too long: 'a very long line'"
        assert error.max_length == 40
        assert error.content == "a very long line"

    def test_content_error_is_value_error(self):
        error = ContentError("bad", raw_data={"x": 1}, missing_fields=["title"])
        assert isinstance(error, ValueError)
        assert error.missing_fields == ["title"]

    def test_transport_error_hierarchy(self):
        """Test retryable and permanent transport errors."""
        retryable = BoardRetryableError("down", status_code=503)
        permanent = BoardPermanentError("denied", status_code=403)

        assert isinstance(retryable, BoardTransportError)
        assert isinstance(permanent, BoardTransportError)
        assert retryable.retryable and not permanent.retryable
        assert not isinstance(retryable, LayoutError)


class TestGracefulDegradation:
    """Test that unsupported characters never block a write."""

    def test_unmapped_characters_encode_blank(self):
        grid = Grid.compose(["CAFÉ ~ ok"])
        codes = grid.to_codes()
        assert codes[0][3] == DEFAULT_CODEC.empty_code
        assert codes[0][5] == DEFAULT_CODEC.empty_code
        assert codes[0][7:9] == [15, 11]

    def test_overflow_is_not_truncated(self):
        with pytest.raises(GridOverflowError):
            Grid.compose(["x" * 23])
