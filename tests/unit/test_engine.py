"""Unit tests for the board engine."""

import io
import random
from unittest.mock import Mock

import pytest

from vestaboard_app.board.grid import Grid
from vestaboard_app.delivery.base import BaseBoardClient, WriteResult, WriteStatus
from vestaboard_app.delivery.stdout_delivery import ConsoleBoardClient
from vestaboard_app.engine import BoardEngine
from vestaboard_app.errors import BoardRetryableError, TooManyLinesError

from conftest import assert_board_shape


@pytest.fixture
def console() -> ConsoleBoardClient:
    return ConsoleBoardClient(stream=io.StringIO())


class TestBoardEngine:
    """Test content -> layout -> client wiring"""

    def test_show_haiku_writes_once(self, console):
        engine = BoardEngine(console, rng=random.Random(1))
        result = engine.show_haiku("Old pond\nA frog leaps in\nWater's sound")

        assert result.ok
        assert console.get_stats()["write_count"] == 1
        assert "Old pond" in console.stream.getvalue()

    def test_show_weather(self, console, week_forecast, today):
        BoardEngine(console).show_weather(week_forecast, today)
        assert console.read().rows()[0].startswith("MON")

    def test_show_ticker(self, console, quotes):
        BoardEngine(console, rng=random.Random(2)).show_ticker(quotes)
        assert_board_shape(console.read())

    def test_show_tasks(self, console, tasks):
        BoardEngine(console, rng=random.Random(2)).show_tasks(tasks)
        assert "Call plumber" not in "".join(console.read().rows())

    def test_layout_error_skips_write(self, console):
        engine = BoardEngine(console)
        with pytest.raises(TooManyLinesError):
            engine.show_haiku("\n".join("abcdefg"))
        assert console.get_stats()["write_count"] == 0

    def test_transport_error_propagates(self):
        client = Mock(spec=BaseBoardClient)
        client.name = "mock"
        client.write.side_effect = BoardRetryableError("down")

        with pytest.raises(BoardRetryableError):
            BoardEngine(client).show_haiku("Old pond")

    def test_current_reads_client(self):
        client = Mock(spec=BaseBoardClient)
        client.name = "mock"
        client.read.return_value = Grid.compose(["HELLO"])
        client.write.return_value = WriteResult(status=WriteStatus.SUCCESS)

        assert BoardEngine(client).current().rows()[0].startswith("HELLO")


class TestConsoleBoardClient:
    """Test the dry-run client"""

    def test_read_before_write_is_blank(self, console):
        assert console.read() == Grid.compose([])

    def test_write_prints_preview(self, console):
        grid = Grid.compose(["HI"])
        console.write(grid)
        assert grid.to_preview() in console.stream.getvalue()
        assert console.read() == grid
