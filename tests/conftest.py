"""Pytest configuration and shared fixtures."""

import random
from datetime import date, timedelta

import pytest

from vestaboard_app.board.grid import COLS, ROWS
from vestaboard_app.data.models import Forecast, Quote, Task


def assert_board_shape(grid) -> None:
    """Every grid is exactly ROWS x COLS."""
    assert len(grid.cells) == ROWS
    assert all(len(row) == COLS for row in grid.cells)


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source so layout choices repeat."""
    return random.Random(1234)


@pytest.fixture
def today() -> date:
    return date(2024, 3, 4)  # a Monday


@pytest.fixture
def week_forecast(today) -> list[Forecast]:
    """Seven days of forecast, deliberately out of order."""
    phrases = [
        "Sunny",
        "Mostly Cloudy",
        "Chance Rain Showers",
        "Thunderstorms And Patchy Fog",
        "Snow Likely",
        "Hot",
        "Windy",
    ]
    days = [
        Forecast(date=today + timedelta(days=i), temperature=40 + i,
                 descriptions=(phrase,), end_hour=18)
        for i, phrase in enumerate(phrases)
    ]
    return list(reversed(days))


@pytest.fixture
def quotes() -> list[Quote]:
    """Eight quotes with a mix of directions and name lengths."""
    return [
        Quote("AAPL", 1.25, 189.50),
        Quote("MSFT", -0.40, 410.12),
        Quote("GOOGL", 2.75, 142.30),
        Quote("TSLA", -3.10, 175.05),
        Quote("NVDA", 4.60, 880.00),
        Quote("AMZN", 0.05, 178.22),
        Quote("BRK", -0.90, 405000.00),
        Quote("SPY", -12.30, 512.40),
    ]


@pytest.fixture
def tasks() -> list[Task]:
    """Tasks across three recognized lists and two unrecognized ones."""
    return [
        Task("Send invoice", "Work"),
        Task("Review PR", "Work"),
        Task("Buy milk", "Groceries"),
        Task("Pick up dry cleaning", "Errands"),
        Task("Water plants", "Garden"),
        Task("Call plumber", "Misc"),
    ]
