#!/usr/bin/env python3
"""
Basic Usage Example - Vestaboard layout engine

This script renders each layout to the console. It shows how to:
- Build an engine around a dry-run client
- Lay out a haiku, a forecast, quotes and tasks
- Seed the random choices so the output repeats

Run: python examples/basic_usage.py
"""

import random
from datetime import date, timedelta

from vestaboard_app.data.models import Forecast, Quote, Task
from vestaboard_app.delivery.stdout_delivery import ConsoleBoardClient
from vestaboard_app.engine import BoardEngine
from vestaboard_app.logging import configure_logging


def sample_forecast() -> list[Forecast]:
    today = date.today()
    phrases = [
        ("Sunny", "Mostly Sunny"),
        ("Partly Cloudy",),
        ("Slight Chance Rain Showers", "Chance Rain Showers"),
        ("Thunderstorms And Patchy Fog",),
        ("Snow Likely",),
        ("Hot",),
    ]
    return [
        Forecast(date=today + timedelta(days=i), temperature=60 + 3 * i, descriptions=p, end_hour=23)
        for i, p in enumerate(phrases)
    ]


def sample_quotes() -> list[Quote]:
    return [
        Quote("AAPL", 1.25, 189.50),
        Quote("MSFT", -0.40, 410.12),
        Quote("GOOGL", 2.75, 142.30),
        Quote("TSLA", -3.10, 175.05),
        Quote("NVDA", 4.60, 880.00),
        Quote("BRK", -0.90, 405000.00),
    ]


def sample_tasks() -> list[Task]:
    return [
        Task("Send invoice", "Work"),
        Task("Buy milk", "Groceries"),
        Task("Pick up dry cleaning", "Errands"),
        Task("Fix the gate", "Home"),
    ]


def main():
    configure_logging(level="WARNING")
    engine = BoardEngine(ConsoleBoardClient(), rng=random.Random(42))

    print("📜 Haiku")
    engine.show_haiku("An old silent pond\nA frog jumps into the pond\nSplash! Silence again")

    print("\n🌤  Weather")
    engine.show_weather(sample_forecast())

    print("\n📈 Ticker")
    engine.show_ticker(sample_quotes())

    print("\n✅ Tasks")
    engine.show_tasks(sample_tasks())


if __name__ == "__main__":
    main()
