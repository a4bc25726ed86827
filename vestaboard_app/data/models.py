"""
Canonical content models consumed by the layout components.

All models are frozen; layouts read them and never mutate them.
"""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Forecast:
    """One day of forecast, possibly split into several sub-periods."""
    date: date                  # Local calendar date
    temperature: int            # Signed, display units
    descriptions: tuple[str, ...]  # Raw phrase per sub-period
    end_hour: int = 23          # Last hour covered, 0-23


@dataclass(frozen=True)
class Quote:
    """Market quote for one ticker."""
    name: str                   # Ticker symbol
    percent_change: float       # Signed daily change in percent
    price: float

    @property
    def is_down(self) -> bool:
        return self.percent_change < 0


@dataclass(frozen=True)
class Task:
    """Open task and the list that owns it."""
    title: str
    task_list: str
