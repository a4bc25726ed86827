"""
Content models for the board layouts.

Forecasts, quotes and tasks arrive already fetched; this module holds their
immutable representations and the parsers that build them from plain dicts.
"""

from .models import Forecast, Quote, Task
from .parsers import parse_forecasts, parse_quotes, parse_tasks

__all__ = ["Forecast", "Quote", "Task", "parse_forecasts", "parse_quotes", "parse_tasks"]
