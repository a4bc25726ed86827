"""
Market ticker layout.

Two interchangeable renderings, one picked at random per call:

- single column: one quote per row with price
- two columns: twelve quotes, change only, short tickers on the left
"""

import random
from typing import Optional, Sequence

from ..board.grid import ROWS, Grid
from ..board.symbols import GREEN, RED
from ..data.models import Quote
from ..logging import get_layout_logger

logger = get_layout_logger(__name__, "ticker")

NAME_WIDTH = 5
CHANGE_WIDTH = 6
# COLS minus name, marker, change and "% "
PRICE_WIDTH = 8
# Prices at or above this are shown without cents
WHOLE_PRICE_FROM = 10000

LEFT_NAME_WIDTH = 4
RIGHT_NAME_WIDTH = 5
SHORT_CHANGE_WIDTH = 4


def marker(quote: Quote) -> str:
    return RED if quote.is_down else GREEN


def by_volatility(quotes: Sequence[Quote]) -> list[Quote]:
    """Quotes ordered by absolute percent change, smallest first."""
    return sorted(quotes, key=lambda q: abs(q.percent_change))


def format_wide(quote: Quote) -> str:
    """NAME ±CC.CC% PRICE for the single-column layout."""
    change = f"{quote.percent_change:.2f}"
    if len(change) > CHANGE_WIDTH:
        # -100% and moves past 1000% drop the decimals
        change = f"{quote.percent_change:.0f}"
    price = f"{quote.price:.2f}"
    if quote.price >= WHOLE_PRICE_FROM or len(price) > PRICE_WIDTH:
        price = f"{quote.price:.0f}"
    if len(price) > PRICE_WIDTH:
        price = f"{quote.price:.2e}"
    name = quote.name[:NAME_WIDTH]
    return (f"{name:<{NAME_WIDTH}}{marker(quote)}"
            f"{change:>{CHANGE_WIDTH}}% {price:>{PRICE_WIDTH}}")


def format_narrow(quote: Quote, name_width: int) -> str:
    """NAME ±C.C% for one cell of the two-column layout."""
    change = f"{quote.percent_change:.1f}"
    if len(change) > SHORT_CHANGE_WIDTH:
        # -10% and beyond drop the decimal
        change = f"{quote.percent_change:.0f}"
    name = quote.name[:name_width]
    return f"{name:<{name_width}}{marker(quote)}{change:>{SHORT_CHANGE_WIDTH}}%"


class TickerLayout:
    """Randomly picks the single- or two-column rendering on each call."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def single_column(self, quotes: Sequence[Quote]) -> Grid:
        # TODO: confirm whether the biggest movers were meant here; this keeps the smallest
        rows = [format_wide(q) for q in by_volatility(quotes)[:ROWS]]
        return Grid.compose(rows)

    def two_column(self, quotes: Sequence[Quote]) -> Grid:
        chosen = sorted(by_volatility(quotes)[:2 * ROWS], key=lambda q: q.name)
        # Stable: five-letter tickers end up in the wider right column
        chosen.sort(key=lambda q: len(q.name) > LEFT_NAME_WIDTH)

        left = chosen[:ROWS]
        right = sorted(chosen[ROWS:], key=lambda q: q.name)

        rows = []
        for i, quote in enumerate(left):
            row = format_narrow(quote, LEFT_NAME_WIDTH)
            if i < len(right):
                row += " " + format_narrow(right[i], RIGHT_NAME_WIDTH)
            rows.append(row)
        return Grid.compose(rows)

    def render(self, quotes: Sequence[Quote]) -> Grid:
        """Lay out quotes in whichever shape the random source picks."""
        strategy = self.rng.choice((self.single_column, self.two_column))
        logger.debug("Ticker layout chosen", strategy=strategy.__name__, quotes=len(quotes))
        return strategy(quotes)
