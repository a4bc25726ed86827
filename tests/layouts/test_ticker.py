"""Tests for the ticker layout."""

import random
from unittest.mock import Mock

from vestaboard_app.board.grid import COLS, ROWS
from vestaboard_app.board.symbols import GREEN, RED
from vestaboard_app.data.models import Quote
from vestaboard_app.layouts.ticker import TickerLayout, format_narrow, format_wide

from conftest import assert_board_shape


def picking(index: int) -> Mock:
    """Random source whose choice always returns element `index`."""
    rng = Mock(spec=random.Random)
    rng.choice.side_effect = lambda options: options[index]
    return rng


class TestFormatting:
    """Test single-quote formatting"""

    def test_wide_row(self):
        row = format_wide(Quote("AMZN", 0.05, 178.22))
        assert row == "AMZN " + GREEN + "  0.05% " + "  178.22"
        assert len(row) == COLS

    def test_wide_row_large_price_drops_cents(self):
        row = format_wide(Quote("BRK", -0.9, 405000.0))
        assert row.endswith("  405000")
        assert row[5] == RED

    def test_wide_row_total_loss_drops_decimals(self):
        row = format_wide(Quote("BUST", -100.0, 0.01))
        assert row == "BUST " + RED + "  -100% " + "    0.01"
        assert len(row) == COLS

    def test_wide_row_big_gain_drops_decimals(self):
        row = format_wide(Quote("MEME", 1250.0, 3.10))
        assert row == "MEME " + GREEN + "  1250% " + "    3.10"
        assert len(row) == COLS

    def test_wide_row_huge_price_uses_exponent(self):
        row = format_wide(Quote("HUGE", 1.5, 123456789.0))
        assert row.endswith("1.23e+08")
        assert len(row) == COLS

    def test_narrow_one_decimal(self):
        assert format_narrow(Quote("MSFT", -0.4, 1.0), 4) == "MSFT" + RED + "-0.4%"

    def test_narrow_big_drop_no_decimal(self):
        assert format_narrow(Quote("SPY", -12.3, 1.0), 4) == "SPY " + RED + " -12%"

    def test_narrow_name_cut_to_column(self):
        assert format_narrow(Quote("GOOGL", 0.5, 1.0), 4).startswith("GOOG" + GREEN)


class TestSingleColumn:
    """Test the one-quote-per-row rendering"""

    def test_eight_quotes_give_six_full_rows(self, quotes):
        grid = TickerLayout(picking(0)).render(quotes)
        assert_board_shape(grid)

        rows = grid.rows()
        assert len(rows) == ROWS
        assert all(len(row) == COLS for row in rows)
        assert all("%" in row for row in rows)

    def test_markers_follow_direction(self, quotes):
        by_name = {q.name: q for q in quotes}
        for row in TickerLayout(picking(0)).render(quotes).rows():
            quote = by_name[row[:5].strip()]
            assert row[5] == (RED if quote.percent_change < 0 else GREEN)

    def test_extreme_moves_fit_the_board(self):
        """Test a total loss and a four-digit gain still give full rows"""
        quotes = [Quote("BUST", -100.0, 0.01), Quote("MEME", 1250.0, 3.10)]
        grid = TickerLayout(picking(0)).render(quotes)
        assert_board_shape(grid)
        assert grid.rows()[0].startswith("BUST " + RED + "  -100%")
        assert grid.rows()[1].startswith("MEME " + GREEN + "  1250%")

    def test_keeps_least_volatile(self, quotes):
        """Test the smallest absolute movers are shown, smallest first"""
        names = [row[:5].strip() for row in TickerLayout(picking(0)).render(quotes).rows()]
        assert names == ["AMZN", "MSFT", "BRK", "AAPL", "GOOGL", "TSLA"]


class TestTwoColumn:
    """Test the two-column rendering"""

    def test_short_names_left_long_names_right(self, quotes):
        grid = TickerLayout(picking(1)).render(quotes)
        assert_board_shape(grid)

        rows = grid.rows()
        left = [row[:4].strip() for row in rows]
        assert left == ["AAPL", "AMZN", "BRK", "MSFT", "NVDA", "SPY"]
        assert rows[0][11:16] == "GOOGL"
        assert rows[1][11:15] == "TSLA"

    def test_rows_without_right_entry(self, quotes):
        rows = TickerLayout(picking(1)).render(quotes).rows()
        assert rows[2][10:] == " " * (COLS - 10)

    def test_at_most_twelve_quotes(self):
        quotes = [Quote(f"T{i:02d}", i / 10, 10.0) for i in range(14)]
        rows = TickerLayout(picking(1)).render(quotes).rows()

        shown = {row[:4].strip() for row in rows} | {row[11:16].strip() for row in rows}
        assert "T12" not in shown and "T13" not in shown
        assert len(shown) == 2 * ROWS

    def test_full_rows_fill_board(self):
        quotes = [Quote(f"T{i:02d}", -i / 10, 10.0) for i in range(12)]
        for row in TickerLayout(picking(1)).render(quotes).rows():
            assert row[10] == " "
            assert row[-1] == "%"


class TestStrategyChoice:
    """Test random strategy selection"""

    def test_choice_goes_through_injected_rng(self, quotes):
        rng = picking(0)
        TickerLayout(rng).render(quotes)
        rng.choice.assert_called_once()

    def test_seeded_rng_repeats(self, quotes):
        first = TickerLayout(random.Random(3)).render(quotes)
        second = TickerLayout(random.Random(3)).render(quotes)
        assert first == second
