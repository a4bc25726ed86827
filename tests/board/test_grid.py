"""Tests for the grid compositor."""

import pytest

from vestaboard_app.board.grid import COLS, ROWS, Grid
from vestaboard_app.board.symbols import BLUE, DEFAULT_CODEC, EMPTY, RED
from vestaboard_app.errors import GridOverflowError, GridShapeError, LayoutError

from conftest import assert_board_shape


class TestCompose:
    """Test Grid.compose"""

    def test_empty_content_is_all_background(self):
        """Test no content gives a full grid of spaces"""
        grid = Grid.compose([])
        assert_board_shape(grid)
        assert all(cell == " " for row in grid.cells for cell in row)

    def test_short_rows_filled_from_background(self):
        """Test missing rows and columns come from the background"""
        grid = Grid.compose(["HELLO"], lambda r, c: RED)
        assert_board_shape(grid)
        assert grid.rows()[0] == "HELLO" + RED * (COLS - 5)
        assert grid.rows()[ROWS - 1] == RED * COLS

    def test_empty_marker_shows_background(self):
        """Test cells holding the empty marker are replaced"""
        grid = Grid.compose([EMPTY + "A" + EMPTY], lambda r, c: BLUE)
        assert grid.cells[0][:3] == (BLUE, "A", BLUE)

    def test_space_is_foreground(self):
        """Test a literal space is kept over the background"""
        grid = Grid.compose([" "], lambda r, c: RED)
        assert grid.cells[0][0] == " "

    def test_background_receives_coordinates(self):
        """Test the background function is called with (row, col)"""
        grid = Grid.compose([], lambda r, c: RED if (r, c) == (2, 5) else " ")
        assert grid.cells[2][5] == RED
        assert grid.cells[5][2] == " "

    def test_symbol_sequences_accepted(self):
        """Test rows given as lists of symbols"""
        grid = Grid.compose([[RED, "X"]])
        assert grid.cells[0][:2] == (RED, "X")

    def test_too_many_rows(self):
        """Test content taller than the board is refused"""
        with pytest.raises(GridOverflowError):
            Grid.compose(["X"] * (ROWS + 1))

    def test_row_too_long(self):
        """Test content wider than the board is refused"""
        with pytest.raises(GridOverflowError) as exc_info:
            Grid.compose(["OK", "X" * (COLS + 1)])
        assert exc_info.value.row == 1
        assert isinstance(exc_info.value, LayoutError)

    def test_compose_is_deterministic(self):
        """Test identical arguments give identical grids"""
        rows = ["ONE", "TWO", EMPTY * 3 + "THREE"]
        background = lambda r, c: RED if (r + c) % 2 else BLUE  # noqa: E731
        assert Grid.compose(rows, background) == Grid.compose(rows, background)


class TestGridCodes:
    """Test conversion to and from codes"""

    def test_to_codes_shape(self):
        codes = Grid.compose(["A"]).to_codes()
        assert len(codes) == ROWS
        assert all(len(row) == COLS for row in codes)
        assert codes[0][0] == 1
        assert codes[0][1] == 0

    def test_from_codes_round_trip(self):
        """Test a grid read back from codes matches what was written"""
        grid = Grid.compose(["HAIKU 2024", "", RED + BLUE])
        assert Grid.from_codes(grid.to_codes(), DEFAULT_CODEC) == grid

    def test_from_codes_unknown_code(self):
        """Test codes without a symbol decode to the empty marker"""
        codes = [[0] * COLS for _ in range(ROWS)]
        codes[0][0] = 43
        assert Grid.from_codes(codes).cells[0][0] == EMPTY

    def test_from_codes_ragged(self):
        """Test a ragged code matrix is refused"""
        with pytest.raises(GridShapeError):
            Grid.from_codes([[0] * COLS] * (ROWS - 1))


class TestPreview:
    """Test the human-readable rendering"""

    def test_preview_has_border_and_rows(self):
        preview = Grid.compose(["HI"]).to_preview()
        lines = preview.splitlines()
        assert len(lines) == ROWS + 2
        assert lines[0] == "+" + "-" * COLS + "+"
        assert lines[1] == "|HI" + " " * (COLS - 2) + "|"
