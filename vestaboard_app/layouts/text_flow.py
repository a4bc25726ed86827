"""
Centered, wrapped layout for short poems such as haiku.

Each logical line gets at most two physical rows. Lines are centered with the
empty marker so a two-color diagonal background shows around the text.
"""

import random
from typing import Optional, Sequence

from ..board.grid import COLS, ROWS, BackgroundFn, Grid
from ..board.symbols import EMPTY, RAINBOW, split_symbols
from ..errors import LineTooLongError, TooManyLinesError, UnsplittableLineError
from ..logging import get_layout_logger

logger = get_layout_logger(__name__, "text_flow")

# Longest line that fits on one row with a cell of margin either side
SINGLE_ROW_LENGTH = COLS - 2
MAX_LINE_LENGTH = 2 * SINGLE_ROW_LENGTH

# Poems this short are nudged down a row
SHORT_POEM_LINES = 4


def split_line(line: str) -> list[str]:
    """
    Split one logical line into one or two physical rows.

    Breaks right after the first ", " if there is one, otherwise at the first
    space at or past the middle of the board.

    Raises:
        LineTooLongError: Line cannot fit in two rows
        UnsplittableLineError: Line needs two rows but has no break point
    """
    if len(line) > MAX_LINE_LENGTH:
        raise LineTooLongError(content=line, max_length=MAX_LINE_LENGTH)
    if len(line) <= SINGLE_ROW_LENGTH:
        return [line]

    break_idx = line.find(", ")
    if break_idx < 0:
        break_idx = line.find(" ", COLS // 2)
    if break_idx < 0:
        raise UnsplittableLineError(content=line)

    return [line[:break_idx + 1], line[break_idx + 1:]]


def center_line(line: str) -> str:
    """Pad with the empty marker to COLS, extra cell on the right."""
    deficit = COLS - len(line)
    if deficit < 0:
        raise LineTooLongError("line too long after split", content=line, max_length=COLS)
    left = deficit // 2
    return EMPTY * left + line + EMPTY * (deficit - left)


class TextFlowLayout:
    """Lays out multi-line text centered over a random two-color background."""

    def __init__(self, palette: Sequence[str] = RAINBOW, rng: Optional[random.Random] = None):
        if len(set(palette)) < 2:
            raise ValueError("palette needs at least two distinct colors")
        self.palette = tuple(palette)
        self.rng = rng or random.Random()

    def flow_lines(self, text: str) -> list[str]:
        """
        Turn text into centered physical rows, top padding included.

        Args:
            text: Newline-separated lines; blank lines are ignored

        Returns:
            Between one and ROWS rows, each exactly COLS symbols

        Raises:
            LayoutError: Content cannot fit the board
        """
        # Emoji variation selectors take no cell
        text = "".join(split_symbols(text))
        logical = [line.strip() for line in text.splitlines()]
        logical = [line for line in logical if line]

        physical = []
        for line in logical:
            physical.extend(piece.strip() for piece in split_line(line))

        lines = [center_line(line) for line in physical]

        if len(lines) <= SHORT_POEM_LINES:
            lines.insert(0, EMPTY * COLS)

        if len(lines) > ROWS:
            raise TooManyLinesError(content=physical, line_count=len(lines))

        return lines

    def background(self) -> BackgroundFn:
        """Diagonal stripes of two distinct colors drawn from the palette."""
        even, odd = self.rng.sample(self.palette, 2)

        def stripes(row: int, col: int) -> str:
            return even if (row + col) % 2 == 0 else odd

        return stripes

    def render(self, text: str) -> Grid:
        """Lay out text; see flow_lines for the rules."""
        lines = self.flow_lines(text)
        grid = Grid.compose(lines, self.background())
        logger.debug("Text laid out", rows=len(lines))
        return grid
