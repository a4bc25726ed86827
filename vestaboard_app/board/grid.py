"""
The 6x22 board grid and its compositor.

Layouts build ragged foreground rows and hand them to Grid.compose, which
fills every cell the content leaves unset from a background function.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Union

from ..errors import GridOverflowError, GridShapeError
from .symbols import DEFAULT_CODEC, EMPTY, SymbolCodec, split_symbols

ROWS = 6
COLS = 22

BackgroundFn = Callable[[int, int], str]
ContentRow = Union[str, Sequence[str]]


def blank_background(row: int, col: int) -> str:
    """Default background: a plain space everywhere."""
    return " "


def _row_symbols(row: ContentRow) -> list[str]:
    if isinstance(row, str):
        return split_symbols(row)
    return list(row)


@dataclass(frozen=True)
class Grid:
    """Exactly ROWS x COLS symbols. Construct through compose or from_codes."""

    cells: tuple[tuple[str, ...], ...]

    def __post_init__(self):
        if len(self.cells) != ROWS or any(len(row) != COLS for row in self.cells):
            shape = [len(row) for row in self.cells]
            raise GridShapeError(f"grid must be {ROWS}x{COLS}", content=shape)

    @classmethod
    def compose(cls, rows: Sequence[ContentRow],
                background: Optional[BackgroundFn] = None) -> "Grid":
        """
        Compose ragged foreground rows onto a full grid.

        Args:
            rows: Up to ROWS strings or symbol sequences, each at most COLS long
            background: Symbol for any cell the content leaves unset

        Returns:
            New Grid

        Raises:
            GridOverflowError: Content exceeds ROWS rows or COLS columns
        """
        background = background or blank_background
        content = [_row_symbols(row) for row in rows]

        if len(content) > ROWS:
            raise GridOverflowError(f"content has {len(content)} rows, board has {ROWS}")
        for r, symbols in enumerate(content):
            if len(symbols) > COLS:
                raise GridOverflowError(
                    f"row {r} has {len(symbols)} symbols, board has {COLS}",
                    row=r, content="".join(symbols),
                )

        cells = [[EMPTY] * COLS for _ in range(ROWS)]
        for r in range(ROWS):
            for c in range(COLS):
                if r < len(content) and c < len(content[r]) and content[r][c] != EMPTY:
                    cells[r][c] = content[r][c]
                else:
                    cells[r][c] = background(r, c)

        return cls(tuple(tuple(row) for row in cells))

    @classmethod
    def from_codes(cls, codes: Sequence[Sequence[int]],
                   codec: SymbolCodec = DEFAULT_CODEC) -> "Grid":
        """Decode a ROWS x COLS code matrix read back from the board."""
        return cls(tuple(tuple(codec.symbol_of(code) for code in row) for row in codes))

    def to_codes(self, codec: SymbolCodec = DEFAULT_CODEC) -> list[list[int]]:
        """Transmission codes, one list per row."""
        return [[codec.code_of(symbol) for symbol in row] for row in self.cells]

    def rows(self) -> list[str]:
        """Each row joined into a string."""
        return ["".join(row) for row in self.cells]

    def to_preview(self) -> str:
        """Bordered text rendering for logs and dry runs."""
        border = "+" + "-" * COLS + "+"
        lines = [border]
        lines.extend(f"|{row}|" for row in self.rows())
        lines.append(border)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.to_preview()
