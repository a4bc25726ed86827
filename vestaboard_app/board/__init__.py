"""
Board primitives: the symbol/code table and the 6x22 grid compositor.
"""

from .grid import COLS, ROWS, Grid, blank_background
from .symbols import DEFAULT_CODEC, EMPTY, SymbolCodec

__all__ = [
    "ROWS",
    "COLS",
    "EMPTY",
    "Grid",
    "SymbolCodec",
    "DEFAULT_CODEC",
    "blank_background",
]
