"""
Symbol and transmission code table for the board.

Every cell on the board shows one symbol from a closed alphabet. The board API
speaks integer codes; SymbolCodec converts between the two. The codec is an
immutable value built once and shared by whatever needs it.
"""

from types import MappingProxyType
from typing import Iterable, Mapping

from ..logging import get_logger

logger = get_logger(__name__)

# Reserved marker for a cell not set by foreground content. Not a space.
EMPTY = "\u2400"

RED = "\U0001F7E5"
ORANGE = "\U0001F7E7"
YELLOW = "\U0001F7E8"
GREEN = "\U0001F7E9"
BLUE = "\U0001F7E6"
VIOLET = "\U0001F7EA"
WHITE = "\u2B1C"
BLACK = "\u2B1B"
BROWN = "\U0001F7EB"

RAINBOW = (RED, ORANGE, YELLOW, GREEN, BLUE, VIOLET)

# Emoji presentation selector; some sources append it to the block symbols
_VARIATION_SELECTOR = "\ufe0f"

CHAR_CODES = {
    " ": 0,
    "A": 1, "B": 2, "C": 3, "D": 4, "E": 5, "F": 6, "G": 7, "H": 8, "I": 9,
    "J": 10, "K": 11, "L": 12, "M": 13, "N": 14, "O": 15, "P": 16, "Q": 17,
    "R": 18, "S": 19, "T": 20, "U": 21, "V": 22, "W": 23, "X": 24, "Y": 25,
    "Z": 26,
    "1": 27, "2": 28, "3": 29, "4": 30, "5": 31, "6": 32, "7": 33, "8": 34,
    "9": 35, "0": 36,
    "!": 37, "@": 38, "#": 39, "$": 40, "(": 41, ")": 42,
    "-": 44, "+": 46, "&": 47, "=": 48, ";": 49, ":": 50,
    "'": 52, '"': 53, "%": 54, ",": 55, ".": 56,
    "/": 59, "?": 60, "°": 62,
    RED: 63, ORANGE: 64, YELLOW: 65, GREEN: 66, BLUE: 67, VIOLET: 68,
    WHITE: 69, BLACK: 70, BROWN: 71,
}


def split_symbols(text: Iterable[str]) -> list[str]:
    """Split text into board symbols, dropping emoji variation selectors."""
    return [ch for ch in text if ch != _VARIATION_SELECTOR]


class SymbolCodec:
    """Bidirectional symbol <-> code table.

    Symbols without a code (the empty marker included) encode as the empty
    marker's code, which the board shows as a blank cell. Codes outside the
    table decode to the empty marker.
    """

    def __init__(self, char_codes: Mapping[str, int], empty_code: int = 0):
        codes = dict(char_codes)
        reverse = {code: symbol for symbol, code in codes.items()}
        if len(reverse) != len(codes):
            raise ValueError("symbol table maps two symbols to the same code")
        if empty_code not in reverse:
            raise ValueError(f"empty code {empty_code} is not in the symbol table")

        self._codes = MappingProxyType(codes)
        self._symbols = MappingProxyType(reverse)
        self.empty_code = empty_code

    @property
    def symbols(self) -> frozenset:
        """Every symbol that has a code."""
        return frozenset(self._codes)

    @property
    def codes(self) -> frozenset:
        """Every legal transmission code."""
        return frozenset(self._symbols)

    def code_of(self, symbol: str) -> int:
        """Code for a symbol, upper-cased first. Never raises."""
        key = symbol.replace(_VARIATION_SELECTOR, "").upper()
        code = self._codes.get(key)
        if code is None:
            if key != EMPTY:
                logger.debug("Unmapped symbol", symbol=symbol)
            return self.empty_code
        return code

    def symbol_of(self, code: int) -> str:
        """Symbol for a code; unknown codes decode to the empty marker."""
        return self._symbols.get(code, EMPTY)

    def encode(self, text: str) -> list[int]:
        """Encode a run of text symbol by symbol."""
        return [self.code_of(symbol) for symbol in split_symbols(text)]


DEFAULT_CODEC = SymbolCodec(CHAR_CODES)
