"""Console board client for dry runs."""

import sys
from typing import Optional, TextIO

from ..board.grid import Grid
from ..board.symbols import DEFAULT_CODEC, SymbolCodec
from ..logging import log_board_write
from .base import BaseBoardClient, WriteResult, WriteStatus


class ConsoleBoardClient(BaseBoardClient):
    """Prints grids instead of sending them; read returns the last one."""

    def __init__(self, name: str = "console", stream: Optional[TextIO] = None,
                 codec: SymbolCodec = DEFAULT_CODEC):
        super().__init__(name, codec)
        self.stream = stream
        self._last: Optional[Grid] = None

    def write(self, grid: Grid) -> WriteResult:
        print(grid.to_preview(), file=self.stream or sys.stdout, flush=True)
        self._last = grid
        self._write_count += 1
        log_board_write(self.logger, self.name, True)
        return WriteResult(status=WriteStatus.SUCCESS, message="Printed to stdout")

    def read(self) -> Grid:
        if self._last is None:
            return Grid.compose([])
        return self._last
