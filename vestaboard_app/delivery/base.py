"""Base classes for board clients."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from ..board.grid import Grid
from ..board.symbols import DEFAULT_CODEC, SymbolCodec
from ..logging import get_logger


class WriteStatus(Enum):
    """Board write status."""
    SUCCESS = "success"
    FAILED = "failed"


@dataclass
class WriteResult:
    """Result of one board write."""
    status: WriteStatus
    message: Optional[str] = None
    status_code: Optional[int] = None
    write_time_ms: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.status == WriteStatus.SUCCESS


class BaseBoardClient(ABC):
    """Base class for anything that can show a Grid.

    A client does not serialize concurrent writes; callers must wait for one
    write to finish before issuing the next to the same board.
    """

    def __init__(self, name: str, codec: SymbolCodec = DEFAULT_CODEC):
        self.name = name
        self.codec = codec
        self.logger = get_logger(f"board.client.{name}")
        self._write_count = 0
        self._error_count = 0

    @abstractmethod
    def write(self, grid: Grid) -> WriteResult:
        """
        Send a grid to the board.

        Args:
            grid: Complete 6x22 grid

        Returns:
            Write result

        Raises:
            BoardTransportError: Board could not be reached or refused the grid
        """
        pass

    @abstractmethod
    def read(self) -> Grid:
        """Fetch what the board currently shows."""
        pass

    def get_stats(self) -> dict[str, Any]:
        """Get write statistics."""
        return {
            "name": self.name,
            "write_count": self._write_count,
            "error_count": self._error_count,
        }
