"""
Board engine coordinator.

Wires configuration, the layout components and a board client together:
content -> layout -> Grid -> client.write. One write per call.
"""

import random
from datetime import date
from typing import Optional, Sequence

from .board.grid import Grid
from .board.symbols import DEFAULT_CODEC, SymbolCodec
from .config.defaults import BoardConfig, get_default_config
from .data.models import Forecast, Quote, Task
from .delivery.base import BaseBoardClient, WriteResult
from .layouts.tasks import TaskLayout
from .layouts.text_flow import TextFlowLayout
from .layouts.ticker import TickerLayout
from .layouts.weather import NormalizationCache, WeatherLayout, WeatherNormalizer
from .logging import get_logger

logger = get_logger(__name__)


class BoardEngine:
    """
    Builds the layouts from one config and sends their grids to one client.

    All layouts share the injected random source, so a seeded engine produces
    the same boards run to run.
    """

    def __init__(self, client: BaseBoardClient, config: Optional[BoardConfig] = None,
                 rng: Optional[random.Random] = None, codec: SymbolCodec = DEFAULT_CODEC) -> None:
        self.client = client
        self.config = config or get_default_config()
        self.codec = codec
        self.rng = rng or random.Random()

        cache = NormalizationCache(self.config.weather.cache_maxsize)
        self.text_flow = TextFlowLayout(self.config.text_flow.palette, self.rng)
        self.weather = WeatherLayout(WeatherNormalizer(cache))
        self.ticker = TickerLayout(self.rng)
        self.tasks = TaskLayout(self.config.tasks.rules, self.rng)

    def _write(self, grid: Grid, layout: str) -> WriteResult:
        logger.info("Writing board", layout=layout, client=self.client.name)
        logger.debug("Board preview", preview=grid.to_preview())
        return self.client.write(grid)

    def show_haiku(self, text: str) -> WriteResult:
        return self._write(self.text_flow.render(text), "text_flow")

    def show_weather(self, forecasts: Sequence[Forecast], today: Optional[date] = None) -> WriteResult:
        return self._write(self.weather.render(forecasts, today), "weather")

    def show_ticker(self, quotes: Sequence[Quote]) -> WriteResult:
        return self._write(self.ticker.render(quotes), "ticker")

    def show_tasks(self, tasks: Sequence[Task]) -> WriteResult:
        return self._write(self.tasks.render(tasks), "tasks")

    def current(self) -> Grid:
        """What the board shows right now."""
        return self.client.read()
