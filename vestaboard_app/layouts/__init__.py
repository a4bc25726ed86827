"""Layout components: content in, 6x22 Grid out."""

from .tasks import TaskLayout, TaskRule
from .text_flow import TextFlowLayout
from .ticker import TickerLayout
from .weather import NormalizationCache, WeatherLayout, WeatherNormalizer

__all__ = [
    "TextFlowLayout",
    "WeatherNormalizer",
    "NormalizationCache",
    "WeatherLayout",
    "TickerLayout",
    "TaskLayout",
    "TaskRule",
]
