"""
Weather forecast layout.

One row per day: three-letter day name, temperature, a colored icon and a
condensed description. Verbose forecast phrases are shrunk by
WeatherNormalizer, whose results are kept in an explicit cache because the
same handful of phrases repeat across days and runs.
"""

import re
import threading
from collections import Counter, OrderedDict
from datetime import date
from typing import Callable, Iterable, Optional

from ..board.grid import COLS, ROWS, Grid
from ..board.symbols import BLACK, BLUE, EMPTY, GREEN, ORANGE, RED, VIOLET, WHITE
from ..data.models import Forecast
from ..logging import get_layout_logger

logger = get_layout_logger(__name__, "weather")

# Day name (3) + temperature (4) + icon (1) + separator (1)
DESCRIPTION_WIDTH = COLS - 9

DAY_NAMES = ("MON", "TUE", "WED", "THU", "FRI", "SAT", "SUN")

# Last hour of the day; a segment ending here is tonight
NIGHT_END_HOUR = 23

# Ordered (source phrases, replacement). Earlier rules see the text first.
SUBSTITUTIONS = (
    (("Thunderstorms", "Thunderstorm", "T-storms"), "Tstms "),
    (("Slight Chance", "Isolated", "Scattered"), "Slight"),
    (("Chance",), "Chc"),
    (("Likely",), "Lkly"),
    (("Showers", "Shower"), "Shwrs"),
    (("Mostly Sunny",), "M Sunny"),
    (("Partly Sunny",), "P Sunny"),
    (("Mostly Cloudy",), "M Cloudy"),
    (("Partly Cloudy",), "P Cloudy"),
    (("Mostly Clear",), "M Clear"),
    (("Freezing",), "Frz"),
    (("Drizzle",), "Drzl"),
    (("Light",), "Lt"),
    (("Heavy",), "Hvy"),
    (("And",), "&"),
    (("Increasing", "Becoming", "Gradual", "Patchy", "Areas Of", "Areas", "Widespread", "Then"), ""),
)

TOKEN_PATTERN = re.compile(r"[A-Za-z&]+")


def _phrase_pattern(phrases: Iterable[str]) -> re.Pattern:
    alternatives = "|".join(re.escape(p) for p in sorted(phrases, key=len, reverse=True))
    return re.compile(rf"(?<![A-Za-z])(?:{alternatives})(?![A-Za-z])")


_COMPILED_SUBSTITUTIONS = tuple((_phrase_pattern(src), dst) for src, dst in SUBSTITUTIONS)


def _any_of(*words: str) -> Callable[[set], bool]:
    keywords = frozenset(words)
    return lambda tokens: not keywords.isdisjoint(tokens)


# Ordered (predicate over lower-cased tokens, icon); first match wins
ICON_RULES = (
    (_any_of("hot"), RED),
    (_any_of("sunny", "clear", "fair"), ORANGE),
    (_any_of("windy", "breezy", "blustery"), GREEN),
    (_any_of("frost", "cold"), VIOLET),
    (_any_of("cloudy", "overcast", "hazy", "haze", "foggy", "fog", "smoke", "dust", "mist"), BLACK),
    (_any_of("rain", "shwrs", "tstms", "drzl", "sprinkles"), BLUE),
    (_any_of("snow", "ice", "flurries", "sleet", "frz", "blizzard"), WHITE),
)


class NormalizationCache:
    """Thread-safe phrase cache; unbounded unless maxsize is set (FIFO eviction)."""

    def __init__(self, maxsize: Optional[int] = None):
        self.maxsize = maxsize or None
        self._entries: OrderedDict[str, str] = OrderedDict()
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            value = self._entries.get(key)
            if value is None:
                self.misses += 1
            else:
                self.hits += 1
            return value

    def put(self, key: str, value: str) -> None:
        with self._lock:
            self._entries[key] = value
            if self.maxsize is not None and len(self._entries) > self.maxsize:
                self._entries.popitem(last=False)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._entries


class WeatherNormalizer:
    """Shrinks a forecast phrase to a fixed-width token sequence."""

    def __init__(self, cache: Optional[NormalizationCache] = None, width: int = DESCRIPTION_WIDTH):
        self.cache = cache if cache is not None else NormalizationCache()
        self.width = width

    def normalize(self, phrase: str) -> str:
        """
        Condense a phrase and pad it to exactly `width` characters.

        Tokens are joined with single spaces until the next one would not fit.
        A first token longer than the width is cut to the width.
        """
        cached = self.cache.get(phrase)
        if cached is not None:
            return cached

        text = phrase
        for pattern, replacement in _COMPILED_SUBSTITUTIONS:
            text = pattern.sub(replacement, text)

        condensed = ""
        for token in TOKEN_PATTERN.findall(text):
            candidate = f"{condensed} {token}" if condensed else token
            if len(candidate) > self.width:
                if not condensed:
                    condensed = token[:self.width]
                break
            condensed = candidate

        result = condensed.ljust(self.width)
        self.cache.put(phrase, result)
        return result

    __call__ = normalize


def icon_for(description: str) -> Optional[str]:
    """Icon symbol for a normalized description, or None."""
    tokens = {token.lower() for token in TOKEN_PATTERN.findall(description)}
    for matches, icon in ICON_RULES:
        if matches(tokens):
            return icon
    return None


class WeatherLayout:
    """Up to ROWS days of forecast, earliest first."""

    def __init__(self, normalizer: Optional[WeatherNormalizer] = None):
        self.normalizer = normalizer or WeatherNormalizer()

    def describe(self, forecast: Forecast) -> str:
        """Most common normalized description across the day's sub-periods."""
        counts = Counter(self.normalizer(d) for d in forecast.descriptions)
        if not counts:
            return " " * self.normalizer.width
        return counts.most_common(1)[0][0]

    def format_row(self, forecast: Forecast, today: date) -> str:
        description = self.describe(forecast)
        icon = icon_for(description)

        # Tonight shows black unless it is snowing
        is_tonight = forecast.date == today and forecast.end_hour == NIGHT_END_HOUR
        if is_tonight and icon is not None and icon != WHITE:
            icon = BLACK

        day = DAY_NAMES[forecast.date.weekday()]
        return f"{day}{forecast.temperature:>4}{icon or EMPTY} {description}"

    def render(self, forecasts: Iterable[Forecast], today: Optional[date] = None) -> Grid:
        """
        Lay out forecasts by date; days past the sixth are dropped.

        Args:
            forecasts: Per-day forecasts in any order
            today: Current local date, defaults to date.today()
        """
        today = today or date.today()
        days = sorted(forecasts, key=lambda f: f.date)
        if len(days) > ROWS:
            logger.debug("Forecast truncated", days=len(days), shown=ROWS)

        rows = [self.format_row(forecast, today) for forecast in days[:ROWS]]
        return Grid.compose(rows)
