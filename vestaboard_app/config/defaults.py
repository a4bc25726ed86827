"""Default configuration parameters for the board layout engine."""

from dataclasses import dataclass, field

from ..board.symbols import BLUE, GREEN, ORANGE, RAINBOW, RED, VIOLET, YELLOW


@dataclass(frozen=True)
class BoardParams:
    """Board API connection parameters."""
    url: str = "https://rw.vestaboard.com/"
    api_key_env: str = "VESTABOARD_RW_KEY"       # Env var holding the read-write key
    timeout_seconds: int = 10


@dataclass(frozen=True)
class TextFlowParams:
    """Haiku layout parameters."""
    palette: tuple[str, ...] = RAINBOW            # Background colors, two are drawn per call


@dataclass(frozen=True)
class WeatherParams:
    """Weather layout parameters."""
    cache_maxsize: int = 0                        # 0 keeps every normalized phrase


@dataclass(frozen=True)
class TaskParams:
    """Task layout parameters."""
    # Ordered (list-name fragment, icon); first match wins
    rules: tuple[tuple[str, str], ...] = (
        ("work", RED),
        ("errand", ORANGE),
        ("grocer", GREEN),
        ("home", BLUE),
        ("family", VIOLET),
        ("personal", YELLOW),
    )


@dataclass(frozen=True)
class LoggingParams:
    """Logging parameters."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class BoardConfig:
    """Complete configuration."""
    board: BoardParams = field(default_factory=BoardParams)
    text_flow: TextFlowParams = field(default_factory=TextFlowParams)
    weather: WeatherParams = field(default_factory=WeatherParams)
    tasks: TaskParams = field(default_factory=TaskParams)
    logging: LoggingParams = field(default_factory=LoggingParams)


def get_default_config() -> BoardConfig:
    """Get the default configuration."""
    return BoardConfig()
