"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..board.symbols import split_symbols
from ..errors import ConfigError
from .defaults import (
    BoardConfig,
    BoardParams,
    LoggingParams,
    TaskParams,
    TextFlowParams,
    WeatherParams,
    get_default_config,
)
from .validation import ConfigValidator

CONFIG_FILENAME = "board.yaml"


def _symbol(value: str) -> str:
    return "".join(split_symbols(value))


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: BoardConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path.cwd() / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_file_config(self) -> dict[str, Any]:
        """Load overrides from board.yaml, if present."""
        config_file = self.config_dir / CONFIG_FILENAME

        if not config_file.exists():
            return {}

        with open(config_file) as f:
            file_config = yaml.safe_load(f)

        if file_config is None:
            return {}
        if not isinstance(file_config, dict):
            raise ConfigError(f"{config_file} must contain a mapping")
        return file_config

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Explicit overrides (highest priority)
        2. board.yaml in the config directory
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)
        config = self._deep_merge(config, self.load_file_config())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load(self, overrides: Optional[dict[str, Any]] = None) -> BoardConfig:
        """Merge, validate and build a BoardConfig."""
        config = self.merge_config(overrides)

        errors = ConfigValidator.validate_config(config)
        if errors:
            details = "; ".join(f"{e.field}: {e.message}" for e in errors)
            raise ConfigError(f"Invalid configuration: {details}", errors=errors)

        try:
            return BoardConfig(
                board=BoardParams(**config["board"]),
                text_flow=TextFlowParams(
                    palette=tuple(_symbol(s) for s in config["text_flow"]["palette"])),
                weather=WeatherParams(**config["weather"]),
                tasks=TaskParams(
                    rules=tuple((name, _symbol(icon)) for name, icon in config["tasks"]["rules"])),
                logging=LoggingParams(**config["logging"]),
            )
        except TypeError as e:
            # Unknown keys in board.yaml
            raise ConfigError(f"Invalid configuration: {e}") from e

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
