"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any
from urllib.parse import urlparse

from ..board.symbols import DEFAULT_CODEC, split_symbols

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _as_symbol(value: str) -> str:
    return "".join(split_symbols(value))


def _is_board_symbol(value: Any) -> bool:
    return isinstance(value, str) and _as_symbol(value) in DEFAULT_CODEC.symbols


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_board_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate board connection parameters."""
        errors = []

        if "url" in params:
            value = params["url"]
            parsed = urlparse(value) if isinstance(value, str) else None
            if parsed is None or parsed.scheme not in ("http", "https") or not parsed.netloc:
                errors.append(ValidationError(
                    field="url",
                    message="Must be an http(s) URL",
                    value=value
                ))

        if "timeout_seconds" in params:
            value = params["timeout_seconds"]
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                errors.append(ValidationError(
                    field="timeout_seconds",
                    message="Must be a positive integer",
                    value=value
                ))

        if "api_key_env" in params:
            value = params["api_key_env"]
            if not isinstance(value, str) or not value:
                errors.append(ValidationError(
                    field="api_key_env",
                    message="Must be a non-empty string",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_palette(palette: Any) -> list[ValidationError]:
        """Palette needs two or more distinct symbols the board can show."""
        if not isinstance(palette, (list, tuple)):
            return [ValidationError(field="palette", message="Must be a list", value=palette)]

        unknown = [s for s in palette if not _is_board_symbol(s)]
        if unknown:
            return [ValidationError(
                field="palette",
                message="Contains symbols the board cannot display",
                value=unknown
            )]

        if len({_as_symbol(s) for s in palette}) < 2:
            return [ValidationError(
                field="palette",
                message="Must list at least two distinct symbols",
                value=palette
            )]
        return []

    @staticmethod
    def validate_task_rules(rules: Any) -> list[ValidationError]:
        """Each rule must be a (list-name fragment, icon) pair."""
        errors = []

        if not isinstance(rules, (list, tuple)):
            return [ValidationError(field="rules", message="Must be a list", value=rules)]

        for rule in rules:
            if (not isinstance(rule, (list, tuple)) or len(rule) != 2
                    or not isinstance(rule[0], str) or not rule[0]):
                errors.append(ValidationError(
                    field="rules",
                    message="Each rule must be [list name, icon]",
                    value=rule
                ))
            elif not _is_board_symbol(rule[1]):
                errors.append(ValidationError(
                    field="rules",
                    message="Icon is not a board symbol",
                    value=rule
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate a complete merged configuration."""
        errors = []

        errors.extend(ConfigValidator.validate_board_params(config.get("board", {})))

        if "palette" in config.get("text_flow", {}):
            errors.extend(ConfigValidator.validate_palette(config["text_flow"]["palette"]))

        maxsize = config.get("weather", {}).get("cache_maxsize", 0)
        if not isinstance(maxsize, int) or isinstance(maxsize, bool) or maxsize < 0:
            errors.append(ValidationError(
                field="cache_maxsize",
                message="Must be a non-negative integer",
                value=maxsize
            ))

        if "rules" in config.get("tasks", {}):
            errors.extend(ConfigValidator.validate_task_rules(config["tasks"]["rules"]))

        level = config.get("logging", {}).get("level", "INFO")
        if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
            errors.append(ValidationError(
                field="level",
                message=f"Must be one of {', '.join(LOG_LEVELS)}",
                value=level
            ))

        return errors
