"""
Vestaboard command line interface

Usage:
    vestaboard <command> PATH [options]

Commands:
    haiku      Lay out a plain-text poem
    weather    Lay out a JSON list of daily forecasts
    ticker     Lay out a JSON list of quotes
    tasks      Lay out a JSON list of tasks
    read       Print what the board currently shows

Examples:
    vestaboard haiku poem.txt --dry-run
    vestaboard weather forecast.json --config-dir ./config
    vestaboard ticker quotes.json --seed 7

The read-write API key is taken from the environment variable named by
board.api_key_env (VESTABOARD_RW_KEY by default).
"""

import argparse
import json
import os
import random
import sys
from pathlib import Path
from typing import Any, Optional

from .config.loader import ConfigLoader
from .data.parsers import parse_forecasts, parse_quotes, parse_tasks
from .delivery.base import BaseBoardClient
from .delivery.http_delivery import HttpBoardClient
from .delivery.stdout_delivery import ConsoleBoardClient
from .engine import BoardEngine
from .errors import BoardTransportError, ConfigError, LayoutError
from .logging import configure_logging, get_logger

logger = get_logger(__name__)

COMMANDS = ("haiku", "weather", "ticker", "tasks", "read")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vestaboard",
        description="Lay out content for a 6x22 Vestaboard and send it",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("command", choices=COMMANDS)
    parser.add_argument("path", nargs="?", type=Path,
                        help="Content file (plain text for haiku, JSON otherwise); - for stdin")
    parser.add_argument("--dry-run", action="store_true",
                        help="Print the board instead of sending it")
    parser.add_argument("--seed", type=int, help="Seed the random layout choices")
    parser.add_argument("--config-dir", type=Path, help="Directory holding board.yaml")
    parser.add_argument("--log-level", help="Override the configured log level")
    parser.add_argument("--json-logs", action="store_true", help="Emit logs as JSON")
    return parser


def _read_content(path: Optional[Path]) -> str:
    if path is None or str(path) == "-":
        return sys.stdin.read()
    return path.read_text(encoding="utf-8")


def _load_records(text: str) -> list[dict[str, Any]]:
    records = json.loads(text)
    if not isinstance(records, list):
        raise ValueError("JSON content must be a list of objects")
    return records


def build_client(config, dry_run: bool) -> BaseBoardClient:
    if dry_run:
        return ConsoleBoardClient()
    api_key = os.environ.get(config.board.api_key_env, "")
    return HttpBoardClient("vestaboard", config.board, api_key)


def run(args: argparse.Namespace) -> int:
    config = ConfigLoader.create(args.config_dir).load()
    configure_logging(
        level=args.log_level or config.logging.level,
        format_json=args.json_logs or config.logging.format_json,
    )

    rng = random.Random(args.seed) if args.seed is not None else None
    engine = BoardEngine(build_client(config, args.dry_run), config, rng)

    if args.command == "read":
        print(engine.current().to_preview())
        return 0

    text = _read_content(args.path)
    if args.command == "haiku":
        result = engine.show_haiku(text)
    elif args.command == "weather":
        result = engine.show_weather(parse_forecasts(_load_records(text)))
    elif args.command == "ticker":
        result = engine.show_ticker(parse_quotes(_load_records(text)))
    else:
        result = engine.show_tasks(parse_tasks(_load_records(text)))

    return 0 if result.ok else 1


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        return run(args)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    except LayoutError as e:
        logger.error("Content does not fit the board", error=str(e))
        return 1
    except BoardTransportError as e:
        logger.error("Board write failed", error=str(e), status_code=e.status_code)
        return 1
    except (OSError, ValueError) as e:
        logger.error("Could not read content", error=str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
