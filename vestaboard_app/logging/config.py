"""
Centralized logging configuration for the board layout engine.

This module configures structlog for every component. Layouts, board clients
and the command-line wrapper all obtain their loggers from here so events
share one format.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    # Board previews go to stdout, so logs go to stderr
    logging.basicConfig(
        level=log_level,
        stream=sys.stderr,
        format="%(message)s"
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_layout_logger(name: str, layout: str) -> FilteringBoundLogger:
    """
    Get a logger bound to a single layout component.

    Args:
        name: Logger name (typically __name__)
        layout: Layout component name, e.g. "text_flow"

    Returns:
        Logger carrying subsystem and layout context
    """
    return structlog.get_logger(name, subsystem="layout", layout=layout)


def log_board_write(
    logger: FilteringBoundLogger,
    client: str,
    success: bool,
    status_code: Optional[int] = None,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log the outcome of one board write with a standardized format.

    Args:
        logger: Structlog logger instance
        client: Name of the board client
        success: Whether the board accepted the grid
        status_code: HTTP status, when the client has one
        context: Additional context data
    """
    bound_logger = logger.bind(
        client=client,
        write_result="OK" if success else "FAILED",
        status_code=status_code,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if success:
        bound_logger.info("Board write")
    else:
        bound_logger.warning("Board write failed")
