"""Logging configuration for context-probe.

Log records go to stderr so they never interleave with the transcript
printed on stdout. The console renderer runs without colors: records sit
next to plain transcript text and are often redirected to a file.
"""

import logging
import sys

import structlog

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


def configure_logging(level: str = "warning", json_output: bool = False) -> None:
    """Configure logging for the application.

    Called once on startup. Configures both standard logging and structlog.

    Args:
        level: Log level (debug, info, warning, error, critical)
        json_output: If True, render records as JSON instead of console text
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setLevel(log_level)

    logging.basicConfig(
        level=log_level,
        handlers=[stream_handler],
        format="%(message)s",
        force=True,
    )

    processors: list[structlog.types.Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def verbosity_to_level(verbose: int) -> str:
    """Map a ``-v`` count to a log level name."""
    if verbose >= 2:
        return "debug"
    if verbose == 1:
        return "info"
    return "warning"


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)
