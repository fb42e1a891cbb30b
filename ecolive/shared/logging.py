"""Logging configuration utilities."""

import logging
from pathlib import Path
from typing import List, Optional


def setup_logging(
    level: str = "INFO",
    format_string: Optional[str] = None,
    quiet_loggers: Optional[List[str]] = None,
    filename: Optional[str] = None,
) -> None:
    """Configure logging for the dashboard.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        format_string: Custom format string for log messages.
        quiet_loggers: List of logger names to set to WARNING level.
        filename: Write log records to this file instead of stderr, so they
            do not interleave with the console display.
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    if filename:
        filename = str(Path(filename).expanduser())
        Path(filename).parent.mkdir(parents=True, exist_ok=True)

    # Convert string to logging level
    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format=format_string,
        filename=filename,
    )

    # Quiet down verbose third-party loggers
    default_quiet = ["aiohttp", "asyncio"]
    quiet_loggers = (quiet_loggers or []) + default_quiet

    for logger_name in quiet_loggers:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
