"""Loguru setup for the plate calculator API."""

import sys

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> <level>{level: <7}</level> "
    "<cyan>{name}</cyan> {message}"
)


def setup_logger(level: str = "INFO", log_file: str | None = None) -> list[int]:
    """
    Route all logging to stderr and, optionally, a JSON-lines file.

    Replaces any sinks configured earlier, so calling it again (e.g. from
    tests) starts from a clean slate.

    Args:
        level: Minimum level for every sink (case-insensitive)
        log_file: Optional path for structured logs, rotated daily and kept a week

    Returns:
        Handler ids of the installed sinks
    """
    level = level.upper()
    handlers = [
        {"sink": sys.stderr, "format": CONSOLE_FORMAT, "level": level, "colorize": True},
    ]
    if log_file:
        handlers.append({
            "sink": log_file,
            "level": level,
            "serialize": True,
            "rotation": "1 day",
            "retention": "7 days",
        })

    handler_ids = logger.configure(handlers=handlers)
    logger.debug(f"Logging configured (level={level}, file={log_file or 'none'})")
    return handler_ids
