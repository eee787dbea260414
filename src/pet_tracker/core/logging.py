"""Loguru logging configuration.

Application messages go to stderr as plain text. Records bound with
``json_output=True`` (the per-request access log written by
``RequestLoggingMiddleware``) go to stderr as JSON lines instead, carrying
their bound fields. A rotating log file receives everything when ``log_dir``
is set.
"""

import sys
from pathlib import Path

from loguru import logger

_LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | {name}:{function}:{line} | {message}"
_LOG_FILENAME = "pet-tracker.log"


def _is_structured(record: dict) -> bool:
    return bool(record["extra"].get("json_output", False))


def setup_logging(log_level: str = "INFO", log_dir: str | None = None) -> None:
    """Replace all Loguru sinks with the service's stderr and file sinks.

    Args:
        log_level: Minimum log level to emit (case-insensitive).
        log_dir: Optional directory for ``pet-tracker.log``, rotated daily
            and kept for a week.
    """
    level = log_level.upper()
    logger.remove()
    logger.add(sys.stderr, level=level, format=_LOG_FORMAT, filter=lambda r: not _is_structured(r))
    logger.add(sys.stderr, level=level, serialize=True, filter=_is_structured)

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path / _LOG_FILENAME,
            level=level,
            format=_LOG_FORMAT,
            rotation="24h",
            retention="7 days",
        )
