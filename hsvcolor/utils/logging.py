"""
hsvcolor Logging
Opt-in loguru sink configuration for the package.

The package logger is disabled on import; applications that want to see
derivation logs call configure_logging() or set HSVCOLOR_LOG_ENABLED=1.
"""
import sys
from typing import Any, Optional

from loguru import logger

from hsvcolor.config import config

PACKAGE = "hsvcolor"
LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {message} | {extra}"


def _package_filter(record) -> bool:
    return record["name"] is not None and record["name"].split(".")[0] == PACKAGE


def configure_logging(level: Optional[str] = None, sink: Any = sys.stderr) -> int:
    """
    Enable package logging and install a sink for hsvcolor records.

    Args:
        level: Minimum level name; defaults to config.LOG_LEVEL
        sink: Any loguru sink (stream, path, callable)

    Returns:
        Sink id, to be passed to reset_logging()

    Raises:
        ValueError: If level is not a known level name
    """
    level = (level or config.LOG_LEVEL).upper()
    if not config.validate_log_level(level):
        raise ValueError(f"Invalid log level: {level}")

    logger.enable(PACKAGE)
    return logger.add(
        sink,
        format=LOG_FORMAT,
        level=level,
        filter=_package_filter,
        serialize=config.LOG_SERIALIZE,
    )


def reset_logging(sink_id: int) -> None:
    """Remove a sink installed by configure_logging() and disable the package."""
    logger.remove(sink_id)
    logger.disable(PACKAGE)
