"""Loguru logging configuration.

Call setup_logging() once at application startup to configure sinks.
All other modules simply do `from loguru import logger` and log normally.
"""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from parlor.config import DEBUG_LOG_LEVEL, DEBUG_LOG_PATH


def setup_logging(level: str = DEBUG_LOG_LEVEL, log_path: Path | str = DEBUG_LOG_PATH) -> None:
    """Configure loguru with a single rotating file sink.

    The default stderr handler is removed because the terminal belongs to
    the Textual screen while the app runs.
    """
    logger.remove()

    log_file = Path(log_path)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level=level,
        rotation="1 MB",
        retention="7 days",
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}",
    )
