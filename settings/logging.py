"""Logging configuration."""

import sys
from pathlib import Path

from loguru import logger

from settings import LOG_DIR, LOG_LEVEL, LOG_RETENTION, LOG_TO_FILE


def setup_logging(level: str = LOG_LEVEL, to_file: bool = LOG_TO_FILE, log_dir: Path | None = None):
    """Console sink at `level`; with to_file, a daily analysis log at DEBUG.

    Called once by the container on startup. Environment overrides live in
    settings (COALITION_LOG_LEVEL, COALITION_LOG_TO_FILE, COALITION_LOG_DIR).
    """
    logger.remove()

    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <cyan>{name}</cyan> | {message}",
        level=level,
        colorize=True,
    )

    if to_file:
        log_dir = log_dir or LOG_DIR
        log_dir.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_dir / "coalition_{time:YYYY-MM-DD}.log",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {name}:{function}:{line} | {message}",
            level="DEBUG",
            rotation="00:00",
            retention=LOG_RETENTION,
        )
        logger.debug("Analysis log in {}", log_dir)

    return logger
