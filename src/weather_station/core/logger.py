"""
Logging configuration for the weather station library.

The library itself only emits through module loggers under "weather_station"
(validator rejections at DEBUG, processor rejections at WARNING). Applications
call setup_logger to attach a console handler and, when a path is given or
LOG_FILE is set, a file handler; nothing is written to disk otherwise.
"""

import logging
import os
from pathlib import Path
from typing import Optional


def setup_logger(
    name: str = "weather_station",
    log_file: Optional[str] = None,
    log_level: str = "INFO"
) -> logging.Logger:
    """
    Set up library logger with a console handler and an optional file handler.

    Args:
        name: Logger name
        log_file: Path to log file. If None, uses LOG_FILE env var; when neither
                  is set only the console handler is installed
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Configured logger instance
    """
    if log_file is None:
        log_file = os.getenv("LOG_FILE")

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    detailed_formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_formatter = logging.Formatter(
        fmt="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logger.level)
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(detailed_formatter)
        logger.addHandler(file_handler)

    # Prevent propagation to root logger
    logger.propagate = False

    return logger
