"""Logging configuration for the vocabulary CLI"""

import logging
import sys

ROOT_LOGGER = "vocab_cli"
DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONCISE_FORMAT = "%(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "WARNING", log_file: str | None = None) -> logging.Logger:
    """Setup logging configuration

    Diagnostics always go to stderr so that stdout carries only command
    output. The console format is concise unless level is DEBUG; the
    optional log file always gets the detailed format.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file to append logs to

    Returns:
        The package logger
    """
    level = level.upper()
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(getattr(logging, level))

    # Drop handlers from a previous call
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(_formatter(detailed=level == "DEBUG"))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(_formatter(detailed=True))
        logger.addHandler(file_handler)

    return logger


def _formatter(detailed: bool) -> logging.Formatter:
    if detailed:
        return logging.Formatter(fmt=DETAILED_FORMAT, datefmt=DATE_FORMAT)
    return logging.Formatter(fmt=CONCISE_FORMAT)


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)
