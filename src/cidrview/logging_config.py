"""
Logging configuration for cidrview.

Console logging goes to stderr so it never mixes with a report on stdout.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    max_bytes: int = 1048576,  # 1MB
    backup_count: int = 3,
    enable_console: bool = True,
    enable_file: bool = False,
) -> logging.Logger:
    """
    Set up logging for cidrview.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Log file path (defaults to ~/.cidrview/logs/cidrview.log)
        max_bytes: Maximum log file size before rotation
        backup_count: Number of backup log files to keep
        enable_console: Enable console logging
        enable_file: Enable file logging

    Returns:
        Configured package logger
    """
    logger = logging.getLogger("cidrview")
    logger.setLevel(getattr(logging, level.upper()))

    # Clear existing handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    console_fmt = logging.Formatter(
        fmt='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # one record per line, pipe separated
    file_fmt = logging.Formatter(
        fmt='%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s:%(lineno)d | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    if enable_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(console_fmt)
        logger.addHandler(console_handler)

    if enable_file:
        if log_file:
            log_path = Path(log_file)
        else:
            log_path = Path.home() / ".cidrview" / "logs" / "cidrview.log"

        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(file_fmt)
        logger.addHandler(file_handler)

    # Prevent propagation to root logger
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.

    Args:
        name: Module name (e.g., 'cidrview.core')
    """
    return logging.getLogger(name)


def configure_logging(
    debug: bool = False,
    level: str = "WARNING",
    log_file: str | None = None,
) -> logging.Logger:
    """
    Quick logging configuration.

    Args:
        debug: Force debug logging
        level: Level used when debug is off
        log_file: Also log to this file
    """
    return setup_logging(
        level="DEBUG" if debug else level,
        log_file=log_file,
        enable_console=True,
        enable_file=log_file is not None,
    )
