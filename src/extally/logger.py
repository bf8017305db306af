"""
Logging configuration for EXTALLY
Console logging goes to stderr since stdout carries the report
"""

import logging
import sys
from pathlib import Path
from typing import Optional

ROOT_LOGGER = "extally"
DEFAULT_LEVEL = "WARNING"


class ColoredFormatter(logging.Formatter):
    """Colored formatter for console output"""

    COLORS = {
        'DEBUG': '\033[36m',     # Cyan
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
        'RESET': '\033[0m'       # Reset
    }

    def format(self, record):
        levelname = record.levelname
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{self.COLORS['RESET']}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


def setup_logger(level: str = DEFAULT_LEVEL, log_file: Optional[str] = None) -> logging.Logger:
    """Setup the extally logger with a stderr handler and an optional file handler"""
    logger = logging.getLogger(ROOT_LOGGER)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    logger.setLevel(numeric_level)
    logger.propagate = False

    console_formatter = ColoredFormatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    if log_file:
        add_file_handler(logger, log_file)

    return logger


def add_file_handler(logger: logging.Logger, log_file: str) -> None:
    """Write everything down to DEBUG into log_file"""
    file_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(funcName)s() - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    try:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(path, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)  # Always DEBUG for file
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

        # The file handler sees DEBUG even when the console does not
        logger.setLevel(logging.DEBUG)
        logger.debug(f"Logging to file: {path}")

    except OSError as e:
        logger.warning(f"Could not setup file logging: {e}")


def get_logger(name: str = None) -> logging.Logger:
    """Get a logger under the extally namespace"""
    if name is None or name == ROOT_LOGGER:
        return logging.getLogger(ROOT_LOGGER)
    if not name.startswith(f"{ROOT_LOGGER}."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def configure(level: str = DEFAULT_LEVEL, log_file: Optional[str] = None) -> logging.Logger:
    """Apply level and file settings to the already created logger"""
    logger = setup_logger(level, log_file)

    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    for handler in logger.handlers:
        if not isinstance(handler, logging.FileHandler):
            handler.setLevel(numeric_level)

    has_file = any(isinstance(h, logging.FileHandler) for h in logger.handlers)
    if log_file and not has_file:
        add_file_handler(logger, log_file)
    if not any(isinstance(h, logging.FileHandler) for h in logger.handlers):
        logger.setLevel(numeric_level)

    return logger


def set_debug_mode():
    """Enable debug mode for all loggers"""
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(logging.DEBUG)
    for handler in logger.handlers:
        if isinstance(handler, logging.StreamHandler):
            handler.setLevel(logging.DEBUG)


# Initialize default logger
default_logger = setup_logger()
