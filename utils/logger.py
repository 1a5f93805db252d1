"""
Logging utilities for the drawing application.
"""
import logging
import sys
from typing import Optional
from config import LOG_LEVEL, LOG_FILE

APP_LOGGER_NAME = "drawing_app"

_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logger(name: str = APP_LOGGER_NAME, level: str = None,
                 log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the application root logger and return it.

    Handlers are attached only once, so calling this again (from the CLI
    and the web entrypoint, for example) just adjusts the level.

    Args:
        name: Logger name (default: application root)
        level: Level name such as "DEBUG" (default from config)
        log_file: Path of the log file; "" disables file logging (default from config)
    """
    level = level or LOG_LEVEL
    log_level = getattr(logging, level.upper(), logging.INFO)
    log_file = LOG_FILE if log_file is None else log_file

    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(_FORMAT, datefmt='%H:%M:%S'))
    logger.addHandler(console_handler)

    # File handler
    if log_file:
        try:
            file_handler = logging.FileHandler(log_file)
        except OSError as e:
            logger.warning(f"Could not set up file logging: {e}")
        else:
            file_handler.setFormatter(logging.Formatter(_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
            logger.addHandler(file_handler)

    return logger


def get_logger(name: str = APP_LOGGER_NAME) -> logging.Logger:
    """Get a logger that lives under the application root logger."""
    if name == APP_LOGGER_NAME or name.startswith(APP_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{APP_LOGGER_NAME}.{name}")
