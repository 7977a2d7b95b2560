# json_ez/infrastructure/logging/_setup.py

"""Logging configuration for applications embedding json_ez"""

# Standard library imports
from logging import DEBUG
from logging import FileHandler
from logging import Formatter
from logging import INFO
from logging import StreamHandler
from logging import getLevelName
from logging import getLogger
from os import makedirs
from os.path import dirname
from os.path import exists

# Local imports
from json_ez.infrastructure.config import get_config


def set_up_logging(
    log_file: str | None = None,
    log_level: str = "INFO",
    silent: bool = False,
) -> str | None:
    """Configure logging for the application

    The library itself only logs through module loggers; call this from the
    application edge to see those messages.

    Args:
        log_file: Path to log file, falls back to the configured ``logging.log_file``
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR), forced to DEBUG
            when ``logging.debug`` is set in the configuration
        silent: If True, suppress console output

    Returns:
        Path to log file if file logging is enabled, None otherwise
    """
    config = get_config()
    if config.debug:
        log_level = "DEBUG"
    if log_file is None:
        log_file = config.log_file

    # Convert log level string to logging constant
    level = getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = INFO

    # Configure root logger
    root_logger = getLogger()
    root_logger.setLevel(level)

    # Clear any existing handlers
    root_logger.handlers = []

    console_formatter = Formatter("%(asctime)s - %(levelname)s - %(message)s")
    file_formatter = Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    # Add console handler unless silent
    if not silent:
        console_handler = StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(console_formatter)
        root_logger.addHandler(console_handler)

    if log_file is None:
        return None

    log_dir = dirname(log_file)
    if log_dir and not exists(log_dir):
        makedirs(log_dir)

    file_handler = FileHandler(log_file)
    file_handler.setLevel(DEBUG)  # Always log debug to file
    file_handler.setFormatter(file_formatter)
    root_logger.addHandler(file_handler)

    logger = getLogger(__name__)
    logger.info(f"Logging to file: {log_file}")

    return log_file
