"""
Logging Configuration
Sets up the package logger for classification_list.
"""
import logging
import sys
from typing import Optional, Union


PACKAGE_LOGGER_NAME = "classification_list"


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger for the 'classification_list' namespace.

    Library modules only create child loggers; nothing is emitted until the
    host program calls this (or configures logging itself).

    Args:
        level: Logging level (e.g. logging.DEBUG or "DEBUG")
        log_file: Optional path to save logs to a file.

    Returns:
        The configured package logger.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown logging level: {level!r}")
        level = resolved

    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.setLevel(level)

    # Avoid duplicate handlers when called more than once
    if logger.hasHandlers():
        logger.handlers.clear()

    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger


def configure_logging(settings) -> Optional[logging.Logger]:
    """
    Apply a LoggingConfig to the package logger.

    Nothing is touched when neither a level nor a log file is configured,
    so host programs keep control of logging by default.

    Args:
        settings: Object with `level` and `log_file` attributes (LoggingConfig)

    Returns:
        The configured package logger, or None if nothing was configured.
    """
    if not settings.level and not settings.log_file:
        return None
    return setup_logging(settings.level or "WARNING", settings.log_file)
