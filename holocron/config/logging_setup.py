"""
Apply a LoggingConfig to the ``holocron`` logger hierarchy.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .config_manager import LoggingConfig, get_config

PACKAGE_LOGGER = "holocron"


def configure_logging(logging_config: Optional[LoggingConfig] = None) -> logging.Logger:
    """
    Configure handlers and level for the package logger.

    Handlers installed by a previous call are removed first, so calling this
    again after a configuration reload does not duplicate output.

    Args:
        logging_config: Settings to apply (uses the global configuration if None)

    Returns:
        The configured package logger
    """
    if logging_config is None:
        logging_config = get_config().config.logging

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, logging_config.level.value))

    # Remove existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        if getattr(handler, "_holocron_handler", False):
            logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(logging_config.format)

    if logging_config.enable_console:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        console_handler._holocron_handler = True
        logger.addHandler(console_handler)

    if logging_config.file_path:
        log_file = Path(logging_config.file_path)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=logging_config.max_file_size,
            backupCount=logging_config.backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        file_handler._holocron_handler = True
        logger.addHandler(file_handler)

    return logger
