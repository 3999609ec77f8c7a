"""Logging configuration for galaxy_dynamics."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "galaxy_dynamics"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Union[str, int] = "INFO", log_file: Optional[Union[str, Path]] = None) -> logging.Logger:
    """Configure the package logger.

    Attaches a console handler and, if log_file is given, a rotating file
    handler. The package logger does not propagate to the root logger.
    Calling this again replaces previously attached handlers.

    Args:
        level: Log level name or number
        log_file: Optional path of a log file

    Returns:
        The configured "galaxy_dynamics" logger
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10485760,  # 10MB
            backupCount=5,
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
