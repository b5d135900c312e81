"""Application logger, configured once from config."""

import logging
import sys
import os
from typing import Optional

from score_grader import config

LOGGER_NAME = "ScoreGrader"

_logger: Optional[logging.Logger] = None

def _file_handler(formatter: logging.Formatter) -> logging.Handler:
    log_dir = os.path.dirname(config.LOG_FILE)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
    handler = logging.FileHandler(config.LOG_FILE, mode='a', encoding='utf-8')
    handler.setFormatter(formatter)
    return handler

def setup_logger() -> logging.Logger:
    """Configures the ScoreGrader logger on first call and returns it.

    Records go to config.LOG_FILE. In DEBUG mode they are echoed to stderr
    as well; stdout belongs to the prompt and the grade. A log file that
    cannot be opened is reported and the logger runs without it.
    """
    global _logger
    if _logger:
        return _logger

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config.LOG_LEVEL)
    formatter = logging.Formatter(config.LOG_FORMAT)

    if config.DEBUG:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setFormatter(formatter)
        logger.addHandler(stderr_handler)

    try:
        logger.addHandler(_file_handler(formatter))
    except OSError as e:
        logger.error(f"Cannot log to {config.LOG_FILE}: {e}", exc_info=config.DEBUG)

    _logger = logger
    logger.debug("Logger initialized in DEBUG mode.")
    return logger

def get_logger() -> logging.Logger:
    """Returns the application logger, setting it up if necessary."""
    return _logger or setup_logger()
