"""Configuration settings for the score grader."""

import os
import logging
from typing import Final

# Debug flag: 1 = debug mode (verbose logging to stderr), 0 = production mode
DEBUG: Final[int] = int(os.environ.get("GRADER_DEBUG", "0"))

# --- Console Settings ---

# Text shown before reading the score; no newline is written after it
PROMPT_TEXT: Final[str] = os.environ.get("GRADER_PROMPT", "请输入成绩：")

# --- File Paths ---
LOG_FILE: Final[str] = os.environ.get("GRADER_LOG_FILE", os.path.join("logs", "grader_app.log"))

# --- Logging Configuration ---
# LOG_LEVEL is used for file logging, console logging is only enabled in DEBUG mode
LOG_LEVEL = logging.DEBUG if DEBUG else logging.INFO
# Structured log format: timestamp, level, logger, module.function:line, message
LOG_FORMAT = '%(asctime)s | %(levelname)s | %(name)s | %(module)s.%(funcName)s:%(lineno)d | %(message)s'
