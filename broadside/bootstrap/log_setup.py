"""
bootstrap/log_setup.py - Logging setup

Configures root handlers for applications embedding broadside. Library
modules only create loggers; they never attach handlers.
"""

import json
import logging
import sys
from typing import Optional

from broadside.bootstrap.config import LoggingConfig


class JSONFormatter(logging.Formatter):
    """One JSON object per log record."""

    def format(self, record):
        return json.dumps({
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        })


def setup_logging(config: Optional[LoggingConfig] = None) -> logging.Logger:
    """
    Configure application logging.

    Args:
        config: Logging settings; environment defaults when omitted

    Returns:
        The configured root logger
    """
    config = config or LoggingConfig.from_env()
    log_level = getattr(logging, config.level.upper(), logging.INFO)

    if config.json_logs:
        formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(config.format)

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)

    # Root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.addHandler(console_handler)

    # File handler
    if config.log_file:
        file_handler = logging.FileHandler(config.log_file)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(log_level)
        root_logger.addHandler(file_handler)

    return root_logger
