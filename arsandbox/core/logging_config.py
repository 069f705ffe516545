"""
Standardized logging configuration for the calibration tool.

Console output is the user-facing channel: progress, missing values and
failures all go through it. A rotating log file can be added for support.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from arsandbox.core.constants import LOG_FORMAT, MAX_LOG_FILE_SIZE


class SandboxLogger:
    """Standardized logger configuration for the calibration tool."""

    LEVELS = {
        'DEBUG': logging.DEBUG,
        'INFO': logging.INFO,
        'WARNING': logging.WARNING,
        'ERROR': logging.ERROR,
        'CRITICAL': logging.CRITICAL
    }

    @classmethod
    def setup_logging(cls, level: str = 'INFO', log_file: Optional[str] = None) -> None:
        """
        Setup standardized logging configuration.

        Args:
            level: Console logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_file: Optional log file path, which receives every record
        """
        numeric_level = cls.LEVELS.get(level.upper(), logging.INFO)

        root_logger = logging.getLogger()
        root_logger.setLevel(logging.DEBUG)  # Capture all, filter at handler level
        root_logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(logging.Formatter('%(levelname)s - %(message)s'))
        root_logger.addHandler(console_handler)

        if log_file:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)

            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=MAX_LOG_FILE_SIZE,
                backupCount=3
            )
            file_handler.setLevel(logging.DEBUG)  # File gets everything
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
            root_logger.addHandler(file_handler)


def setup_logging(**kwargs) -> None:
    """Setup logging with default configuration."""
    SandboxLogger.setup_logging(**kwargs)
