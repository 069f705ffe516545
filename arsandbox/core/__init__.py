"""
Core definitions for the calibration tool: constants, exceptions and logging.
"""

from .constants import (
    ENV_BOX_LAYOUT, ENV_VIEWER, ENV_SAND_OFFSET, ENV_DRY_RUN,
    DEFAULT_BOX_LAYOUT_GLOB, DEFAULT_VIEWER_PROGRAM, DEFAULT_SAND_OFFSET,
    BACKUP_SUFFIX
)

from .exceptions import (
    SandboxCalibrationError, DependencyNotFoundError, ViewerExecutionError,
    IncompleteCalibrationError, BoxLayoutWriteError, ConfigurationError
)
from .logging_config import setup_logging

__all__ = [
    # Constants
    'ENV_BOX_LAYOUT', 'ENV_VIEWER', 'ENV_SAND_OFFSET', 'ENV_DRY_RUN',
    'DEFAULT_BOX_LAYOUT_GLOB', 'DEFAULT_VIEWER_PROGRAM', 'DEFAULT_SAND_OFFSET',
    'BACKUP_SUFFIX',

    # Exceptions
    'SandboxCalibrationError', 'DependencyNotFoundError', 'ViewerExecutionError',
    'IncompleteCalibrationError', 'BoxLayoutWriteError', 'ConfigurationError',

    # Logging
    'setup_logging'
]
