"""
Custom exceptions for the sandbox calibration tool.

Every failure of a calibration run is fatal. Each exception carries a
human-readable message naming the item that failed plus optional details,
and maps to a process exit code in ``arsandbox.calibrate``.
"""

from typing import Optional, Any, List


class SandboxCalibrationError(Exception):
    """Base exception for all calibration errors."""

    def __init__(self, message: str, details: Optional[Any] = None):
        """
        Initialize calibration exception.

        Args:
            message: Error message
            details: Optional additional details
        """
        super().__init__(message)
        self.message = message
        self.details = details


class DependencyNotFoundError(SandboxCalibrationError):
    """Raised when the box-layout file or the viewer cannot be located."""

    def __init__(self, dependency: str, hint: str):
        message = f"Could not find {dependency}. {hint}"
        super().__init__(message, details={'dependency': dependency, 'hint': hint})


class ViewerExecutionError(SandboxCalibrationError):
    """Raised when the viewer program cannot be launched."""

    def __init__(self, viewer: str, reason: str):
        message = f"Failed to run viewer '{viewer}': {reason}"
        super().__init__(message, details={'viewer': viewer, 'reason': reason})


class IncompleteCalibrationError(SandboxCalibrationError):
    """Raised when one or more calibration values were not observed."""

    def __init__(self, missing: List[str]):
        message = (f"Calibration incomplete: {len(missing)} value(s) missing "
                   f"({', '.join(missing)})")
        super().__init__(message, details={'missing': list(missing)})
        self.missing = list(missing)


class BoxLayoutWriteError(SandboxCalibrationError):
    """Raised when backing up, truncating or writing the box layout fails."""

    def __init__(self, stage: str, path: str, reason: str):
        message = f"Box layout {stage} failed for '{path}': {reason}"
        super().__init__(message, details={'stage': stage, 'path': path, 'reason': reason})
        self.stage = stage


class ConfigurationError(SandboxCalibrationError):
    """Raised when a setting from the environment or command line is invalid."""

    def __init__(self, setting: str, reason: str):
        message = f"Invalid {setting} setting: {reason}"
        super().__init__(message, details={'setting': setting, 'reason': reason})
