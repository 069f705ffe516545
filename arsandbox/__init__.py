"""
AR sandbox calibration tool.

Reads the base-plane equation and box corners measured with the depth-camera
viewer and writes them into the sandbox renderer's box-layout file.

Quick start:
    sandbox-calibrate            # run the viewer and update BoxLayout.txt
    sandbox-calibrate --dry-run  # only print the new layout
"""

# Version comes from the installed package metadata
try:
    import importlib.metadata
    __version__ = importlib.metadata.version("arsandbox-calibrate")
except (ImportError, importlib.metadata.PackageNotFoundError):
    # Fallback for development checkouts
    __version__ = "1.0.0"

from .core.exceptions import SandboxCalibrationError
from .calibration import (
    CalibrationConfig, CalibrationValues, PlaneEquation, Corner, CornerSlot,
    parse_calibration_output, validate_calibration, persist_calibration
)

__all__ = [
    'SandboxCalibrationError',
    'CalibrationConfig', 'CalibrationValues', 'PlaneEquation', 'Corner', 'CornerSlot',
    'parse_calibration_output', 'validate_calibration', 'persist_calibration',
]
