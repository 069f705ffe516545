"""
Completeness and consistency checks on parsed calibration values.
"""

import logging
from typing import List

from arsandbox.core.constants import ERROR_MISSING_VALUE
from arsandbox.core.exceptions import IncompleteCalibrationError
from .output_parser import CalibrationValues, CornerSlot

logger = logging.getLogger(__name__)

PLANE_LABEL = "plane equation"


def find_missing(values: CalibrationValues) -> List[str]:
    """Labels of the values that were never observed, in box-layout order."""
    missing = []
    if values.plane is None:
        missing.append(PLANE_LABEL)
    for slot in CornerSlot:
        if values.corner(slot) is None:
            missing.append(slot.label)
    return missing


def validate_calibration(values: CalibrationValues) -> None:
    """
    Report every missing value and fail if there is at least one.

    Raises:
        IncompleteCalibrationError: If any of the five values is missing
    """
    missing = find_missing(values)
    for label in missing:
        logger.error(ERROR_MISSING_VALUE.format(label))

    if missing:
        raise IncompleteCalibrationError(missing)


def check_corners_near_plane(values: CalibrationValues, tolerance: float) -> List[CornerSlot]:
    """
    Warn about corners that lie far from the measured base plane.

    Corners are measured on the sand surface, so a large distance usually
    means a point was picked on the box wall or the floor. This never fails
    the run.

    Returns:
        Slots whose corner is farther than ``tolerance`` from the plane
    """
    far = []
    for slot in CornerSlot:
        corner = values.corner(slot)
        distance = values.plane.distance_to(corner.as_vector())
        if distance > tolerance:
            logger.warning(f"The {slot.label} is {distance:.2f} units from the base plane; "
                           f"check the measurement")
            far.append(slot)
        else:
            logger.debug(f"{slot.label} distance from base plane: {distance:.3f}")
    return far
