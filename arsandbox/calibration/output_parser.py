"""
Parse calibration values out of the viewer's text output.

Two line shapes matter. The plane marker line::

    Camera-space plane equation: x * (0.0076185, 0.0271708, 0.999602) = -98.0295

and a measured point, a line holding nothing but one coordinate triple::

    (-48.2164, -36.7041, -100.138)

Points are sorted into the four box corners by the sign pattern of their
coordinates. Only four of the eight octants map to a corner; points in the
others are dropped. Every other line is ignored.
"""

import logging
import re
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Iterable, List, Optional, Tuple, Union

import numpy as np

logger = logging.getLogger(__name__)

_NUMBER = r'[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?'

PLANE_EQUATION_PATTERN = re.compile(
    r'^\s*Camera-space plane equation:\s*x\s*\*\s*'
    r'\(\s*(' + _NUMBER + r')\s*,\s*(' + _NUMBER + r')\s*,\s*(' + _NUMBER + r')\s*\)'
    r'\s*=\s*(' + _NUMBER + r')\s*$'
)

CORNER_PATTERN = re.compile(
    r'^\s*\(\s*(' + _NUMBER + r')\s*,\s*(' + _NUMBER + r')\s*,\s*(' + _NUMBER + r')\s*\)\s*$'
)


class CornerSlot(Enum):
    """Box corners, keyed by the sign signature of their coordinates."""
    LOWER_LEFT = "---"
    LOWER_RIGHT = " --"
    UPPER_LEFT = "- -"
    UPPER_RIGHT = "  -"

    @property
    def label(self) -> str:
        return self.name.lower().replace('_', '-') + " corner"

    @classmethod
    def from_signature(cls, signature: str) -> Optional['CornerSlot']:
        for slot in cls:
            if slot.value == signature:
                return slot
        return None


@dataclass(frozen=True)
class PlaneEquation:
    """Base plane of the sand surface, offset lowered by the sand depth."""
    normal: Tuple[str, str, str]
    base_offset: Decimal
    sand_offset: Decimal

    @property
    def offset(self) -> Decimal:
        return self.base_offset - self.sand_offset

    def as_vector(self) -> np.ndarray:
        return np.array([float(c) for c in self.normal], dtype=np.float64)

    def distance_to(self, point: np.ndarray) -> float:
        """Distance of a point from the measured (unadjusted) base plane."""
        normal = self.as_vector()
        norm = np.linalg.norm(normal)
        if norm == 0:
            return float('inf')
        return float(abs(np.dot(normal, point) - float(self.base_offset)) / norm)

    def layout_line(self) -> str:
        return f"({', '.join(self.normal)}), {self.offset}"


@dataclass(frozen=True)
class Corner:
    """A measured point, kept as the text the viewer printed."""
    components: Tuple[str, str, str]
    text: str

    @property
    def signature(self) -> str:
        return ''.join('-' if c.startswith('-') else ' ' for c in self.components)

    def as_vector(self) -> np.ndarray:
        return np.array([float(c) for c in self.components], dtype=np.float64)


@dataclass
class CalibrationValues:
    """The five values gathered from one viewer run; None until observed."""
    plane: Optional[PlaneEquation] = None
    lower_left: Optional[Corner] = None
    lower_right: Optional[Corner] = None
    upper_left: Optional[Corner] = None
    upper_right: Optional[Corner] = None
    dropped_corners: List[Corner] = field(default_factory=list)

    def corner(self, slot: CornerSlot) -> Optional[Corner]:
        return getattr(self, slot.name.lower())

    def set_corner(self, slot: CornerSlot, corner: Corner) -> None:
        setattr(self, slot.name.lower(), corner)

    def layout_lines(self) -> List[str]:
        """
        Box-layout lines in file order: plane, then LL, LR, UL, UR.

        Only valid once every value has been observed.
        """
        corners = [self.corner(slot) for slot in CornerSlot]
        if self.plane is None or any(c is None for c in corners):
            raise ValueError("Cannot render an incomplete calibration")
        return [self.plane.layout_line()] + [c.text for c in corners]


def match_plane_equation(line: str, sand_offset: Decimal) -> Optional[PlaneEquation]:
    """Return the plane equation on this line, or None if it is not the marker line."""
    match = PLANE_EQUATION_PATTERN.match(line)
    if match is None:
        return None
    nx, ny, nz, offset = match.groups()
    return PlaneEquation(normal=(nx, ny, nz), base_offset=Decimal(offset),
                         sand_offset=Decimal(str(sand_offset)))


def match_corner(line: str) -> Optional[Corner]:
    """Return the point on this line, or None if the line is not a lone triple."""
    match = CORNER_PATTERN.match(line)
    if match is None:
        return None
    return Corner(components=match.groups(), text=line.strip())


def parse_calibration_output(output: Union[str, Iterable[str]],
                             sand_offset: Decimal) -> CalibrationValues:
    """
    Scan viewer output line by line and collect the calibration values.

    A later match for the same value replaces the earlier one.

    Args:
        output: Captured text, or an iterable of its lines
        sand_offset: Depth of sand subtracted from the plane offset

    Returns:
        CalibrationValues with whatever was found
    """
    lines = output.splitlines() if isinstance(output, str) else output
    values = CalibrationValues()

    for line in lines:
        plane = match_plane_equation(line, sand_offset)
        if plane is not None:
            if values.plane is not None:
                logger.debug("Replacing earlier plane equation")
            values.plane = plane
            logger.info(f"Plane equation: {plane.layout_line()}")
            continue

        corner = match_corner(line)
        if corner is None:
            continue

        slot = CornerSlot.from_signature(corner.signature)
        if slot is None:
            logger.debug(f"Ignoring point outside the box corner octants: {corner.text}")
            values.dropped_corners.append(corner)
            continue

        if values.corner(slot) is not None:
            logger.debug(f"Replacing earlier {slot.label}")
        values.set_corner(slot, corner)
        logger.info(f"{slot.label.capitalize()}: {corner.text}")

    return values
