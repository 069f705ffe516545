"""
Box-layout calibration pipeline: resolve, run viewer, parse, validate, write.
"""

from .calibration_config import CalibrationConfig, parse_sand_offset
from .dependency_resolver import (
    ResolvedDependencies, resolve_box_layout, resolve_viewer, resolve_dependencies
)
from .viewer_runner import run_viewer, read_transcript
from .output_parser import (
    CornerSlot, PlaneEquation, Corner, CalibrationValues,
    match_plane_equation, match_corner, parse_calibration_output
)
from .validator import find_missing, validate_calibration, check_corners_near_plane
from .box_layout_writer import (
    backup_box_layout, write_box_layout, emit_box_layout, persist_calibration
)

__all__ = [
    'CalibrationConfig', 'parse_sand_offset',
    'ResolvedDependencies', 'resolve_box_layout', 'resolve_viewer', 'resolve_dependencies',
    'run_viewer', 'read_transcript',
    'CornerSlot', 'PlaneEquation', 'Corner', 'CalibrationValues',
    'match_plane_equation', 'match_corner', 'parse_calibration_output',
    'find_missing', 'validate_calibration', 'check_corners_near_plane',
    'backup_box_layout', 'write_box_layout', 'emit_box_layout', 'persist_calibration',
]
