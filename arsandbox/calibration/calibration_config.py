"""
Run configuration for a calibration pass.

Settings come from the environment first and can then be overridden by
command-line options. Explicit paths are optional; when absent the
dependency resolver discovers them.
"""

import logging
import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Mapping, Optional

from arsandbox.core.constants import (
    ENV_BOX_LAYOUT, ENV_VIEWER, ENV_SAND_OFFSET, ENV_DRY_RUN,
    DEFAULT_BOX_LAYOUT_GLOB, DEFAULT_VIEWER_PROGRAM, DEFAULT_SAND_OFFSET,
    DEFAULT_PLANE_TOLERANCE
)
from arsandbox.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def parse_sand_offset(value) -> Decimal:
    """Convert a sand offset given as text or number into a finite Decimal."""
    try:
        offset = Decimal(str(value).strip())
    except InvalidOperation:
        raise ConfigurationError("sand offset", f"'{value}' is not a number")
    if not offset.is_finite():
        raise ConfigurationError("sand offset", f"'{value}' is not a finite number")
    return offset


@dataclass
class CalibrationConfig:
    """Configuration for one calibration run."""
    box_layout: Optional[str] = None  # explicit box-layout path
    viewer: Optional[str] = None  # explicit viewer executable
    sand_offset: Decimal = Decimal(DEFAULT_SAND_OFFSET)
    dry_run: bool = False
    box_layout_glob: str = DEFAULT_BOX_LAYOUT_GLOB
    viewer_program: str = DEFAULT_VIEWER_PROGRAM
    plane_tolerance: float = DEFAULT_PLANE_TOLERANCE
    from_log: Optional[str] = None  # replay a saved viewer transcript

    @classmethod
    def from_environment(cls, environ: Optional[Mapping[str, str]] = None) -> 'CalibrationConfig':
        """
        Build a configuration from environment variables.

        Args:
            environ: Mapping to read from, defaults to ``os.environ``

        Returns:
            Configuration with environment overrides applied
        """
        if environ is None:
            environ = os.environ

        config = cls()
        config.box_layout = environ.get(ENV_BOX_LAYOUT) or None
        config.viewer = environ.get(ENV_VIEWER) or None

        sand_offset = environ.get(ENV_SAND_OFFSET)
        if sand_offset:
            config.sand_offset = parse_sand_offset(sand_offset)

        # Presence-only flag: any non-empty value enables dry-run
        config.dry_run = bool(environ.get(ENV_DRY_RUN))

        logger.debug(f"Configuration from environment: {config}")
        return config

    def apply_arguments(self, args) -> 'CalibrationConfig':
        """
        Layer parsed command-line options over this configuration.

        Args:
            args: ``argparse.Namespace`` from the calibrate command

        Returns:
            Self for method chaining
        """
        if getattr(args, 'box_layout', None):
            self.box_layout = args.box_layout
        if getattr(args, 'viewer', None):
            self.viewer = args.viewer
        if getattr(args, 'sand_offset', None) is not None:
            self.sand_offset = parse_sand_offset(args.sand_offset)
        if getattr(args, 'dry_run', False):
            self.dry_run = True
        if getattr(args, 'from_log', None):
            self.from_log = args.from_log
        return self
