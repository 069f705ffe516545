#!/usr/bin/env python3
"""
Calibrate the AR sandbox box layout.

Runs the depth-camera viewer, picks the base-plane equation and the four box
corners out of what it prints, and writes them into the renderer's
BoxLayout.txt (keeping a .bak copy of the previous contents).

Environment overrides: SANDBOX_BOX_LAYOUT, SANDBOX_VIEWER,
SANDBOX_SAND_OFFSET (default 8.7) and SANDBOX_DRY_RUN.
"""

import argparse
import logging
import sys
from typing import List, Mapping, Optional

from arsandbox.core.constants import (
    EXIT_OK, EXIT_DEPENDENCY, EXIT_VIEWER, EXIT_INCOMPLETE, EXIT_WRITE,
    EXIT_CONFIG, EXIT_INTERRUPTED, PAUSE_PROMPT
)
from arsandbox.core.exceptions import (
    SandboxCalibrationError, DependencyNotFoundError, ViewerExecutionError,
    IncompleteCalibrationError, BoxLayoutWriteError, ConfigurationError
)
from arsandbox.core.logging_config import setup_logging
from arsandbox.calibration import (
    CalibrationConfig, CalibrationValues, resolve_dependencies, run_viewer,
    read_transcript, parse_calibration_output, validate_calibration,
    check_corners_near_plane, persist_calibration
)

logger = logging.getLogger("arsandbox.calibrate")

EXIT_CODES = {
    DependencyNotFoundError: EXIT_DEPENDENCY,
    ViewerExecutionError: EXIT_VIEWER,
    IncompleteCalibrationError: EXIT_INCOMPLETE,
    BoxLayoutWriteError: EXIT_WRITE,
    ConfigurationError: EXIT_CONFIG,
}


def exit_code_for(error: SandboxCalibrationError) -> int:
    for error_type, code in EXIT_CODES.items():
        if isinstance(error, error_type):
            return code
    return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Calibrate the AR sandbox box layout from the depth-camera viewer")
    parser.add_argument("--box-layout", help="Path to BoxLayout.txt (overrides discovery)")
    parser.add_argument("--viewer", help="Viewer executable (overrides PATH lookup)")
    parser.add_argument("--sand-offset", help="Sand depth subtracted from the plane offset")
    parser.add_argument("--dry-run", action="store_true",
                        help="Print the new box layout instead of writing it")
    parser.add_argument("--from-log", metavar="FILE",
                        help="Parse a saved viewer transcript instead of running the viewer")
    parser.add_argument("--no-pause", action="store_true",
                        help="Do not wait for Enter before exiting")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Console logging level")
    parser.add_argument("--log-file", help="Also log to this file")
    return parser


def pause(enabled: bool = True) -> None:
    """Wait for Enter so a double-clicked terminal stays open."""
    if not enabled:
        return
    if not sys.stdin or not sys.stdin.isatty():
        return
    try:
        input(PAUSE_PROMPT)
    except EOFError:
        pass


def calibrate(config: CalibrationConfig) -> CalibrationValues:
    """
    Run one calibration pass.

    Raises:
        SandboxCalibrationError: On any failure; nothing is written then
    """
    dependencies = resolve_dependencies(config, need_viewer=config.from_log is None)

    if config.from_log:
        output = read_transcript(config.from_log)
    else:
        output = run_viewer(dependencies.viewer)

    values = parse_calibration_output(output, config.sand_offset)
    validate_calibration(values)
    check_corners_near_plane(values, config.plane_tolerance)

    persist_calibration(dependencies.box_layout, values, dry_run=config.dry_run)
    return values


def main(argv: Optional[List[str]] = None, environ: Optional[Mapping[str, str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level, log_file=args.log_file)

    try:
        config = CalibrationConfig.from_environment(environ).apply_arguments(args)
        if config.dry_run:
            logger.info("Dry run enabled; no files will be modified")
        calibrate(config)
    except SandboxCalibrationError as e:
        logger.error(e.message)
        pause(not args.no_pause)
        return exit_code_for(e)
    except KeyboardInterrupt:
        logger.warning("Calibration interrupted")
        return EXIT_INTERRUPTED

    logger.info("Calibration complete")
    pause(not args.no_pause)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
