"""
Persist calibration values into the renderer's box-layout file.

The existing file is copied to a ``.bak`` sibling, truncated in place (so it
keeps its owner and permissions) and then the five lines are appended. In
dry-run mode the lines are printed instead and no file is touched.
"""

import logging
import os
import shutil
import sys
from typing import List, Optional, TextIO

from arsandbox.core.constants import BACKUP_SUFFIX, SUCCESS_LAYOUT_WRITTEN
from arsandbox.core.exceptions import BoxLayoutWriteError
from .output_parser import CalibrationValues

logger = logging.getLogger(__name__)


def backup_box_layout(path: str) -> str:
    """
    Copy the box layout to its ``.bak`` sibling.

    Returns:
        Path of the backup file

    Raises:
        BoxLayoutWriteError: If the copy fails
    """
    backup_path = path + BACKUP_SUFFIX
    try:
        shutil.copy2(path, backup_path)
    except OSError as e:
        raise BoxLayoutWriteError("backup", path, str(e)) from e

    logger.info(f"Previous box layout saved to: {backup_path}")
    return backup_path


def write_box_layout(path: str, lines: List[str]) -> None:
    """
    Truncate the box layout in place and append the given lines.

    Raises:
        BoxLayoutWriteError: If truncation or any write fails
    """
    try:
        # Same inode, so owner and mode are kept; needs write access only
        os.truncate(path, 0)
    except OSError as e:
        raise BoxLayoutWriteError("truncate", path, str(e)) from e

    try:
        with open(path, 'a') as f:
            for line in lines:
                f.write(line + '\n')
    except OSError as e:
        raise BoxLayoutWriteError("write", path, str(e)) from e


def emit_box_layout(lines: List[str], stream: Optional[TextIO] = None) -> None:
    """Print the box-layout lines instead of writing them."""
    stream = stream or sys.stdout
    for line in lines:
        print(line, file=stream)


def persist_calibration(path: str, values: CalibrationValues, dry_run: bool = False,
                        stream: Optional[TextIO] = None) -> List[str]:
    """
    Write validated calibration values, or print them in dry-run mode.

    Args:
        path: Box-layout file to overwrite
        values: Complete calibration values
        dry_run: Print to ``stream`` instead of touching any file
        stream: Output for dry-run, defaults to stdout

    Returns:
        The five lines that were written or printed
    """
    lines = values.layout_lines()

    if dry_run:
        logger.info("Dry run: box layout left unchanged, new contents follow")
        emit_box_layout(lines, stream)
        return lines

    backup_box_layout(path)
    write_box_layout(path, lines)
    logger.info(SUCCESS_LAYOUT_WRITTEN.format(path))
    return lines
