"""
Run the viewer program and capture what it prints.
"""

import logging
import subprocess
from pathlib import Path

from arsandbox.core.exceptions import ViewerExecutionError

logger = logging.getLogger(__name__)


def run_viewer(viewer: str) -> str:
    """
    Launch the viewer with no arguments and wait for it to exit.

    The user measures the plane and the corners interactively and then closes
    the viewer; there is no timeout. Standard error is not captured so the
    viewer's own diagnostics stay visible on the terminal.

    Args:
        viewer: Path to the viewer executable

    Returns:
        Everything the viewer wrote to standard output

    Raises:
        ViewerExecutionError: If the program cannot be started
    """
    logger.info(f"Starting {viewer}; measure the base plane and the four box corners, then close it")

    try:
        result = subprocess.run(
            [viewer],
            stdout=subprocess.PIPE,
            text=True,
            errors='replace'
        )
    except OSError as e:
        raise ViewerExecutionError(viewer, str(e)) from e

    if result.returncode != 0:
        logger.warning(f"Viewer exited with status {result.returncode}; parsing its output anyway")

    output = result.stdout or ""
    logger.debug(f"Captured {len(output.splitlines())} lines of viewer output")
    return output


def read_transcript(path: str) -> str:
    """
    Read a previously saved viewer transcript.

    Raises:
        ViewerExecutionError: If the transcript cannot be read
    """
    try:
        text = Path(path).read_text(errors='replace')
    except OSError as e:
        raise ViewerExecutionError(path, f"cannot read transcript: {e}") from e

    logger.info(f"Replaying viewer transcript: {path}")
    return text
