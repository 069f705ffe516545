"""
Locate the box-layout file and the viewer executable.

An explicit override always wins. Otherwise the box layout is discovered by
globbing the version-suffixed install directories and taking the
lexicographically last match, and the viewer is searched on ``PATH``.
"""

import glob
import logging
import shutil
from typing import NamedTuple, Optional

from arsandbox.core.constants import (
    ENV_BOX_LAYOUT, ENV_VIEWER, DEFAULT_BOX_LAYOUT_GLOB, DEFAULT_VIEWER_PROGRAM
)
from arsandbox.core.exceptions import DependencyNotFoundError

logger = logging.getLogger(__name__)


class ResolvedDependencies(NamedTuple):
    box_layout: str
    viewer: Optional[str]


def resolve_box_layout(override: Optional[str] = None,
                       search_pattern: str = DEFAULT_BOX_LAYOUT_GLOB) -> str:
    """
    Resolve the box-layout file path.

    Args:
        override: Explicit path, used as-is when given
        search_pattern: Glob pattern over versioned install directories

    Returns:
        Path to the box-layout file

    Raises:
        DependencyNotFoundError: If no override is given and nothing matches
    """
    if override:
        logger.debug(f"Using box layout override: {override}")
        return override

    matches = sorted(glob.glob(search_pattern))
    if not matches:
        raise DependencyNotFoundError(
            "box layout file",
            f"Nothing matches {search_pattern}; set {ENV_BOX_LAYOUT} to its path."
        )

    if len(matches) > 1:
        logger.debug(f"Found {len(matches)} box layouts, using the latest: {matches[-1]}")
    return matches[-1]


def resolve_viewer(override: Optional[str] = None,
                   program: str = DEFAULT_VIEWER_PROGRAM) -> str:
    """
    Resolve the viewer executable.

    Args:
        override: Explicit executable, used as-is when given
        program: Program name searched on PATH

    Returns:
        Path to the viewer executable

    Raises:
        DependencyNotFoundError: If no override is given and PATH has no match
    """
    if override:
        logger.debug(f"Using viewer override: {override}")
        return override

    found = shutil.which(program)
    if found is None:
        raise DependencyNotFoundError(
            f"viewer program '{program}'",
            f"It is not on PATH; set {ENV_VIEWER} to its location."
        )
    return found


def resolve_dependencies(config, need_viewer: bool = True) -> ResolvedDependencies:
    """
    Resolve both dependencies of a calibration run.

    The box layout is resolved first; each failure raises on its own.

    Args:
        config: ``CalibrationConfig`` holding overrides and search settings
        need_viewer: Skip the viewer lookup when replaying a saved transcript

    Returns:
        ResolvedDependencies with the box layout and viewer paths
    """
    box_layout = resolve_box_layout(config.box_layout, config.box_layout_glob)
    logger.info(f"Box layout file: {box_layout}")

    viewer = None
    if need_viewer:
        viewer = resolve_viewer(config.viewer, config.viewer_program)
        logger.info(f"Viewer program: {viewer}")

    return ResolvedDependencies(box_layout=box_layout, viewer=viewer)
