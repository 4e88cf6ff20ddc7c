"""Working directory containment check run before any removal."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def is_within(path: Path, root: Path) -> bool:
    """Check whether a path lies inside a root directory.

    Both paths are resolved first and compared by path segment, so
    ``/ws2`` is not considered inside ``/ws``.

    Args:
        path: Path to check
        root: Containing directory

    Returns:
        True if path equals root or is beneath it
    """
    return path.resolve().is_relative_to(root.resolve())


def check_containment(current_dir: Path, workspace_root: Path | None, dry_run: bool) -> bool:
    """Decide whether a cleanup run may proceed.

    A missing workspace root disables the check entirely; per-root
    existence checks deal with the absence later.

    Args:
        current_dir: Working directory of the invoking process
        workspace_root: Workspace root, None when unset
        dry_run: Whether the run is a preview

    Returns:
        True if the run is allowed
    """
    if workspace_root is None or not workspace_root.is_dir():
        logger.debug("Workspace root unavailable, containment check not applied")
        return True
    if dry_run:
        return True
    allowed = is_within(current_dir, workspace_root)
    logger.debug("Containment of %s in %s: %s", current_dir, workspace_root, allowed)
    return allowed
