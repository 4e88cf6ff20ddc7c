"""Removal of the immediate children of a target root."""

import logging
import shutil
from collections.abc import Sequence
from pathlib import Path

from actions_clean.models import CleanupOutcome, CleanupStatus, FailedEntry

logger = logging.getLogger(__name__)


def list_entries(path: Path) -> list[Path]:
    """List the immediate children of a directory.

    Listing errors are logged and reported as an empty directory.

    Args:
        path: Directory to list

    Returns:
        Sorted list of child paths, dotfiles included
    """
    try:
        return sorted(path.iterdir())
    except OSError as e:
        logger.debug("Could not list %s: %s", path, e)
        return []


def remove_entry(entry: Path) -> None:
    """Remove a single entry and everything beneath it.

    Symlinks are unlinked, never followed.

    Args:
        entry: Path to remove

    Raises:
        OSError: If the entry could not be removed
    """
    if entry.is_dir() and not entry.is_symlink():
        try:
            shutil.rmtree(entry)
        except FileNotFoundError:
            pass
        return
    entry.unlink(missing_ok=True)


def holds_path(entry: Path, other: Path) -> bool:
    """Check whether removing an entry would also remove another path.

    The entry itself is not resolved, so a symlink only holds its own link.

    Args:
        entry: Immediate child of a target root
        other: Path that must survive

    Returns:
        True if other is the entry or lies beneath it
    """
    anchor = entry.parent.resolve() / entry.name
    return other.resolve().is_relative_to(anchor)


def clean_directory(
    path: Path,
    label: str,
    dry_run: bool,
    protected: Sequence[Path] = (),
) -> CleanupOutcome:
    """Clean the contents of a directory, leaving the directory itself.

    Args:
        path: Target root, need not exist
        label: Name of the root for reporting
        dry_run: If True, only report what would be removed
        protected: Paths that must survive, e.g. another target root nested here

    Returns:
        CleanupOutcome describing what was found and done
    """
    if not path.is_dir():
        logger.debug("%s directory does not exist: %s", label, path)
        return CleanupOutcome(label=label, path=path, status=CleanupStatus.NOT_FOUND, dry_run=dry_run)

    entries: list[Path] = []
    kept: list[Path] = []
    for entry in list_entries(path):
        if any(holds_path(entry, other) for other in protected):
            logger.debug("Keeping %s, it holds a protected path", entry)
            kept.append(entry)
        else:
            entries.append(entry)

    if not entries:
        return CleanupOutcome(
            label=label,
            path=path,
            status=CleanupStatus.ALREADY_CLEAN,
            dry_run=dry_run,
            kept=kept,
        )

    if dry_run:
        return CleanupOutcome(
            label=label,
            path=path,
            status=CleanupStatus.WOULD_REMOVE,
            dry_run=True,
            entries=entries,
            kept=kept,
        )

    removed: list[Path] = []
    failed: list[FailedEntry] = []
    for entry in entries:
        try:
            remove_entry(entry)
        except OSError as e:
            logger.debug("Failed to remove %s: %s", entry, e)
            failed.append(FailedEntry(path=entry, error=str(e)))
        else:
            logger.debug("Removed %s", entry)
            removed.append(entry)

    return CleanupOutcome(
        label=label,
        path=path,
        status=CleanupStatus.PARTIAL_FAILURE if failed else CleanupStatus.REMOVED,
        dry_run=False,
        entries=entries,
        removed=removed,
        failed=failed,
        kept=kept,
    )
