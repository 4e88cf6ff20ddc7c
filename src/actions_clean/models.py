"""Top-level models for actions-clean."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class CleanupStatus(str, Enum):
    """Result of processing a single target root."""

    SKIPPED = "skipped"
    NOT_FOUND = "not_found"
    ALREADY_CLEAN = "already_clean"
    WOULD_REMOVE = "would_remove"
    REMOVED = "removed"
    PARTIAL_FAILURE = "partial_failure"


class TargetRoot(BaseModel):
    """A directory whose contents may be cleaned."""

    model_config = {"frozen": True}

    label: str = Field(description="Human-readable name, e.g. 'home' or 'workspace'")
    path: Path | None = Field(default=None, description="Absolute directory path, None when unset")
    enabled: bool = Field(default=True, description="Whether this root should be processed")

    @property
    def display_name(self) -> str:
        """Get the label used in status lines.

        Returns:
            Environment variable style name for the root
        """
        return {
            "home": "HOME",
            "workspace": "GITHUB_WORKSPACE",
        }.get(self.label, self.label.upper())


class FailedEntry(BaseModel):
    """An entry that could not be removed."""

    path: Path
    error: str


class CleanupOutcome(BaseModel):
    """Outcome of cleaning one target root."""

    label: str = Field(description="Label of the target root")
    path: Path | None = Field(default=None, description="Target root path")
    status: CleanupStatus
    dry_run: bool = False
    entries: list[Path] = Field(default_factory=list, description="Immediate children found")
    removed: list[Path] = Field(default_factory=list, description="Children actually removed")
    failed: list[FailedEntry] = Field(default_factory=list, description="Children that could not be removed")
    kept: list[Path] = Field(default_factory=list, description="Children left in place because they hold another root")

    @property
    def has_failures(self) -> bool:
        """Check if any entry failed to be removed.

        Returns:
            True if at least one removal failed
        """
        return len(self.failed) > 0

    @property
    def changed_disk(self) -> bool:
        """Check if this outcome mutated the filesystem.

        Returns:
            True if at least one entry was removed
        """
        return len(self.removed) > 0


class CleanupReport(BaseModel):
    """Summary of a full cleanup run."""

    dry_run: bool
    vetoed: bool = False
    current_dir: Path | None = None
    outcomes: list[CleanupOutcome] = Field(default_factory=list)

    @property
    def failure_count(self) -> int:
        """Count entries that failed to be removed across all roots.

        Returns:
            Total number of failed entries
        """
        return sum(len(outcome.failed) for outcome in self.outcomes)

    @property
    def has_failures(self) -> bool:
        """Check if any root reported a failed removal.

        Returns:
            True if any removal failed
        """
        return self.failure_count > 0

    def outcome_for(self, label: str) -> CleanupOutcome | None:
        """Find the outcome for a target root.

        Args:
            label: Target root label

        Returns:
            The matching outcome, or None if the root was not processed
        """
        for outcome in self.outcomes:
            if outcome.label == label:
                return outcome
        return None
