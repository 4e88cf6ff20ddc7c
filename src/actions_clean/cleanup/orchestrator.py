"""Cleanup run orchestration."""

import logging
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from actions_clean.cleanup.executor import clean_directory
from actions_clean.cleanup.safety import check_containment
from actions_clean.config import CleanupConfig
from actions_clean.models import CleanupOutcome, CleanupReport, CleanupStatus, TargetRoot

logger = logging.getLogger(__name__)

VETOED_MESSAGE = "WARNING: Not executing from within GITHUB_WORKSPACE, skipping cleanup for security"


class CleanupOrchestrator:
    """Orchestrates a cleanup run.

    Coordinates:
    - Safety gate on the working directory
    - Cleanup of each enabled target root
    - Status reporting
    """

    def __init__(self, config: CleanupConfig, console: Console | None = None) -> None:
        """Initialize the cleanup orchestrator.

        Args:
            config: Run configuration
            console: Rich console for output (creates new if None)
        """
        self.config = config
        self.console = console or Console()

    def run(self, current_dir: Path) -> CleanupReport:
        """Run the cleanup.

        Workflow:
        1. Check the working directory lies inside the workspace
        2. Clean each enabled target root independently
        3. Print a summary line

        Args:
            current_dir: Working directory of the invoking process

        Returns:
            CleanupReport with one outcome per target root
        """
        dry_run = self.config.dry_run
        report = CleanupReport(dry_run=dry_run, current_dir=current_dir)

        if not check_containment(current_dir, self.config.workspace, dry_run):
            self.console.print(f"[yellow]{VETOED_MESSAGE}[/yellow]", soft_wrap=True)
            report.vetoed = True
            return report

        roots = self.config.target_roots()
        for root in roots:
            protected = [other.path for other in roots if other is not root and other.path is not None]
            outcome = self._process_root(root, dry_run, protected)
            logger.debug("Cleanup outcome: %s", outcome.model_dump_json())
            report.outcomes.append(outcome)

        self._print_summary(report)
        return report

    def _process_root(self, root: TargetRoot, dry_run: bool, protected: list[Path]) -> CleanupOutcome:
        """Clean a single target root if it is enabled.

        Args:
            root: Target root to process
            dry_run: Whether the run is a preview
            protected: Other target roots, never removed through this one

        Returns:
            Outcome for this root
        """
        name = root.display_name
        if not root.enabled or root.path is None:
            if root.path is None:
                logger.debug("%s is not set", name)
            self.console.print(f"[dim]INFO: Skipping {name} directory cleanup[/dim]")
            return CleanupOutcome(label=root.label, path=root.path, status=CleanupStatus.SKIPPED, dry_run=dry_run)

        if not root.path.is_absolute():
            self.console.print(
                f"[yellow]WARNING: {name} is not an absolute path, skipping: {escape(str(root.path))}[/yellow]",
                soft_wrap=True,
            )
            return CleanupOutcome(label=root.label, path=root.path, status=CleanupStatus.SKIPPED, dry_run=dry_run)

        outcome = clean_directory(root.path, root.label, dry_run, protected=protected)
        self._print_outcome(name, outcome)
        return outcome

    def _print_outcome(self, name: str, outcome: CleanupOutcome) -> None:
        """Print the status lines for one root.

        Args:
            name: Display name of the root
            outcome: Outcome to report
        """
        path = escape(str(outcome.path))

        for entry in outcome.kept:
            self.console.print(
                f"[dim]INFO: Keeping {escape(str(entry))}, it holds another target root[/dim]",
                soft_wrap=True,
            )
        if outcome.status == CleanupStatus.NOT_FOUND:
            self.console.print(f"[yellow]WARNING: {name} directory not found: {path}[/yellow]", soft_wrap=True)
        elif outcome.status == CleanupStatus.ALREADY_CLEAN:
            self.console.print(f"[blue]INFO: {name} directory is already clean: {path}[/blue]", soft_wrap=True)
        elif outcome.status == CleanupStatus.WOULD_REMOVE:
            self.console.print(f"[cyan]DRY RUN: Would clean {name} directory: {path}[/cyan]", soft_wrap=True)
            self.console.print("Items that would be removed:")
            for entry in outcome.entries:
                self.console.print(f"  {escape(str(entry))}", soft_wrap=True)
        else:
            self.console.print(f"Cleaning {name} directory: {path}", soft_wrap=True)
            self.console.print(f"[green]Removed {len(outcome.removed)} item(s) from {name} directory[/green]")
            for failure in outcome.failed:
                self.console.print(
                    f"[yellow]WARNING: Failed to remove {escape(str(failure.path))}: {escape(failure.error)}[/yellow]",
                    soft_wrap=True,
                )

    def _print_summary(self, report: CleanupReport) -> None:
        """Print the final line of a run.

        Args:
            report: Completed report
        """
        if report.dry_run:
            self.console.print("[green]Dry run completed - no files were actually deleted[/green]")
        elif report.has_failures:
            self.console.print(f"[yellow]Cleanup completed with {report.failure_count} failure(s)[/yellow]")
        else:
            self.console.print("[green]Cleanup completed successfully[/green]")
