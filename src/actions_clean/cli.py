"""Command-line interface for actions-clean."""

import logging
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from actions_clean import __version__
from actions_clean.cleanup.orchestrator import CleanupOrchestrator
from actions_clean.config import CleanupConfig, ConfigurationError, MissingConfigurationError
from actions_clean.models import CleanupReport

app = typer.Typer(
    name="actions-clean",
    help="Remove leftover files from a self-hosted runner after a job",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)

# Error messages
NOT_IN_ACTIONS_ERROR = "ERROR: Not running in GitHub Actions environment"

# Help text constants
VERBOSE_OUTPUT_HELP = "Verbose output"
ENV_FILE_HELP = "Path to an environment file read in addition to the process environment"


def setup_logging(verbose: bool, log_console: Console | None = None) -> None:
    """Setup logging configuration.

    Args:
        verbose: If True, enable debug logging
        log_console: Console the log handler writes to (defaults to stdout console)
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=log_console or console, rich_tracebacks=True)],
        force=True,
    )


def load_config(env_file: str | None) -> CleanupConfig:
    """Load configuration, exiting on failure.

    Args:
        env_file: Optional path to an environment file

    Returns:
        Loaded configuration

    Raises:
        SystemExit: If the workspace is unknown or configuration is invalid
    """
    try:
        return CleanupConfig(env_file=env_file)
    except MissingConfigurationError as e:
        console.print(f"[red]{NOT_IN_ACTIONS_ERROR}[/red]")
        console.print(f"[dim]{e}[/dim]")
        sys.exit(1)
    except ConfigurationError as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        sys.exit(1)


@app.command()
def run(
    dry_run: bool | None = typer.Option(
        None,
        "--dry-run/--no-dry-run",
        help="Only show what would be removed (overrides INPUT_DRY_RUN)",
    ),
    cleanup_home: bool | None = typer.Option(
        None,
        "--cleanup-home/--no-cleanup-home",
        help="Clean the home directory (overrides INPUT_CLEANUP_HOME)",
    ),
    cleanup_workspace: bool | None = typer.Option(
        None,
        "--cleanup-workspace/--no-cleanup-workspace",
        help="Clean the workspace directory (overrides INPUT_CLEANUP_WORKSPACE)",
    ),
    env_file: str | None = typer.Option(
        None,
        "--env-file",
        help=ENV_FILE_HELP,
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Print the cleanup report as JSON instead of status lines",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help=VERBOSE_OUTPUT_HELP,
    ),
) -> None:
    """Remove the contents of the home and workspace directories."""
    config = load_config(env_file)
    setup_logging(verbose or config.debug, err_console if json_output else None)

    # Override inputs if specified
    if dry_run is not None:
        config.dry_run = dry_run
    if cleanup_home is not None:
        config.cleanup_home = cleanup_home
    if cleanup_workspace is not None:
        config.cleanup_workspace = cleanup_workspace

    try:
        orchestrator = CleanupOrchestrator(config, console=Console(quiet=True) if json_output else console)
        report = orchestrator.run(Path.cwd())
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        if verbose:
            console.print_exception()
        sys.exit(1)

    if json_output:
        _print_report_json(report)


def _print_report_json(report: CleanupReport) -> None:
    """Print a cleanup report as JSON.

    Args:
        report: Report to print
    """
    typer.echo(report.model_dump_json(indent=2))


@app.command()
def config(
    env_file: str | None = typer.Option(
        None,
        "--env-file",
        help=ENV_FILE_HELP,
    ),
) -> None:
    """Show current configuration."""
    cfg = load_config(env_file)
    console.print("[bold]Current Configuration:[/bold]\n")
    console.print(f"  Workspace: {escape(str(cfg.workspace))}", soft_wrap=True)
    console.print(f"  Home: {escape(str(cfg.home)) if cfg.home else 'Not set'}", soft_wrap=True)
    console.print("\n[bold]Inputs:[/bold]")
    console.print(f"  Cleanup Home: {cfg.cleanup_home}")
    console.print(f"  Cleanup Workspace: {cfg.cleanup_workspace}")
    console.print(f"  Dry Run: {cfg.dry_run}")
    console.print(f"  Debug: {cfg.debug}")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"actions-clean version {__version__}")


if __name__ == "__main__":
    app()
