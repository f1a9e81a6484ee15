"""Main CLI entry point using Typer."""

import logging
import sys
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from ..config import Config
from ..context import HarnessContext
from ..errors import ConfigurationError
from ..utils.logging import setup_logging

logger = logging.getLogger(__name__)

# Create Typer app
app = typer.Typer(
    name="media-harness",
    help="Media Services Test Harness - environment cleanup and verification CLI tool",
    add_completion=False,
)

# Create Rich console for output
console = Console()

# Global config, loaded by the callback
config: Optional[Config] = None


@app.callback()
def main(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to YAML configuration (default: $MEDIA_HARNESS_CONFIG or ~/.media-harness/config.yaml)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress output except errors"),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output"),
):
    """Media Services Test Harness - environment cleanup and verification CLI tool."""
    global config

    try:
        config = Config.load(config_path)
    except ConfigurationError as e:
        console.print(f"✗ Configuration error: {e}", style="bold red")
        raise typer.Exit(code=1)

    log_level = "ERROR" if quiet else ("DEBUG" if verbose else config.log_level)
    setup_logging(level=log_level, verbose=verbose)

    if no_color:
        console.no_color = True


@app.command()
def version():
    """Show version information."""
    from .. import __version__

    console.print(f"media-services-harness version {__version__}")
    console.print(f"Python {sys.version.split()[0]}")


@app.command()
def cleanup(
    client_factory: Optional[str] = typer.Option(
        None, "--client-factory", help="Resource client factory as module:callable (overrides config)"
    ),
    audit_dir: Optional[str] = typer.Option(None, "--audit-dir", help="Write a YAML audit log to this directory"),
    strict: bool = typer.Option(False, "--strict", help="Exit with code 1 if any cleanup step failed"),
):
    """Delete test resources left in the media service environment.

    Runs locator, asset, access policy and content key passes in that order.
    Failures are reported but do not stop the remaining passes.

    Examples:
        # Clean up using the client factory from the config file
        media-harness cleanup

        # Use a specific client factory and keep an audit log
        media-harness cleanup --client-factory mysdk.media:create_client --audit-dir ./audit
    """
    from ..cleanup.reporter import CleanupReporter

    if client_factory:
        config.client_factory = client_factory
    if audit_dir:
        config.audit_dir = audit_dir

    try:
        context = HarnessContext.create(config)
    except ConfigurationError as e:
        console.print(f"✗ {e}", style="bold red")
        raise typer.Exit(code=1)

    console.print("🧹 Cleaning media service environment...")
    report = context.reconciler().reconcile()

    CleanupReporter(console).display(report)

    if report.failed_count:
        console.print(f"⚠ {report.failed_count} cleanup step(s) failed", style="yellow")
        if strict:
            raise typer.Exit(code=1)
    else:
        console.print(f"✓ Deleted {report.succeeded_count} test resource(s)", style="green")


# Config commands group
config_app = typer.Typer(help="Configuration commands")
app.add_typer(config_app, name="config")


@config_app.command("show")
def config_show():
    """Show the resolved configuration with secrets masked."""
    table = Table(title="Configuration", show_header=True, header_style="bold magenta")
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    for key, value in config.redacted().items():
        table.add_row(key, "(not set)" if value is None else str(value))

    console.print(table)


def cli_main():
    """Entry point for the console script."""
    app()


if __name__ == "__main__":
    cli_main()
