"""Cleanup report formatting and display."""

from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..models.cleanup_report import CleanupReport, ReportStatus

STATUS_STYLES = {
    ReportStatus.COMPLETED: "green",
    ReportStatus.PARTIAL: "yellow",
    ReportStatus.FAILED: "red",
}


class CleanupReporter:
    """Format and display cleanup reports."""

    def __init__(self, console: Optional[Console] = None):
        """Initialize cleanup reporter.

        Args:
            console: Rich console instance (creates new one if not provided)
        """
        self.console = console or Console()

    def display(self, report: CleanupReport, show_failures: bool = True) -> None:
        """Display cleanup report to console.

        Args:
            report: CleanupReport to display
            show_failures: Whether to list every failed step
        """
        style = STATUS_STYLES[report.status]
        duration = f"{report.duration_seconds:.1f}s" if report.duration_seconds is not None else "n/a"

        self.console.print()
        self.console.print(
            Panel(
                f"[bold]Environment Cleanup[/bold]\n"
                f"Operation: {report.operation_id}\n"
                f"Started: {report.started_at.strftime('%Y-%m-%d %H:%M:%S UTC')}\n"
                f"Duration: {duration}\n"
                f"Status: [{style}]{report.status.value}[/{style}]",
                style="cyan",
            )
        )

        self._display_passes(report)

        if show_failures and report.failures:
            self._display_failures(report)

    def _display_passes(self, report: CleanupReport) -> None:
        """Display per-pass counts in run order."""
        table = Table(title="Cleanup Passes", show_header=True, header_style="bold magenta")
        table.add_column("Resource Kind", style="cyan")
        table.add_column("Scanned", justify="right")
        table.add_column("Attempted", justify="right")
        table.add_column("Deleted", justify="right", style="green")
        table.add_column("Failed", justify="right")

        for cleanup_pass in report.passes:
            failed = str(cleanup_pass.failed_count)
            if cleanup_pass.failed_count:
                failed = f"[red]{failed}[/red]"
            table.add_row(
                cleanup_pass.resource_kind.label,
                str(cleanup_pass.scanned_count),
                str(cleanup_pass.attempted_count),
                str(cleanup_pass.succeeded_count),
                failed,
            )

        self.console.print(table)
        self.console.print()

    def _display_failures(self, report: CleanupReport) -> None:
        """Display failed steps with their causes."""
        table = Table(title="Failures", show_header=True, header_style="bold red")
        table.add_column("Kind", style="cyan")
        table.add_column("Resource", style="white")
        table.add_column("Stage", width=8)
        table.add_column("Error", style="yellow")
        table.add_column("Message", style="dim")

        for record in report.failures:
            table.add_row(
                record.resource_kind.value,
                record.resource_id or "-",
                record.stage.value,
                record.error_code or "",
                record.error_message or "",
            )

        self.console.print(table)
        self.console.print()
