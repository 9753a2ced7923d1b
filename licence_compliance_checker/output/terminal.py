"""Terminal output formatter using Rich."""
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from licence_compliance_checker.models.compliance import ComplianceResults
from licence_compliance_checker.models.detection import DetectionRecord

# Bucket title and color, in display order
_BUCKET_STYLES = [
    ("restricted", "Restricted", "red"),
    ("unidentifiable", "Unidentifiable", "yellow"),
    ("compliant", "Compliant", "green"),
    ("ignored", "Ignored", "blue"),
]


class TerminalFormatter:
    """Format compliance results for terminal display using Rich.

    Prints a summary panel followed by one table per non-empty bucket.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        """Initialize the formatter with a Rich console.

        Args:
            console: Optional Rich Console instance. If not provided,
                a new Console will be created.
        """
        self._console = console if console is not None else Console()

    def format_results(self, results: ComplianceResults) -> None:
        """Format and display compliance results.

        Args:
            results: The compliance results to display.
        """
        self._print_summary(results)

        if results.total == 0:
            self._console.print("[yellow]No projects checked[/yellow]")
            return

        for bucket, title, color in _BUCKET_STYLES:
            records: list[DetectionRecord] = getattr(results, bucket)
            if records:
                self._print_bucket(records, title, color)

    def _print_summary(self, results: ComplianceResults) -> None:
        if results.has_failures:
            status = "NOT COMPLIANT"
            status_color = "red"
        else:
            status = "COMPLIANT"
            status_color = "green"

        summary_lines = [
            f"Projects Checked: {results.total}",
            f"Compliant: {len(results.compliant)}",
            f"Restricted: {len(results.restricted)}",
            f"Unidentifiable: {len(results.unidentifiable)}",
            f"Ignored: {len(results.ignored)}",
            "",
            f"Status: [{status_color}]{status}[/{status_color}]",
        ]
        panel = Panel(
            "\n".join(summary_lines),
            title="[bold]LICENCE COMPLIANCE[/bold]",
            border_style=status_color,
        )
        self._console.print(panel)

    def _print_bucket(
        self, records: list[DetectionRecord], title: str, color: str
    ) -> None:
        table = Table(title=f"[bold {color}]{title} ({len(records)})[/bold {color}]")
        table.add_column("Project", style="cyan")
        table.add_column("Licence", style=color)
        table.add_column("Confidence", justify="right")
        table.add_column("Error", style="yellow")

        for record in records:
            # Matches are already ordered, most probable first
            if record.matches:
                licence = escape(record.matches[0].licence)
                confidence = f"{record.matches[0].confidence:.2f}"
                others = len(record.matches) - 1
                if others:
                    licence += f" (+{others} more)"
            else:
                licence = "-"
                confidence = "-"
            table.add_row(
                escape(record.project),
                licence,
                confidence,
                escape(record.detection_error),
            )

        self._console.print(table)
