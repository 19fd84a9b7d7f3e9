"""Rich formatters for CLI output."""

from datetime import timedelta
from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..models import Project, ReportLine


def format_duration(duration: timedelta) -> str:
    """Format a duration as HH:MM:SS; hours are not wrapped at 24."""
    total = max(int(duration.total_seconds()), 0)
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def sorted_project_names(projects: list[Project]) -> list[str]:
    """Full project names, sorted case-insensitively."""
    return sorted((p.full_name for p in projects), key=str.casefold)


class ReportTable:
    """Rich table formatter for summary reports."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def create_table(self, lines: list[ReportLine], title: Optional[str] = None) -> Table:
        """Create a Rich table from report lines."""
        table = Table(title=title, show_footer=True)

        table.add_column("Project", style="blue")
        table.add_column("Time", justify="right", style="magenta", no_wrap=True)
        table.add_column("Hours", justify="right")

        total = timedelta(0)
        for line in lines:
            total += line.duration
            table.add_row(
                Text(line.project),
                format_duration(line.duration),
                f"{line.hours:.2f}",
            )

        table.columns[0].footer = Text("TOTAL", style="bold")
        table.columns[1].footer = Text(format_duration(total), style="bold magenta")
        table.columns[2].footer = Text(f"{total.total_seconds() / 3600:.2f}", style="bold")

        return table

    def print_table(self, lines: list[ReportLine], title: Optional[str] = None) -> None:
        """Print the report table."""
        if not lines:
            self.console.print("[yellow]No time tracked in this period.[/yellow]")
            return
        self.console.print(self.create_table(lines, title))
