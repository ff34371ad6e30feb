"""Rich terminal output formatting."""

from typing import Any

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from ..vcs.operations import ChangeSummary, FileDiff


class OutputFormatter:
    """Format tool results using Rich for terminal display."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def print_header(self, text: str) -> None:
        """Print a section header."""
        self.console.print()
        self.console.print(f"[bold cyan]{text}[/bold cyan]")

    def print_summary(self, summary: ChangeSummary) -> None:
        """Print per-file line counts."""
        table = Table(box=box.SIMPLE, padding=(0, 2))
        table.add_column("File")
        table.add_column("+", justify="right", style="green")
        table.add_column("-", justify="right", style="red")

        for change in summary.files:
            table.add_row(change.path, str(change.insertions), str(change.deletions))

        self.console.print(table)
        self.console.print(
            f"   {len(summary.files)} files changed "
            f"([green]+{summary.insertions}[/green] [red]-{summary.deletions}[/red] lines)"
        )

    def print_diffs(self, diffs: list[FileDiff]) -> None:
        """Print each file's unified diff."""
        for file_diff in diffs:
            self.console.rule(f"[bold]{file_diff.path}[/bold]", style="blue")
            if file_diff.diff:
                self.console.print(Syntax(file_diff.diff, "diff", word_wrap=True))
            else:
                self.console.print("[dim]No textual diff (binary or mode change)[/dim]")

    def print_commit_message(self, result: dict[str, Any]) -> None:
        """Print a generated commit message with its stats."""
        stats = result["stats"]
        self.console.print()
        self.console.print("[bold]💡 Suggested commit:[/bold]")
        self.console.print(
            Panel(
                result["commit_message"],
                box=box.ROUNDED,
                border_style="green",
                padding=(0, 1),
            )
        )
        self.console.print(
            f"[dim]Type: {stats['type']} · "
            f"{len(result['affected_files'])} affected file(s)[/dim]"
        )

    def print_no_changes(self, message: str) -> None:
        """Print message when the working copy is clean."""
        self.console.print()
        self.console.print(
            Panel(
                f"[yellow]{message}[/yellow]",
                title="⚠️  Nothing to describe",
                box=box.ROUNDED,
            )
        )

    def print_error(self, message: str) -> None:
        """Print an error message."""
        self.console.print(f"[bold red]Error:[/bold red] {message}")

    def print_success(self, message: str) -> None:
        """Print a success message."""
        self.console.print(f"[bold green]✓[/bold green] {message}")
