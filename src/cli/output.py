"""Terminal output handling using Rich library.

This module provides the OutputHandler class for all CLI terminal output.
Uses Rich library for progress bars, colored output, and formatted text.
Supports verbosity levels and --no-color flag. All messages go to stderr
so converted HTML written to stdout stays clean.
"""

from contextlib import contextmanager
from typing import Callable, Iterator

from rich.console import Console
from rich.markup import escape
from rich.progress import (
    Progress,
    SpinnerColumn,
    TextColumn,
    BarColumn,
    TaskProgressColumn,
)

from .models import ConvertSummary


class OutputHandler:
    """Handles all terminal output using Rich library.

    Attributes:
        verbosity: Logging verbosity level (0=summary, 1=info, 2=debug)
        console: Rich Console instance for output (stderr)

    Example:
        >>> handler = OutputHandler(verbosity=1, no_color=False)
        >>> handler.success("Converted README.md")
    """

    def __init__(self, verbosity: int = 0, no_color: bool = False):
        """Initialize output handler.

        Args:
            verbosity: Verbosity level (0=summary, 1=info, 2=debug)
            no_color: Disable color output if True
        """
        self.verbosity = verbosity
        self.console = Console(
            stderr=True,
            no_color=no_color,
            highlight=False,
        )

    def success(self, message: str) -> None:
        """Display success message in green.

        Args:
            message: Success message to display
        """
        self.console.print(f"[green]✓[/green] {escape(message)}")

    def error(self, message: str) -> None:
        """Display error message in red.

        Args:
            message: Error message to display
        """
        self.console.print(f"[red]✗[/red] {escape(message)}", style="red")

    def warning(self, message: str) -> None:
        """Display warning message in yellow.

        Args:
            message: Warning message to display
        """
        self.console.print(f"[yellow]⚠[/yellow] {escape(message)}", style="yellow")

    def info(self, message: str) -> None:
        """Display info message (only if verbosity >= 1)."""
        if self.verbosity >= 1:
            self.console.print(escape(message))

    @contextmanager
    def progress_bar(self, total: int, description: str = "Converting") -> Iterator[Callable[[], None]]:
        """Display progress bar for multi-file conversions.

        Args:
            total: Total number of files to process
            description: Description text for progress bar

        Yields:
            Callable that advances the bar by one file

        Example:
            >>> with handler.progress_bar(3) as advance:
            ...     advance()
        """
        progress = Progress(
            SpinnerColumn(),
            TextColumn("[bold blue]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            console=self.console,
            disable=self.verbosity < 1,
        )
        task = progress.add_task(escape(description), total=total)
        with progress:
            yield lambda: progress.update(task, advance=1)

    def print_summary(self, summary: ConvertSummary) -> None:
        """Display conversion summary with color coding.

        Args:
            summary: Result of the batch run
        """
        self.console.print("\n[bold]Conversion Summary:[/bold]")

        if summary.converted:
            self.console.print(f"  [green]✓[/green] Converted: {len(summary.converted)} file(s)")

        if summary.skipped:
            self.console.print(f"  [yellow]⊘[/yellow] Skipped: {len(summary.skipped)} file(s)")

        if summary.failed:
            self.console.print(f"  [red]✗[/red] Failed: {len(summary.failed)} file(s)")

        if summary.warning_count:
            self.console.print(f"  [yellow]⚠[/yellow] Warnings: {summary.warning_count}")

        if summary.total == 0:
            self.console.print("\n[yellow]No files to convert[/yellow]")
        elif summary.failed:
            self.console.print("\n[red]Conversion completed with errors[/red]")
        else:
            self.console.print("\n[green]Conversion completed successfully[/green]")
