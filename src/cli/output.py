"""Terminal output handling using Rich library.

This module provides the OutputHandler class for all CLI terminal output:
the short notices shown after a sync or connect action, and a spinner for
the network round trip. Supports verbosity levels and --no-color flag.
"""

from typing import Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.markup import escape
from rich.spinner import Spinner
from rich.live import Live


class OutputHandler:
    """Handles all terminal output using Rich library.

    Messages are plain text. Note titles, page IDs and error messages are
    escaped, so square brackets in them are printed as typed instead of
    being read as Rich markup.

    Attributes:
        verbosity: Output verbosity level (0=summary, 1=info, 2=debug)
        console: Rich Console instance for output

    Example:
        >>> handler = OutputHandler(verbosity=1, no_color=False)
        >>> handler.success("Synced to Confluence page 12345")
        >>> with handler.spinner("Syncing..."):
        ...     pass
    """

    def __init__(self, verbosity: int = 0, no_color: bool = False):
        """Initialize output handler.

        Args:
            verbosity: Verbosity level (0=summary, 1=info, 2=debug)
            no_color: Disable color output if True
        """
        self.verbosity = verbosity
        self.console = Console(
            force_terminal=not no_color,
            no_color=no_color,
            highlight=False,
        )

    def success(self, message: str) -> None:
        """Display success message in green."""
        self.console.print(f"[green]✓[/green] {escape(message)}")

    def error(self, message: str) -> None:
        """Display error message in red."""
        self.console.print(f"[red]✗[/red] {escape(message)}", style="red")

    def warning(self, message: str) -> None:
        """Display warning message in yellow."""
        self.console.print(f"[yellow]⚠[/yellow] {escape(message)}", style="yellow")

    def info(self, message: str) -> None:
        """Display info message (only if verbosity >= 1)."""
        if self.verbosity >= 1:
            self.console.print(escape(message))

    def debug(self, message: str) -> None:
        """Display debug message (only if verbosity >= 2)."""
        if self.verbosity >= 2:
            self.console.print(f"[dim]{escape(message)}[/dim]")

    def print(self, message: str) -> None:
        """Display message without formatting."""
        self.console.print(message, markup=False)

    @contextmanager
    def spinner(self, message: str) -> Iterator[None]:
        """Display spinner for single operations.

        Args:
            message: Message to display with spinner

        Example:
            >>> with handler.spinner("Fetching page..."):
            ...     pass
        """
        spinner = Spinner("dots", text=escape(message))
        with Live(spinner, console=self.console, refresh_per_second=10, transient=True):
            yield
