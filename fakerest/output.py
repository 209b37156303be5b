"""
Output utility for the fakerest CLI with colors and verbosity control.

Provides a centralized output manager using Rich library so every step of the
demo reports through one place, and tests can swap it out.
"""

from enum import IntEnum
from typing import Any, Optional

from rich.console import Console
from rich.markup import escape


class Verbosity(IntEnum):
    """Verbosity levels for output."""

    QUIET = 0  # Only errors and step results
    NORMAL = 1  # Standard output with colors
    VERBOSE = 2  # Detailed output including every HTTP exchange


class OutputManager:
    """
    Centralized output manager for the fakerest CLI.

    Provides methods for formatted output with colors and
    verbosity control.
    """

    def __init__(self, verbosity: Verbosity = Verbosity.NORMAL):
        """
        Initialize the output manager.

        Args:
            verbosity: Verbosity level for output
        """
        self.verbosity = verbosity
        self.console = Console(soft_wrap=True, emoji=False)
        self.error_console = Console(stderr=True, soft_wrap=True, emoji=False)

    def success(self, message: str) -> None:
        """Print a success message in green."""
        if self.verbosity != Verbosity.QUIET:
            self.console.print(f"[green]✓[/green] {escape(message)}")

    def error(self, message: str, suggestion: Optional[str] = None) -> None:
        """Print an error message in red to stderr."""
        error_text = f"✗ {escape(message)}"
        self.error_console.print(f"[red]{error_text}[/red]", style="red")
        if suggestion and self.verbosity >= Verbosity.NORMAL:
            self.error_console.print(f"[yellow]💡 {escape(suggestion)}[/yellow]", style="yellow")

    def warning(self, message: str) -> None:
        """Print a warning message in yellow."""
        if self.verbosity != Verbosity.QUIET:
            self.console.print(f"[yellow]⚠[/yellow] {escape(message)}", style="yellow")

    def info(self, message: str) -> None:
        """Print an info message in blue."""
        if self.verbosity >= Verbosity.NORMAL:
            self.console.print(f"[blue]ℹ[/blue] {escape(message)}", style="blue")

    def print(self, message: str, style: Optional[str] = None) -> None:
        """Print a plain message."""
        if self.verbosity != Verbosity.QUIET:
            self.console.print(message, style=style, markup=False)

    def notice(self, message: str) -> None:
        """Print a plain message in every verbosity mode, QUIET included."""
        self.console.print(message, markup=False)

    def result(self, label: str, value: Any) -> None:
        """
        Print a labelled step result as ``label: value``.

        Results are printed in every verbosity mode, QUIET included. The value
        is rendered with ``str()`` and never interpreted as Rich markup, since
        list reprs look like markup tags.

        Args:
            label: Human-readable name of the result
            value: Anything printable (entity, list of entities, bool, None)
        """
        self.console.print(f"[bold]{escape(label)}:[/bold] {escape(str(value))}")

    def verbose(self, message: str) -> None:
        """Print a verbose message (only shown in VERBOSE mode)."""
        if self.verbosity >= Verbosity.VERBOSE:
            self.console.print(f"[dim]{escape(message)}[/dim]", style="dim")

    def section(self, title: str) -> None:
        """Print a section header."""
        if self.verbosity != Verbosity.QUIET:
            self.console.print(f"\n[bold cyan]{escape(title)}[/bold cyan]")

    def rule(self, title: Optional[str] = None) -> None:
        """Print a horizontal rule."""
        if self.verbosity != Verbosity.QUIET:
            self.console.rule(title or "")


# Global output manager instance
_output_manager: Optional[OutputManager] = None


def get_output() -> OutputManager:
    """
    Get the global output manager instance.

    Returns:
        OutputManager instance
    """
    global _output_manager
    if _output_manager is None:
        _output_manager = OutputManager()
    return _output_manager


def set_output(manager: OutputManager) -> None:
    """Set the global output manager instance."""
    global _output_manager
    _output_manager = manager
