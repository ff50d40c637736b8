"""
Shared utilities for CLI commands.
"""
from rich.console import Console
from rich.markup import escape

# Global console instances; diagnostics go to stderr so generated code can be piped
console = Console()
err_console = Console(stderr=True)


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓ {escape(message)}[/green]")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[red]✗ {escape(message)}[/red]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[yellow]⚠ {escape(message)}[/yellow]")


def print_info(message: str) -> None:
    """Print an informational message."""
    console.print(f"[blue]ℹ {escape(message)}[/blue]")
