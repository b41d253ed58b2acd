"""Display helpers for CLI output."""

from click import echo, style


def print_success(message: str):
    """Print success message with styling."""
    echo(style(message, fg="green", bold=True))


def print_error(message: str):
    """Print error message with styling."""
    echo(style(message, fg="red", bold=True))


def show_debug_mode():
    """Show debug mode indicator."""
    echo(style("Debug mode enabled", fg="yellow"))
