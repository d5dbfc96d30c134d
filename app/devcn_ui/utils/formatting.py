"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from devcn_ui.core.theme import get_theme
from devcn_ui.models.component import RegistryItem


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def create_component_table(title: str, style: str) -> Table:
    """Create a pre-configured table for a group of registry components.

    Args:
        title: Table title.
        style: Theme style for the component name column.

    Returns:
        Rich Table with Component and Description columns.
    """
    table = Table(
        title=title,
        title_justify="left",
        show_header=True,
        header_style="bold_header",
        border_style="border",
        box=None,
        pad_edge=False,
    )
    table.add_column("Component", style=style, no_wrap=True, min_width=15)
    table.add_column("Description", style="text")
    return table


def format_component_row(item: RegistryItem) -> tuple[str, str]:
    """Format a registry item as a table row."""
    description = escape(item.description) if item.description else "[muted]No description available[/]"
    return (escape(item.name), description)


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
