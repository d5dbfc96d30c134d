"""List command implementation.

Prints the components available in the registry, grouped into AI and
utility components. Falls back to the bundled snapshot when the registry
cannot be reached.
"""

import typer
from rich.markup import escape

from devcn_ui.cli.types import get_config
from devcn_ui.core.config import ConfigError
from devcn_ui.models.component import RegistryItem
from devcn_ui.registry.client import RegistryClient, load_index
from devcn_ui.utils.formatting import (
    console,
    create_component_table,
    format_component_row,
    print_error,
    print_info,
)


def _print_group(title: str, items: list[RegistryItem], style: str) -> None:
    if not items:
        return
    table = create_component_table(title, style)
    for item in items:
        table.add_row(*format_component_row(item))
    console.print(table)
    console.print()


def list_components(ctx: typer.Context) -> None:
    """List the components available in the registry.

    Always exits 0; when the registry is unreachable the bundled
    component list is shown instead.
    """
    try:
        config = get_config(ctx)
    except ConfigError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    print_info("Fetching available components...")
    index = load_index(RegistryClient(config.registry_url))
    if index.is_fallback:
        print_info("Using local registry data...")

    console.print()
    console.print("[bold_header]Available components:[/]")
    console.print()
    _print_group("AI Components", index.ai_items, "component_ai")
    _print_group("Utility Components", index.utility_items, "component_utility")

    console.print(f"Total: {len(index)} components available")
    console.print()
    console.print("[muted]Usage: devcn-ui add <component-name>[/]")
