"""Add command implementation.

Installs one or more registry components into the current project.
"""

from typing import Annotated

import typer
from rich.markup import escape

from devcn_ui.cli.types import get_config
from devcn_ui.core.config import ConfigError
from devcn_ui.core.pipeline import AddResult, ComponentInstaller
from devcn_ui.utils.formatting import console, print_error, print_success, print_warning

USAGE = "Usage: devcn-ui add [...components]"


def _print_summary(results: list[AddResult]) -> None:
    """Print one line per processed component."""
    console.print()
    for result in results:
        name = escape(result.name)
        if not result.success:
            print_error(f"{name} was not added: {escape(result.error or '')}")
        elif result.warnings:
            print_warning(
                f"{name} added; install manually: {escape(', '.join(result.warnings))}"
            )
        else:
            print_success(f"{name} added")


def add_components(
    ctx: typer.Context,
    components: Annotated[
        list[str] | None,
        typer.Argument(help="Component names to add.", show_default=False),
    ] = None,
) -> None:
    """Add components to your project.

    Components are processed one after another. A component that fails does
    not stop the ones after it.

    [bold]Examples:[/bold]
        devcn-ui add ai-message
        devcn-ui add ai-message snippet
    """
    names = [name for name in components or [] if name.strip()]
    if not names:
        typer.echo(USAGE)
        raise typer.Exit(code=1)

    try:
        config = get_config(ctx)
    except ConfigError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    installer = ComponentInstaller(config)
    results = installer.add_all(names)
    _print_summary(results)

    if any(not result.success for result in results):
        raise typer.Exit(code=1)
