"""Main CLI application entry point.

Defines the Typer application, global options and the process entry point.
"""

import logging
import sys
from pathlib import Path
from typing import Annotated, NoReturn

import typer
from rich.logging import RichHandler
from rich.markup import escape
from typer.core import TyperCommand, TyperGroup

from devcn_ui import __version__
from devcn_ui.cli.commands import add, catalog
from devcn_ui.core.config import ConfigError, load_config
from devcn_ui.utils.formatting import err_console, print_error

logger = logging.getLogger(__name__)

VERSION_FLAGS = ("--version", "-v")


def find_unknown_option(
    command: TyperCommand | TyperGroup,
    ctx: typer.Context,
    args: list[str],
    *,
    interspersed: bool,
) -> str | None:
    """Return the first option in ``args`` that ``command`` does not declare.

    Args:
        command: Command whose parameters define the accepted options.
        ctx: Current context, used to resolve the help option names.
        args: Raw arguments following the command name.
        interspersed: Keep scanning past positional arguments. Groups stop
            at the first positional, which names the subcommand.

    Returns:
        The offending argument, or None when every option is known.
    """
    known = {}
    for param in command.get_params(ctx):
        for opt in (*param.opts, *param.secondary_opts):
            known[opt] = param

    takes_value = False
    for arg in args:
        if takes_value:
            takes_value = False
            continue
        if arg == "--":
            return None
        if not arg.startswith("-") or arg == "-":
            if interspersed:
                continue
            return None
        name, sep, _ = arg.partition("=")
        param = known.get(name)
        if param is None:
            return arg
        takes_value = not sep and not getattr(param, "is_flag", False)
    return None


class UsageOnErrorGroup(TyperGroup):
    """Command group that prints usage and exits 1 on unrecognised input.

    ``--version``/``-v`` is honoured anywhere before ``--``, also after a
    subcommand, and ends the process with exit code 0.
    """

    def parse_args(self, ctx: typer.Context, args: list[str]) -> list[str]:
        leading = args[: args.index("--")] if "--" in args else args
        if any(arg in VERSION_FLAGS for arg in leading):
            version_callback(True)
        if find_unknown_option(self, ctx, args, interspersed=False) is not None:
            _exit_with_usage(ctx)
        return super().parse_args(ctx, args)

    def resolve_command(
        self, ctx: typer.Context, args: list[str]
    ) -> tuple[str | None, TyperCommand | TyperGroup | None, list[str]]:
        if args and self.get_command(ctx, args[0]) is None:
            _exit_with_usage(ctx)
        cmd_name, command, rest = super().resolve_command(ctx, args)
        if command is not None and find_unknown_option(command, ctx, rest, interspersed=True):
            _exit_with_usage(ctx)
        return cmd_name, command, rest


def _exit_with_usage(ctx: typer.Context) -> NoReturn:
    typer.echo(ctx.get_help())
    ctx.exit(1)


def configure_logging(verbose: bool) -> None:
    """Route package log records to stderr through Rich.

    Args:
        verbose: Emit debug records when True, warnings and above otherwise.
    """
    package_logger = logging.getLogger("devcn_ui")
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(
            RichHandler(console=err_console, show_time=False, show_path=False)
        )


# Create main Typer app
app = typer.Typer(
    name="devcn-ui",
    help="Add components from the Devcn UI registry to your project.",
    cls=UsageOnErrorGroup,
    invoke_without_command=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"devcn-ui version {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            help="Enable debug logging on stderr.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            help="Path to a config.toml file.",
            dir_okay=False,
        ),
    ] = None,
) -> None:
    """devcn-ui - Add Devcn UI components to your project.

    Fetches components from the registry, installs the npm packages they
    need and rewrites their imports to your project's aliases.
    """
    configure_logging(verbose)

    try:
        config = load_config(config_path)
    except ConfigError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["config"] = config

    if ctx.invoked_subcommand is None:
        _exit_with_usage(ctx)


# Register commands
app.command("add")(add.add_components)
app.command("list")(catalog.list_components)
app.command("ls", hidden=True)(catalog.list_components)


def main() -> None:
    """Console script entry point.

    Unexpected errors escaping a command are logged and end the process
    with exit code 1.
    """
    try:
        app()
    except Exception as e:
        logger.debug("Unhandled error", exc_info=True)
        print_error(escape(f"Unexpected error: {e}"))
        sys.exit(1)


if __name__ == "__main__":
    main()
