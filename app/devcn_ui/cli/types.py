"""Shared helpers for CLI commands."""

import typer

from devcn_ui.core.config import CliConfig, load_config


def get_config(ctx: typer.Context) -> CliConfig:
    """Return the configuration loaded by the main callback.

    Loads the default configuration when the callback did not store one.

    Args:
        ctx: Typer context of the running command.

    Returns:
        The active CLI configuration.

    Raises:
        ConfigError: If the default configuration file is invalid.
    """
    obj = ctx.find_root().obj
    if isinstance(obj, dict) and isinstance(obj.get("config"), CliConfig):
        return obj["config"]
    return load_config()
