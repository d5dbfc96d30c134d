"""CLI module for devcn-ui."""

from devcn_ui.cli.main import app

__all__ = ["app"]
