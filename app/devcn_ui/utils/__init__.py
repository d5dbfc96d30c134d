"""Utility modules for devcn-ui.

This module exports commonly used utility functions.
"""

from devcn_ui.utils.formatting import (
    console,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from devcn_ui.utils.shell import CommandResult, run_command, run_interactive

__all__ = [
    "CommandResult",
    "console",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "run_command",
    "run_interactive",
]
