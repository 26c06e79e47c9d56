"""Utility modules for fpctl.

This module exports commonly used utility functions.
"""

from fpctl.utils.formatting import (
    console,
    err_console,
    format_size,
    print_error,
    print_info,
)
from fpctl.utils.shell import CommandResult, command_exists, open_stream, run_command

__all__ = [
    "CommandResult",
    "command_exists",
    "console",
    "err_console",
    "format_size",
    "open_stream",
    "print_error",
    "print_info",
    "run_command",
]
