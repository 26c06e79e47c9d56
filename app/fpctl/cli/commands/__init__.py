"""CLI commands for fpctl.

This package contains all subcommand implementations.
"""

from fpctl.cli.commands import history, ls_remote

__all__ = ["history", "ls_remote"]
