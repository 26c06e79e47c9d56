"""CLI package for fpctl.

This package contains the Typer application and all subcommands.
"""

from fpctl.cli.main import app

__all__ = ["app"]
