"""Shared option types and helpers for CLI commands.

This module provides the installation scope options and error helpers
used by several command modules, to avoid code duplication.
"""

from typing import Annotated, NoReturn

import typer

from fpctl.core.config import ConfigError, FpctlConfig, load_config
from fpctl.utils.formatting import print_error

UserOption = Annotated[
    bool,
    typer.Option(
        "--user",
        help="Work on the user installation.",
    ),
]

SystemOption = Annotated[
    bool,
    typer.Option(
        "--system",
        help="Work on the system-wide installation (default).",
    ),
]

InstallationOption = Annotated[
    list[str] | None,
    typer.Option(
        "--installation",
        metavar="NAME",
        help="Work on a non-default system-wide installation.",
    ),
]

ExtraArgs = Annotated[
    list[str] | None,
    typer.Argument(hidden=True),
]


def exit_with_error(message: str) -> NoReturn:
    """Print an error message and exit with status 1."""
    print_error(message)
    raise typer.Exit(code=1)


def reject_extra_args(args: list[str] | None) -> None:
    """Exit with an error if unexpected positional arguments were given."""
    if args:
        exit_with_error("Too many arguments")


def load_config_or_exit() -> FpctlConfig:
    """Load the fpctl configuration, exiting on invalid files."""
    try:
        return load_config()
    except ConfigError as e:
        exit_with_error(str(e))
