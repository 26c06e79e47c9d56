"""Main CLI application entry point.

Defines the Typer application, global options and command dispatch.
"""

import difflib
from typing import Annotated

import click
import typer
from typer.core import TyperGroup

from fpctl import __version__
from fpctl.cli.commands import history, ls_remote
from fpctl.core.arch import get_default_arch, get_supported_arches
from fpctl.core.installations import list_system_installations
from fpctl.utils.log import setup_logging


class FpctlGroup(TyperGroup):
    """Command group that suggests the closest command on typos."""

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        cmd_name = args[0] if args else None
        if (
            cmd_name is not None
            and not ctx.resilient_parsing
            and not cmd_name.startswith("-")
            and self.get_command(ctx, cmd_name) is None
        ):
            matches = difflib.get_close_matches(cmd_name, self.list_commands(ctx), n=1)
            if matches:
                ctx.fail(f"'{cmd_name}' is not a fpctl command. Did you mean '{matches[0]}'?")
            ctx.fail(f"'{cmd_name}' is not a fpctl command")
        return super().resolve_command(ctx, args)


app = typer.Typer(
    name="fpctl",
    cls=FpctlGroup,
    help="Inspect Flatpak history and remotes.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"fpctl version {__version__}")
        raise typer.Exit()


def default_arch_callback(value: bool) -> None:
    """Print the default arch and exit."""
    if value:
        typer.echo(get_default_arch())
        raise typer.Exit()


def supported_arches_callback(value: bool) -> None:
    """Print the supported arches and exit."""
    if value:
        for arch in get_supported_arches():
            typer.echo(arch)
        raise typer.Exit()


def installations_callback(value: bool) -> None:
    """Print the paths of system installations and exit."""
    if value:
        for installation in list_system_installations():
            typer.echo(str(installation.path))
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Print version information and exit.",
        ),
    ] = None,
    default_arch: Annotated[
        bool | None,
        typer.Option(
            "--default-arch",
            callback=default_arch_callback,
            is_eager=True,
            help="Print default arch and exit.",
        ),
    ] = None,
    supported_arches: Annotated[
        bool | None,
        typer.Option(
            "--supported-arches",
            callback=supported_arches_callback,
            is_eager=True,
            help="Print supported arches and exit.",
        ),
    ] = None,
    installations: Annotated[
        bool | None,
        typer.Option(
            "--installations",
            callback=installations_callback,
            is_eager=True,
            help="Print paths for system installations and exit.",
        ),
    ] = None,
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            count=True,
            help="Show debug information, -vv for more detail.",
        ),
    ] = 0,
) -> None:
    """fpctl - inspect Flatpak installations.

    Show the transaction history recorded in the system journal and list
    what configured remotes offer.
    """
    setup_logging(verbose)

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


# Register commands
app.command("history")(history.history)
app.command("ls-remote")(ls_remote.ls_remote)


if __name__ == "__main__":
    app()
