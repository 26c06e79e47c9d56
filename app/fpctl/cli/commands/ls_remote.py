"""ls-remote command for listing the contents of a remote.

This module provides the `fpctl ls-remote` command, which shows the
runtimes and applications a configured remote offers.
"""

from typing import Annotated

import typer

from fpctl.cli.display import create_remote_table
from fpctl.cli.types import (
    ExtraArgs,
    InstallationOption,
    SystemOption,
    UserOption,
    exit_with_error,
    load_config_or_exit,
    reject_extra_args,
)
from fpctl.core.arch import get_supported_arches
from fpctl.core.installations import (
    InstallationConflictError,
    InstallationNotFoundError,
    select_single_installation,
)
from fpctl.core.remote_listing import RemoteListingOptions, list_remote, resolve_arch_filter
from fpctl.remotes import FlatpakRemoteStore, RemoteStoreError
from fpctl.utils.formatting import console, print_info


def ls_remote(
    remote: Annotated[
        str | None,
        typer.Argument(
            metavar="REMOTE",
            help="Name of the remote to list.",
            show_default=False,
        ),
    ] = None,
    args: ExtraArgs = None,
    user: UserOption = False,
    system: SystemOption = False,
    installation: InstallationOption = None,
    show_details: Annotated[
        bool,
        typer.Option(
            "--show-details",
            "-d",
            help="Show arches and branches.",
        ),
    ] = False,
    runtime: Annotated[
        bool,
        typer.Option(
            "--runtime",
            help="Show only runtimes.",
        ),
    ] = False,
    app_only: Annotated[
        bool,
        typer.Option(
            "--app",
            help="Show only apps.",
        ),
    ] = False,
    updates: Annotated[
        bool,
        typer.Option(
            "--updates",
            help="Show only those where updates are available.",
        ),
    ] = False,
    arch: Annotated[
        str | None,
        typer.Option(
            "--arch",
            metavar="ARCH",
            help="Limit to this arch (* for all).",
        ),
    ] = None,
) -> None:
    """Show available runtimes and applications.

    Lists what REMOTE offers for this machine's arches. With --show-details,
    full refs are listed together with commit, installed and download size.

    Examples:
        fpctl ls-remote flathub                # Names of apps and runtimes
        fpctl ls-remote --app flathub          # Only applications
        fpctl ls-remote -d --arch '*' flathub  # Every arch, with details
        fpctl ls-remote --updates flathub      # Only refs with updates
    """
    if remote is None:
        exit_with_error("REMOTE must be specified")
    reject_extra_args(args)

    config = load_config_or_exit()

    try:
        target = select_single_installation(user, system, installation)
    except (InstallationConflictError, InstallationNotFoundError) as e:
        exit_with_error(str(e))

    store = FlatpakRemoteStore(config.flatpak_command)
    if not store.is_available():
        exit_with_error(f"{config.flatpak_command} is not available on this system")

    # Neither --app nor --runtime means both
    show_apps = app_only or not runtime
    show_runtimes = runtime or not app_only
    options = RemoteListingOptions(
        show_details=show_details,
        apps=show_apps,
        runtimes=show_runtimes,
        only_updates=updates,
        arches=resolve_arch_filter(arch, get_supported_arches()),
    )

    try:
        refs = store.list_remote_refs(remote, target)
        deployed = store.list_deployed_commits(target) if updates else None
    except RemoteStoreError as e:
        exit_with_error(str(e))

    entries = list_remote(refs, options, deployed)
    if not entries:
        print_info(f"No matching refs in remote {remote}.")
        return

    console.print(create_remote_table(entries, show_details))
