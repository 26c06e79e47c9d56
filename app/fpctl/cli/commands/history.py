"""History command for viewing past Flatpak transactions.

This module provides the `fpctl history` command, which reads flatpak
transaction records from the system journal and shows them newest first.
"""

from contextlib import closing
from datetime import datetime
from itertools import islice
from typing import Annotated

import typer

from fpctl.cli.display import create_columns_table, create_history_table, format_history_json
from fpctl.cli.types import (
    ExtraArgs,
    InstallationOption,
    SystemOption,
    UserOption,
    exit_with_error,
    load_config_or_exit,
    reject_extra_args,
)
from fpctl.core.columns import UnknownColumnError, parse_column_list, resolve_columns
from fpctl.core.history import query_history
from fpctl.core.installations import InstallationNotFoundError, scope_ids, select_installations
from fpctl.core.timeparse import TimeParseError, parse_time
from fpctl.journal import JournalError, get_log_backend
from fpctl.models.history import HistoryQuery, TimeWindow
from fpctl.utils.formatting import console, print_info


def history(
    args: ExtraArgs = None,
    user: UserOption = False,
    system: SystemOption = False,
    installation: InstallationOption = None,
    since: Annotated[
        str | None,
        typer.Option(
            "--since",
            metavar="TIME",
            help="Only show changes after TIME (e.g. '2024-01-10', '12:30', '2 days 3 hours').",
        ),
    ] = None,
    until: Annotated[
        str | None,
        typer.Option(
            "--until",
            metavar="TIME",
            help="Only show changes before TIME.",
        ),
    ] = None,
    columns: Annotated[
        str | None,
        typer.Option(
            "--columns",
            metavar="FIELD,...",
            help="What information to show ('all' for every column).",
        ),
    ] = None,
    show_columns: Annotated[
        bool,
        typer.Option(
            "--show-columns",
            help="Show available columns and exit.",
        ),
    ] = False,
    limit: Annotated[
        int | None,
        typer.Option(
            "--limit",
            "-n",
            min=1,
            help="Maximum number of entries to show.",
        ),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Output as JSON.",
        ),
    ] = False,
) -> None:
    """Show history of Flatpak changes.

    Lists installs, updates and uninstalls recorded in the system journal,
    most recent first. Without --user, --system or --installation, changes
    to every installation are shown.

    Examples:
        fpctl history                          # All recorded changes
        fpctl history --user                   # Only the user installation
        fpctl history --since "2 days"         # Changes in the last two days
        fpctl history --columns time,change,ref
        fpctl history --json                   # JSON output for scripting
    """
    reject_extra_args(args)

    if show_columns:
        console.print(create_columns_table())
        return

    config = load_config_or_exit()
    now = datetime.now()

    try:
        window = TimeWindow(
            since=parse_time(since, now) if since is not None else None,
            until=parse_time(until, now) if until is not None else None,
        )
        requested = parse_column_list(columns) if columns is not None else config.history.columns
        resolved = resolve_columns(requested)
        installations = select_installations(user, system, installation)
    except (TimeParseError, UnknownColumnError, InstallationNotFoundError) as e:
        exit_with_error(str(e))

    if not resolved:
        return

    query = HistoryQuery(
        columns=tuple(resolved),
        scopes=scope_ids(installations) if installations is not None else None,
        window=window,
    )
    max_rows = limit if limit is not None else config.history.limit

    try:
        with closing(query_history(query, get_log_backend(config))) as rows_iter:
            rows = list(islice(rows_iter, max_rows))
    except JournalError as e:
        exit_with_error(str(e))

    if json_output:
        typer.echo(format_history_json(query.columns, rows))
        return

    if not rows:
        print_info("No history entries found.")
        return

    console.print(create_history_table(query.columns, rows))
