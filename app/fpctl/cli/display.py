"""Shared Rich display functions for history and remote listings.

Provides the table builders the history and ls-remote commands render
their rows into.
"""

import json
from collections.abc import Sequence

from rich.markup import escape
from rich.table import Table

from fpctl.core.columns import HISTORY_COLUMNS
from fpctl.core.remote_listing import RemoteListingEntry
from fpctl.models.history import ColumnSpec
from fpctl.utils.formatting import format_size

# Per-column cell styles; unlisted columns use the default text style
_HISTORY_COLUMN_STYLES: dict[str, str] = {
    "time": "muted",
    "change": "operation",
    "application": "ref_name",
    "commit": "commit",
    "result": "success",
}


def create_history_table(columns: Sequence[ColumnSpec], rows: Sequence[Sequence[str]]) -> Table:
    """Create a Rich table of history rows.

    Args:
        columns: Columns in display order.
        rows: Display strings, one list per row, aligned with columns.

    Returns:
        Rich Table with one header per column.
    """
    table = Table(
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    for column in columns:
        table.add_column(
            column.title,
            style=_HISTORY_COLUMN_STYLES.get(column.key),
            no_wrap=column.key in ("time", "commit"),
            justify="center" if column.key == "result" else "left",
        )

    for row in rows:
        table.add_row(*(escape(cell) for cell in row))

    return table


def format_history_json(columns: Sequence[ColumnSpec], rows: Sequence[Sequence[str]]) -> str:
    """Format history rows as a JSON array of objects keyed by column key.

    A column requested twice appears once per object.
    """
    keys = [column.key for column in columns]
    return json.dumps([dict(zip(keys, row, strict=True)) for row in rows], indent=2)


def create_columns_table() -> Table:
    """Create a Rich table describing every available history column."""
    table = Table(
        title="Available Columns",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Key", style="ref_name", no_wrap=True)
    table.add_column("Title")
    table.add_column("Description", style="muted")
    table.add_column("Default", justify="center")

    for column in HISTORY_COLUMNS:
        table.add_row(
            column.key,
            column.title,
            column.description,
            "[success]yes[/]" if column.default_visible else "",
        )

    return table


def create_remote_table(entries: Sequence[RemoteListingEntry], show_details: bool) -> Table:
    """Create a Rich table of remote refs.

    Args:
        entries: Entries to display, already sorted.
        show_details: Add commit and size columns.

    Returns:
        Rich Table configured for ls-remote output.
    """
    table = Table(
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Ref" if show_details else "Name", style="ref_name", no_wrap=True)
    if show_details:
        table.add_column("Commit", style="commit", no_wrap=True)
        table.add_column("Installed", style="info", justify="right")
        table.add_column("Download", style="info", justify="right")

    for entry in entries:
        if show_details:
            remote_ref = entry.remote_ref
            table.add_row(
                escape(entry.name),
                remote_ref.commit[:12],
                format_size(remote_ref.installed_size),
                format_size(remote_ref.download_size),
            )
        else:
            table.add_row(escape(entry.name))

    return table
