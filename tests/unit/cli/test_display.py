"""Unit tests for display helpers."""

import json

from fpctl.cli.display import (
    create_columns_table,
    create_history_table,
    create_remote_table,
    format_history_json,
)
from fpctl.core.columns import HISTORY_COLUMNS, resolve_columns
from fpctl.core.remote_listing import RemoteListingEntry
from fpctl.models.remote import RemoteRef


class TestHistoryTable:
    """Tests for create_history_table."""

    def test_one_column_per_spec(self) -> None:
        """Headers follow the requested columns, duplicates included."""
        columns = resolve_columns(["time", "change", "time"])

        table = create_history_table(columns, [["12:00:00", "install", "12:00:00"]])

        assert [column.header for column in table.columns] == ["Time", "Change", "Time"]
        assert table.row_count == 1

    def test_escapes_markup(self) -> None:
        """Cell text is not interpreted as markup."""
        table = create_history_table(resolve_columns(["ref"]), [["[bold]x[/bold]"]])

        cells = list(table.columns[0].cells)
        assert cells == ["\\[bold]x\\[/bold]"]


class TestHistoryJson:
    """Tests for format_history_json."""

    def test_keys_by_column(self) -> None:
        """Rows become objects keyed by column key."""
        columns = resolve_columns(["change", "remote"])

        output = format_history_json(columns, [["install", "flathub"]])

        assert json.loads(output) == [{"change": "install", "remote": "flathub"}]

    def test_empty(self) -> None:
        """No rows give an empty array."""
        assert json.loads(format_history_json(resolve_columns(None), [])) == []


class TestColumnsTable:
    """Tests for create_columns_table."""

    def test_lists_every_column(self) -> None:
        """Every registered column has a row."""
        table = create_columns_table()

        assert table.row_count == len(HISTORY_COLUMNS)
        assert list(table.columns[0].cells) == [column.key for column in HISTORY_COLUMNS]


class TestRemoteTable:
    """Tests for create_remote_table."""

    def test_names_only(self) -> None:
        """Without details only names are shown."""
        entry = RemoteListingEntry("org.a.Calc", RemoteRef("app/org.a.Calc/x86_64/stable", "c"))

        table = create_remote_table([entry], show_details=False)

        assert [column.header for column in table.columns] == ["Name"]

    def test_details(self) -> None:
        """With details commit and sizes are shown."""
        remote_ref = RemoteRef(
            "app/org.a.Calc/x86_64/stable",
            "0123456789abcdef",
            installed_size=4_100_000,
            download_size=None,
        )
        entry = RemoteListingEntry(remote_ref.ref, remote_ref)

        table = create_remote_table([entry], show_details=True)

        assert [column.header for column in table.columns] == [
            "Ref",
            "Commit",
            "Installed",
            "Download",
        ]
        assert list(table.columns[1].cells) == ["0123456789ab"]
        assert list(table.columns[2].cells) == ["4.1 MB"]
        assert list(table.columns[3].cells) == [""]
