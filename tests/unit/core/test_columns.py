"""Unit tests for the history column registry."""

import pytest
from fpctl.core.columns import (
    ALL_COLUMNS_KEYWORD,
    HISTORY_COLUMNS,
    UnknownColumnError,
    default_columns,
    get_column,
    parse_column_list,
    resolve_columns,
)


class TestRegistry:
    """Tests for the column catalog."""

    def test_keys_are_unique(self) -> None:
        """Every column key appears once."""
        keys = [column.key for column in HISTORY_COLUMNS]
        assert len(keys) == len(set(keys))

    def test_registry_order(self) -> None:
        """Columns are registered in display order."""
        assert [column.key for column in HISTORY_COLUMNS] == [
            "time",
            "change",
            "ref",
            "application",
            "arch",
            "branch",
            "installation",
            "remote",
            "commit",
            "result",
            "user",
            "tool",
            "version",
        ]

    def test_default_columns(self) -> None:
        """Default columns are the default-visible ones in registry order."""
        assert [column.key for column in default_columns()] == [
            "time",
            "change",
            "application",
            "branch",
            "installation",
            "remote",
            "commit",
            "result",
        ]

    def test_get_column(self) -> None:
        """get_column returns the registered spec."""
        column = get_column("commit")
        assert column.title == "Commit"

    def test_get_column_is_case_sensitive(self) -> None:
        """Keys must match exactly."""
        with pytest.raises(UnknownColumnError):
            get_column("Time")


class TestParseColumnList:
    """Tests for splitting --columns values."""

    def test_splits_on_commas(self) -> None:
        """Keys are split and stripped."""
        assert parse_column_list("time, change ,ref") == ["time", "change", "ref"]

    def test_drops_empty_items(self) -> None:
        """Empty items are ignored."""
        assert parse_column_list("time,,change,") == ["time", "change"]

    def test_empty_value(self) -> None:
        """An empty value gives no keys."""
        assert parse_column_list("") == []


class TestResolveColumns:
    """Tests for resolve_columns."""

    def test_preserves_requested_order(self) -> None:
        """Columns come back in the order requested."""
        resolved = resolve_columns(["change", "time"])
        assert [column.key for column in resolved] == ["change", "time"]

    def test_keeps_duplicates(self) -> None:
        """A repeated key yields the column twice."""
        resolved = resolve_columns(["time", "change", "time"])
        assert [column.key for column in resolved] == ["time", "change", "time"]

    def test_none_gives_defaults(self) -> None:
        """No request means the default columns."""
        assert resolve_columns(None) == default_columns()

    def test_empty_gives_defaults(self) -> None:
        """An empty request means the default columns."""
        assert resolve_columns([]) == default_columns()

    def test_all_keyword(self) -> None:
        """'all' expands to every wide-mode column."""
        resolved = resolve_columns([ALL_COLUMNS_KEYWORD])
        assert resolved == [c for c in HISTORY_COLUMNS if c.visible_in_wide_mode]

    def test_all_keyword_in_place(self) -> None:
        """'all' expands where it appears in the list."""
        resolved = resolve_columns(["ref", "all"])
        assert resolved[0].key == "ref"
        assert len(resolved) == 1 + len(HISTORY_COLUMNS)

    def test_unknown_key(self) -> None:
        """Unknown keys raise UnknownColumnError naming the key."""
        with pytest.raises(UnknownColumnError, match="Unknown column: bogus") as exc_info:
            resolve_columns(["time", "bogus"])

        assert exc_info.value.key == "bogus"
