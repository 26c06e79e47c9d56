"""Column registry for the history command.

Holds the fixed, ordered catalog of output columns and resolves a user
request (``--columns``) into the list of columns to project.
"""

from fpctl.models.history import ColumnSpec

# Expands to every column shown in wide mode
ALL_COLUMNS_KEYWORD = "all"

HISTORY_COLUMNS: tuple[ColumnSpec, ...] = (
    ColumnSpec("time", "Time", "Show when the change happened", default_visible=True),
    ColumnSpec("change", "Change", "Show the kind of change", default_visible=True),
    ColumnSpec("ref", "Ref", "Show the ref"),
    ColumnSpec(
        "application",
        "Application",
        "Show the application/runtime ID",
        default_visible=True,
    ),
    ColumnSpec("arch", "Arch", "Show the architecture"),
    ColumnSpec("branch", "Branch", "Show the branch", default_visible=True),
    ColumnSpec(
        "installation",
        "Installation",
        "Show the affected installation",
        default_visible=True,
    ),
    ColumnSpec("remote", "Remote", "Show the remote", default_visible=True),
    ColumnSpec("commit", "Commit", "Show the current commit", default_visible=True),
    ColumnSpec(
        "result",
        "Result",
        "Show whether change was successful",
        default_visible=True,
    ),
    ColumnSpec("user", "User", "Show the user doing the change"),
    ColumnSpec("tool", "Tool", "Show the tool that was used"),
    ColumnSpec("version", "Version", "Show the Flatpak version"),
)

_COLUMNS_BY_KEY: dict[str, ColumnSpec] = {column.key: column for column in HISTORY_COLUMNS}


class UnknownColumnError(ValueError):
    """Raised when --columns names a column that does not exist."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Unknown column: {key}")
        self.key = key


def get_column(key: str) -> ColumnSpec:
    """Look up a registered column by key (case-sensitive).

    Raises:
        UnknownColumnError: If no column has this key.
    """
    try:
        return _COLUMNS_BY_KEY[key]
    except KeyError:
        raise UnknownColumnError(key) from None


def default_columns() -> list[ColumnSpec]:
    """Columns shown when none are requested, in registry order."""
    return [column for column in HISTORY_COLUMNS if column.default_visible]


def parse_column_list(value: str) -> list[str]:
    """Split a --columns value into keys.

    Args:
        value: Comma-separated column keys, e.g. 'time,change'.

    Returns:
        Keys in the given order, stripped, without empty items.
    """
    return [key.strip() for key in value.split(",") if key.strip()]


def resolve_columns(requested: list[str] | None) -> list[ColumnSpec]:
    """Resolve requested column keys into column specs.

    Result order follows the request. Repeated keys are kept, so a column
    can be shown twice. The keyword 'all' expands in place to every
    wide-mode column.

    Args:
        requested: Column keys, or None/empty for the default columns.

    Returns:
        Ordered list of columns to project.

    Raises:
        UnknownColumnError: If a key is not registered.
    """
    if not requested:
        return default_columns()

    resolved: list[ColumnSpec] = []
    for key in requested:
        if key == ALL_COLUMNS_KEYWORD:
            resolved.extend(c for c in HISTORY_COLUMNS if c.visible_in_wide_mode)
        else:
            resolved.append(get_column(key))
    return resolved
