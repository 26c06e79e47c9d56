"""History query models.

This module defines the data structures that describe a history query:
the output columns, the time window and the query itself. They are
constructed per invocation and passed explicitly to the query engine.
"""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True, slots=True)
class ColumnSpec:
    """Display metadata for one history output column.

    Attributes:
        key: Stable identifier used with --columns (e.g., 'time').
        title: Table header label.
        description: Help text shown by --show-columns.
        default_visible: Whether the column is shown without --columns.
        visible_in_wide_mode: Whether the column is part of --columns=all.
    """

    key: str
    title: str
    description: str
    default_visible: bool = False
    visible_in_wide_mode: bool = True

    def __post_init__(self) -> None:
        """Validate column data after initialization."""
        if not self.key:
            msg = "Column key cannot be empty"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class TimeWindow:
    """Optional time range used to filter log records.

    Both bounds are naive local datetimes and both are exclusive.

    Attributes:
        since: Keep only records strictly after this instant.
        until: Keep only records strictly before this instant.
    """

    since: datetime | None = None
    until: datetime | None = None

    @property
    def is_bounded(self) -> bool:
        """Check if at least one bound is set."""
        return self.since is not None or self.until is not None

    def contains(self, when: datetime) -> bool:
        """Check whether an instant falls inside the window.

        Args:
            when: Instant to test, naive local time.

        Returns:
            True if the instant is strictly between the set bounds.
        """
        if self.since is not None and (self.since - when).total_seconds() >= 0:
            return False
        if self.until is not None and (when - self.until).total_seconds() >= 0:
            return False
        return True


@dataclass(frozen=True, slots=True)
class HistoryQuery:
    """Configuration for a single history query.

    Attributes:
        columns: Columns to project, in output order.
        scopes: Installation scope ids to keep, or None for all scopes.
        window: Time window to apply.
    """

    columns: tuple[ColumnSpec, ...]
    scopes: frozenset[str] | None = None
    window: TimeWindow = field(default_factory=TimeWindow)
