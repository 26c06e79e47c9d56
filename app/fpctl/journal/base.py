"""Abstract interfaces for structured log backends.

The history command reads flatpak transaction records from a structured,
append-only log. A LogBackend opens a LogReader, which yields LogRecord
instances newest first and must be closed on every exit path.

Example:
    >>> backend = JournalctlBackend()
    >>> with backend.open() as reader:
    ...     for record in reader:
    ...         print(record.get_field("REF"))
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from types import TracebackType
from typing import Self


class JournalError(Exception):
    """Base exception for log backend errors."""


class JournalUnavailableError(JournalError):
    """Raised when the log backend cannot be opened at all."""


class JournalReadError(JournalError):
    """Raised when an open log fails to deliver a record or field."""


class LogRecord(ABC):
    """A single read-only structured log event."""

    @abstractmethod
    def get_field(self, name: str) -> str | None:
        """Look up a field by name.

        Args:
            name: Field name (e.g., 'REF', '_SOURCE_REALTIME_TIMESTAMP').

        Returns:
            The field value, or None if the record has no such field.

        Raises:
            JournalReadError: If the field exists but cannot be read.
        """


class LogReader(ABC):
    """Iterator over log records, most recent first.

    Readers are single-use: iterate once, then close. Using the reader as
    a context manager guarantees the underlying handle is released.
    """

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __iter__(self) -> Iterator[LogRecord]:
        return self.records()

    @abstractmethod
    def records(self) -> Iterator[LogRecord]:
        """Yield records in reverse chronological order.

        Raises:
            JournalReadError: If the backend fails while reading.
        """

    @abstractmethod
    def close(self) -> None:
        """Release the underlying handle. Safe to call more than once."""


class LogBackend(ABC):
    """Capability interface for opening the transaction log."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Short backend name for messages and debugging."""

    @abstractmethod
    def is_available(self) -> bool:
        """Check if this backend can be opened on the current system."""

    @abstractmethod
    def open(self) -> LogReader:
        """Open a reader over flatpak transaction records.

        Returns:
            A LogReader the caller must close.

        Raises:
            JournalUnavailableError: If the log cannot be opened.
        """
