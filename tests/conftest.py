"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable, Iterator
from datetime import datetime
from pathlib import Path
from typing import Any

import pytest
from fpctl.journal.base import LogBackend, LogReader, LogRecord
from fpctl.journal.journalctl import JournalEntry


def to_usec(when: datetime) -> str:
    """Convert a naive local datetime to a journal microsecond timestamp."""
    return str(int(when.timestamp()) * 1_000_000 + when.microsecond)


class FakeReader(LogReader):
    """In-memory reader that records whether it was closed."""

    def __init__(self, records: list[LogRecord]) -> None:
        self._records = records
        self.closed = False
        self.yielded = 0

    def records(self) -> Iterator[LogRecord]:
        for record in self._records:
            self.yielded += 1
            yield record

    def close(self) -> None:
        self.closed = True


class FakeBackend(LogBackend):
    """In-memory backend counting open() calls."""

    def __init__(self, records: list[LogRecord]) -> None:
        self._records = records
        self.open_calls = 0
        self.readers: list[FakeReader] = []

    @property
    def name(self) -> str:
        return "fake"

    def is_available(self) -> bool:
        return True

    def open(self) -> LogReader:
        self.open_calls += 1
        reader = FakeReader(self._records)
        self.readers.append(reader)
        return reader


@pytest.fixture
def make_entry() -> Callable[..., JournalEntry]:
    """Factory for journal entries with flatpak transaction fields."""

    def _make(when: datetime | None = None, **fields: Any) -> JournalEntry:
        data: dict[str, Any] = {}
        if when is not None:
            data["_SOURCE_REALTIME_TIMESTAMP"] = to_usec(when)
        data.update(fields)
        return JournalEntry(data)

    return _make


@pytest.fixture
def make_backend() -> Callable[[list[LogRecord]], FakeBackend]:
    """Factory for in-memory log backends."""
    return FakeBackend


@pytest.fixture
def sample_entries(make_entry: Callable[..., JournalEntry]) -> list[JournalEntry]:
    """Three transactions, newest first: system, user, system."""
    return [
        make_entry(
            datetime(2024, 1, 10, 12, 0, 0),
            OPERATION="update",
            INSTALLATION="system",
            REF="app/org.gnome.Calculator/x86_64/stable",
            REMOTE="flathub",
            COMMIT="0123456789abcdef0123456789abcdef",
            RESULT="1",
            _UID="0",
            _COMM="flatpak",
            FLATPAK_VERSION="1.14.4",
        ),
        make_entry(
            datetime(2024, 1, 9, 8, 30, 0),
            OPERATION="install",
            INSTALLATION="user",
            REF="app/org.mozilla.firefox/x86_64/stable",
            REMOTE="flathub",
            COMMIT="fedcba9876543210",
            RESULT="1",
        ),
        make_entry(
            datetime(2024, 1, 8, 17, 45, 10),
            OPERATION="uninstall",
            INSTALLATION="system",
            REF="runtime/org.gnome.Platform/x86_64/45",
            REMOTE="flathub",
            RESULT="0",
        ),
    ]


@pytest.fixture
def mock_remote_ls_apps() -> str:
    """Sample flatpak remote-ls --app output."""
    return """org.gnome.Calculator/x86_64/stable\t1a2b3c4d5e6f7a8b9c0d\t4.1 MB\t1.2 MB
org.gnome.Calculator/aarch64/stable\t2b3c4d5e6f7a8b9c0d1e\t4.0 MB\t1.1 MB
org.mozilla.firefox/x86_64/stable\t3c4d5e6f7a8b9c0d1e2f\t250.3 MB\t98.7 MB"""


@pytest.fixture
def mock_remote_ls_runtimes() -> str:
    """Sample flatpak remote-ls --runtime output."""
    return """org.gnome.Platform/x86_64/45\t4d5e6f7a8b9c0d1e2f3a\t1.0 GB\t350.0 MB
org.gnome.Platform/i386/45\t5e6f7a8b9c0d1e2f3a4b\t900.0 MB\t300.0 MB"""


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point fpctl and flatpak directories into a temporary tree."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.setenv("FLATPAK_SYSTEM_DIR", str(tmp_path / "system"))
    monkeypatch.delenv("FLATPAK_USER_DIR", raising=False)
    monkeypatch.setenv("FLATPAK_CONFIG_DIR", str(tmp_path / "etc"))
    return tmp_path
