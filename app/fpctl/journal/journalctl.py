"""systemd journal backend.

Reads flatpak transaction records by streaming ``journalctl`` JSON output
in reverse order. Only records logged by the flatpak process with the
transaction message id are requested.
"""

import json
import logging
import subprocess
import tempfile
from collections.abc import Iterator
from typing import Any

from fpctl.journal.base import (
    JournalReadError,
    JournalUnavailableError,
    LogBackend,
    LogReader,
    LogRecord,
)
from fpctl.utils.shell import command_exists, open_stream

logger = logging.getLogger(__name__)

# MESSAGE_ID flatpak attaches to transaction log entries
TRANSACTION_MESSAGE_ID = "c7b39b1e006b464599465e105b361485"

# Process name flatpak entries are logged under
FLATPAK_COMM = "flatpak"


def _decode_value(name: str, value: Any) -> str | None:
    """Convert a journalctl JSON field value to a string.

    journalctl emits plain strings, arrays of byte values for data that is
    not valid UTF-8, arrays of values for repeated fields, and null for
    data it could not read.
    """
    if isinstance(value, str):
        return value
    if value is None:
        msg = f"Failed to get journal data ({name}): value not available"
        raise JournalReadError(msg)
    if isinstance(value, list):
        if not value:
            return None
        if all(isinstance(item, int) for item in value):
            try:
                raw = bytes(value)
            except ValueError as e:
                raise JournalReadError(f"Failed to get journal data ({name}): {e}") from e
            return raw.decode("utf-8", errors="replace")
        # Repeated field: first value wins
        return _decode_value(name, value[0])
    msg = f"Failed to get journal data ({name}): unexpected {type(value).__name__} value"
    raise JournalReadError(msg)


class JournalEntry(LogRecord):
    """A journal record parsed from one line of journalctl JSON output."""

    def __init__(self, data: dict[str, Any]) -> None:
        self._data = data

    def get_field(self, name: str) -> str | None:
        if name not in self._data:
            return None
        return _decode_value(name, self._data[name])

    def __repr__(self) -> str:
        return f"JournalEntry(cursor={self._data.get('__CURSOR')!r})"


class JournalctlReader(LogReader):
    """Reader backed by a running journalctl process.

    The process is started on construction and terminated in close().
    """

    # Seconds to wait for journalctl to exit after terminate()
    _TERMINATE_TIMEOUT: float = 5.0

    def __init__(self, args: list[str]) -> None:
        logger.debug("Opening journal: %s", " ".join(args))
        # Error output is collected in a file and read once stdout is done
        self._stderr = tempfile.TemporaryFile(mode="w+", encoding="utf-8", errors="replace")
        try:
            self._process = open_stream(args, stderr=self._stderr)
        except FileNotFoundError as e:
            self._stderr.close()
            raise JournalUnavailableError(f"Failed to open journal: {args[0]} not found") from e
        except OSError as e:
            self._stderr.close()
            raise JournalUnavailableError(f"Failed to open journal: {e}") from e
        self._closed = False

    def records(self) -> Iterator[LogRecord]:
        stdout = self._process.stdout
        if stdout is None or self._closed:
            msg = "Journal reader is closed"
            raise JournalReadError(msg)

        count = 0
        for line in stdout:
            line = line.strip()
            if not line:
                continue
            try:
                data = json.loads(line)
            except json.JSONDecodeError as e:
                raise JournalReadError(f"Failed to read journal entry: {e}") from e
            if not isinstance(data, dict):
                msg = "Failed to read journal entry: not a JSON object"
                raise JournalReadError(msg)
            count += 1
            yield JournalEntry(data)

        self._check_exit_status(count)

    def _check_exit_status(self, count: int) -> None:
        returncode = self._process.wait()
        if returncode == 0:
            return

        self._stderr.seek(0)
        stderr = self._stderr.read().strip()
        if not stderr and count == 0:
            # Newer journalctl versions exit non-zero when nothing matches
            logger.debug("journalctl exited with status %d and no entries", returncode)
            return
        detail = stderr or f"journalctl exited with status {returncode}"
        raise JournalReadError(f"Failed to read journal: {detail}")

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True

        process = self._process
        if process.poll() is None:
            process.terminate()
        try:
            process.wait(timeout=self._TERMINATE_TIMEOUT)
        except subprocess.TimeoutExpired:
            logger.warning("journalctl did not exit, killing it")
            process.kill()
            process.wait()

        if process.stdout is not None:
            process.stdout.close()
        self._stderr.close()


class JournalctlBackend(LogBackend):
    """Backend reading the systemd journal through journalctl.

    Attributes:
        command: journalctl executable name or path.
    """

    def __init__(self, command: str = "journalctl") -> None:
        self.command = command

    @property
    def name(self) -> str:
        return "journal"

    def is_available(self) -> bool:
        return command_exists(self.command)

    def build_args(self) -> list[str]:
        """Build the journalctl command line.

        Both matches apply to different fields, so journalctl ANDs them.
        """
        return [
            self.command,
            "--reverse",
            "--output=json",
            "--all",
            "--no-pager",
            "--quiet",
            f"_COMM={FLATPAK_COMM}",
            f"MESSAGE_ID={TRANSACTION_MESSAGE_ID}",
        ]

    def open(self) -> LogReader:
        """Start journalctl and return a reader over its output.

        Raises:
            JournalUnavailableError: If journalctl cannot be started.
        """
        return JournalctlReader(self.build_args())
