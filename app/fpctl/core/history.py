"""History query engine.

Streams flatpak transaction records from a log backend (newest first),
drops records outside the requested installation scopes and time window,
and projects each remaining record onto the requested columns.

Projection is table-driven: PROJECTIONS maps each column key to a
function producing its display string from a record.
"""

import logging
import pwd
from collections.abc import Callable, Generator
from datetime import datetime, timedelta

from fpctl.journal.base import JournalReadError, LogBackend, LogRecord
from fpctl.models.history import HistoryQuery
from fpctl.models.ref import DecomposedRef, decompose_ref

logger = logging.getLogger(__name__)

# Journal fields written by flatpak for each transaction operation
FIELD_TIMESTAMP = "_SOURCE_REALTIME_TIMESTAMP"
FIELD_OPERATION = "OPERATION"
FIELD_INSTALLATION = "INSTALLATION"
FIELD_REF = "REF"
FIELD_REMOTE = "REMOTE"
FIELD_COMMIT = "COMMIT"
FIELD_RESULT = "RESULT"
FIELD_UID = "_UID"
FIELD_COMM = "_COMM"
FIELD_VERSION = "FLATPAK_VERSION"

COMMIT_DISPLAY_LENGTH = 12
RESULT_MARK = "✓"

Projection = Callable[[LogRecord], str]


def record_time(record: LogRecord) -> datetime:
    """Get the local time a record was logged at.

    Args:
        record: Log record.

    Returns:
        Naive local datetime with microsecond precision.

    Raises:
        JournalReadError: If the timestamp is missing or not a number.
    """
    value = record.get_field(FIELD_TIMESTAMP)
    if value is None:
        msg = f"Journal entry has no {FIELD_TIMESTAMP} field"
        raise JournalReadError(msg)
    try:
        seconds, micros = divmod(int(value.strip()), 1_000_000)
        return datetime.fromtimestamp(seconds) + timedelta(microseconds=micros)
    except (ValueError, OverflowError, OSError):
        msg = f"Invalid {FIELD_TIMESTAMP} value: {value!r}"
        raise JournalReadError(msg) from None


def _raw(field: str) -> Projection:
    def project(record: LogRecord) -> str:
        return record.get_field(field) or ""

    return project


def _ref_part(attr: str) -> Projection:
    def project(record: LogRecord) -> str:
        ref = record.get_field(FIELD_REF)
        if ref is None:
            return ""
        parts: DecomposedRef | None = decompose_ref(ref)
        if parts is None:
            return ""
        return getattr(parts, attr)

    return project


def _project_time(record: LogRecord) -> str:
    return record_time(record).strftime("%H:%M:%S")


def _project_commit(record: LogRecord) -> str:
    commit = record.get_field(FIELD_COMMIT) or ""
    return commit[:COMMIT_DISPLAY_LENGTH]


def _project_result(record: LogRecord) -> str:
    result = record.get_field(FIELD_RESULT)
    if result is None or result == "0":
        return ""
    return RESULT_MARK


def _project_user(record: LogRecord) -> str:
    uid = record.get_field(FIELD_UID)
    if uid is None:
        return ""
    return lookup_user_name(uid)


def lookup_user_name(uid: str) -> str:
    """Resolve a numeric user id to an account name.

    Args:
        uid: Numeric user id as a string.

    Returns:
        The account name, or the id itself if it cannot be resolved.
    """
    try:
        return pwd.getpwuid(int(uid)).pw_name
    except (KeyError, ValueError, OverflowError):
        return uid


PROJECTIONS: dict[str, Projection] = {
    "time": _project_time,
    "change": _raw(FIELD_OPERATION),
    "ref": _raw(FIELD_REF),
    "application": _ref_part("name"),
    "arch": _ref_part("arch"),
    "branch": _ref_part("branch"),
    "installation": _raw(FIELD_INSTALLATION),
    "remote": _raw(FIELD_REMOTE),
    "commit": _project_commit,
    "result": _project_result,
    "user": _project_user,
    "tool": _raw(FIELD_COMM),
    "version": _raw(FIELD_VERSION),
}


def project_column(key: str, record: LogRecord) -> str:
    """Produce the display string of one column for one record.

    Args:
        key: Column key.
        record: Log record.

    Returns:
        Display string (empty when the source field is absent).

    Raises:
        KeyError: If no projection exists for the key.
        JournalReadError: If a required field cannot be read.
    """
    return PROJECTIONS[key](record)


def _matches_scope(record: LogRecord, scopes: frozenset[str]) -> bool:
    # Records without installation data never match a scope filter
    installation = record.get_field(FIELD_INSTALLATION)
    return installation is not None and installation in scopes


def query_history(query: HistoryQuery, backend: LogBackend) -> Generator[list[str], None, None]:
    """Run a history query.

    Rows are produced lazily in the backend's order (newest first). The
    reader is closed when the iterator is exhausted, closed, or raises.
    With no columns, the log is not opened at all.

    Args:
        query: Columns, scope filter and time window.
        backend: Log backend to read from.

    Yields:
        One list of display strings per matching record.

    Raises:
        JournalUnavailableError: If the log cannot be opened.
        JournalReadError: If a record or required field cannot be read.
    """
    if not query.columns:
        logger.debug("No columns requested, skipping history query")
        return

    projections = [PROJECTIONS[column.key] for column in query.columns]
    window = query.window

    with backend.open() as reader:
        for record in reader:
            if query.scopes is not None and not _matches_scope(record, query.scopes):
                continue
            if window.is_bounded and not window.contains(record_time(record)):
                continue
            yield [project(record) for project in projections]
