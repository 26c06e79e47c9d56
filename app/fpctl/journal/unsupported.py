"""Log backend for systems without journal support."""

from fpctl.journal.base import JournalUnavailableError, LogBackend, LogReader

DEFAULT_REASON = "Journal support is not available on this system"


class UnsupportedBackend(LogBackend):
    """Backend that always refuses to open.

    Selected when journal access is disabled in the configuration or the
    journal tools are missing, so history fails with a clear error instead
    of printing an empty report.
    """

    def __init__(self, reason: str = DEFAULT_REASON) -> None:
        self._reason = reason

    @property
    def name(self) -> str:
        return "unsupported"

    @property
    def reason(self) -> str:
        """Explanation shown when open() is attempted."""
        return self._reason

    def is_available(self) -> bool:
        return False

    def open(self) -> LogReader:
        """Always fails.

        Raises:
            JournalUnavailableError: Every time.
        """
        raise JournalUnavailableError(self._reason)
