"""Structured log backends for the history command.

This module exports the backend interface, its implementations and the
factory that picks one based on configuration.
"""

import logging

from fpctl.core.config import FpctlConfig
from fpctl.journal.base import (
    JournalError,
    JournalReadError,
    JournalUnavailableError,
    LogBackend,
    LogReader,
    LogRecord,
)
from fpctl.journal.journalctl import JournalctlBackend, JournalEntry
from fpctl.journal.unsupported import UnsupportedBackend

logger = logging.getLogger(__name__)


def get_log_backend(config: FpctlConfig) -> LogBackend:
    """Select the log backend for this system.

    Args:
        config: Loaded fpctl configuration.

    Returns:
        JournalctlBackend when enabled and journalctl is installed,
        otherwise an UnsupportedBackend explaining why.
    """
    if config.log_backend == "unsupported":
        return UnsupportedBackend("Journal support is disabled in the configuration")

    backend = JournalctlBackend(config.journalctl_command)
    if not backend.is_available():
        logger.debug("%s not found, journal support unavailable", config.journalctl_command)
        return UnsupportedBackend(
            f"Journal support is not available: {config.journalctl_command} not found"
        )
    return backend


__all__ = [
    "JournalEntry",
    "JournalError",
    "JournalReadError",
    "JournalUnavailableError",
    "JournalctlBackend",
    "LogBackend",
    "LogReader",
    "LogRecord",
    "UnsupportedBackend",
    "get_log_backend",
]
