"""Unit tests for logging setup."""

import logging
from collections.abc import Iterator

import pytest
from fpctl.utils.log import setup_logging
from rich.logging import RichHandler


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    fpctl_level = logging.getLogger("fpctl").level
    yield
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("fpctl").setLevel(fpctl_level)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_quiet_by_default(self) -> None:
        """Without -v only warnings are shown."""
        setup_logging(0)

        assert logging.getLogger("fpctl").level == logging.WARNING
        assert logging.getLogger().level == logging.WARNING

    def test_verbose(self) -> None:
        """-v enables fpctl debug output only."""
        setup_logging(1)

        assert logging.getLogger("fpctl").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_very_verbose(self) -> None:
        """-vv enables debug output everywhere."""
        setup_logging(2)

        assert logging.getLogger().level == logging.DEBUG

    def test_single_handler(self) -> None:
        """Repeated setup does not stack handlers."""
        setup_logging(0)
        setup_logging(1)

        rich_handlers = [h for h in logging.getLogger().handlers if isinstance(h, RichHandler)]
        assert len(rich_handlers) == 1
