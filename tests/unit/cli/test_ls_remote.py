"""Unit tests for ls-remote command.

Tests for the CLI ls-remote command implementation.
"""

from collections.abc import Iterator
from unittest.mock import MagicMock, patch

import pytest
from fpctl.cli.main import app
from fpctl.models.remote import RemoteRef
from fpctl.remotes import RemoteStoreError
from typer.testing import CliRunner

runner = CliRunner()


@pytest.fixture
def mock_store() -> Iterator[MagicMock]:
    """Patch the flatpak remote store used by ls-remote."""
    with (
        patch("fpctl.cli.commands.ls_remote.FlatpakRemoteStore") as mock_cls,
        patch(
            "fpctl.cli.commands.ls_remote.get_supported_arches",
            return_value=["x86_64", "i386"],
        ),
    ):
        store = mock_cls.return_value
        store.is_available.return_value = True
        store.list_remote_refs.return_value = [
            RemoteRef("app/org.a.Calc/x86_64/stable", "1a2b3c4d5e6f7a8b", 4_100_000, 1_200_000),
            RemoteRef("app/org.a.Calc/aarch64/stable", "2b3c4d5e6f7a8b9c"),
            RemoteRef("app/org.b.Web/x86_64/stable", "3c4d5e6f7a8b9c0d"),
            RemoteRef("runtime/org.a.Base/x86_64/45", "4d5e6f7a8b9c0d1e"),
        ]
        store.list_deployed_commits.return_value = {
            "app/org.b.Web/x86_64/stable": "0000",
        }
        yield store


class TestLsRemoteCommand:
    """Tests for fpctl ls-remote command."""

    def test_lists_names(self, mock_store: MagicMock) -> None:
        """Apps and runtimes are listed by name."""
        result = runner.invoke(app, ["ls-remote", "flathub"])

        assert result.exit_code == 0
        assert "org.a.Calc" in result.stdout
        assert "org.b.Web" in result.stdout
        assert "org.a.Base" in result.stdout
        mock_store.list_deployed_commits.assert_not_called()

    def test_app_only(self, mock_store: MagicMock) -> None:
        """--app hides runtimes."""
        result = runner.invoke(app, ["ls-remote", "--app", "flathub"])

        assert "org.a.Calc" in result.stdout
        assert "org.a.Base" not in result.stdout

    def test_runtime_only(self, mock_store: MagicMock) -> None:
        """--runtime hides apps."""
        result = runner.invoke(app, ["ls-remote", "--runtime", "flathub"])

        assert "org.a.Base" in result.stdout
        assert "org.a.Calc" not in result.stdout

    def test_show_details(self, mock_store: MagicMock) -> None:
        """-d lists full refs with commit and sizes."""
        result = runner.invoke(app, ["ls-remote", "-d", "flathub"])

        assert result.exit_code == 0
        assert "app/org.a.Calc/x86_64/stable" in result.stdout
        assert "1a2b3c4d5e6f" in result.stdout
        assert "1a2b3c4d5e6f7" not in result.stdout
        assert "aarch64" not in result.stdout

    def test_arch_filter(self, mock_store: MagicMock) -> None:
        """--arch limits the listing to one arch."""
        result = runner.invoke(app, ["ls-remote", "-d", "--arch", "aarch64", "flathub"])

        assert "app/org.a.Calc/aarch64/stable" in result.stdout
        assert "org.b.Web" not in result.stdout

    def test_all_arches(self, mock_store: MagicMock) -> None:
        """--arch '*' lists every arch."""
        result = runner.invoke(app, ["ls-remote", "-d", "--arch", "*", "flathub"])

        assert "app/org.a.Calc/aarch64/stable" in result.stdout
        assert "app/org.a.Calc/x86_64/stable" in result.stdout

    def test_updates(self, mock_store: MagicMock) -> None:
        """--updates shows only refs deployed at another commit."""
        result = runner.invoke(app, ["ls-remote", "--updates", "flathub"])

        assert result.exit_code == 0
        assert "org.b.Web" in result.stdout
        assert "org.a.Calc" not in result.stdout
        mock_store.list_deployed_commits.assert_called_once()

    def test_no_matches(self, mock_store: MagicMock) -> None:
        """An empty listing prints a message."""
        mock_store.list_remote_refs.return_value = []

        result = runner.invoke(app, ["ls-remote", "flathub"])

        assert result.exit_code == 0
        assert "No matching refs in remote flathub" in result.stdout

    def test_user_installation(self, mock_store: MagicMock) -> None:
        """--user lists through the user installation."""
        runner.invoke(app, ["ls-remote", "--user", "flathub"])

        installation = mock_store.list_remote_refs.call_args.args[1]
        assert installation.is_user is True

    def test_missing_remote(self, mock_store: MagicMock) -> None:
        """REMOTE is required."""
        result = runner.invoke(app, ["ls-remote"])

        assert result.exit_code == 1
        assert "REMOTE must be specified" in result.stderr

    def test_too_many_arguments(self, mock_store: MagicMock) -> None:
        """Only one remote can be given."""
        result = runner.invoke(app, ["ls-remote", "flathub", "fedora"])

        assert result.exit_code == 1
        assert "Too many arguments" in result.stderr

    def test_conflicting_installations(self, mock_store: MagicMock) -> None:
        """--user and --system together are rejected."""
        result = runner.invoke(app, ["ls-remote", "--user", "--system", "flathub"])

        assert result.exit_code == 1
        assert "Multiple installations" in result.stderr
        mock_store.list_remote_refs.assert_not_called()

    def test_unknown_installation(self, mock_store: MagicMock) -> None:
        """Unknown installations are reported."""
        result = runner.invoke(app, ["ls-remote", "--installation", "nope", "flathub"])

        assert result.exit_code == 1
        assert "Could not find installation nope" in result.stderr

    def test_flatpak_missing(self, mock_store: MagicMock) -> None:
        """A missing flatpak executable is reported."""
        mock_store.is_available.return_value = False

        result = runner.invoke(app, ["ls-remote", "flathub"])

        assert result.exit_code == 1
        assert "flatpak is not available" in result.stderr

    def test_store_error(self, mock_store: MagicMock) -> None:
        """Errors from flatpak are reported."""
        mock_store.list_remote_refs.side_effect = RemoteStoreError("Remote nope not found")

        result = runner.invoke(app, ["ls-remote", "nope"])

        assert result.exit_code == 1
        assert "Remote nope not found" in result.stderr
