"""Unit tests for the installation model."""

from pathlib import Path

import pytest
from fpctl.models.installation import DEFAULT_SYSTEM_ID, Installation


class TestInstallation:
    """Tests for Installation."""

    def test_user_scope(self) -> None:
        """The user installation maps to scope 'user'."""
        assert Installation(path=Path("/home/u/.local/share/flatpak"), is_user=True).scope_id == (
            "user"
        )

    def test_default_system_scope(self) -> None:
        """The default system installation maps to scope 'system'."""
        installation = Installation(path=Path("/var/lib/flatpak"), id=DEFAULT_SYSTEM_ID)
        assert installation.scope_id == "system"

    def test_extra_scope(self) -> None:
        """Extra installations map to their id."""
        assert Installation(path=Path("/opt/flatpak"), id="extra").scope_id == "extra"

    def test_unknown_scope(self) -> None:
        """A system installation without id maps to 'unknown'."""
        assert Installation(path=Path("/srv/flatpak")).scope_id == "unknown"

    def test_label_prefers_display_name(self) -> None:
        """label uses the display name when set."""
        installation = Installation(path=Path("/opt"), id="extra", display_name="Extra")
        assert installation.label == "Extra"
        assert Installation(path=Path("/opt"), id="extra").label == "extra"

    def test_is_frozen(self) -> None:
        """Installations are immutable."""
        installation = Installation(path=Path("/opt"))
        with pytest.raises(AttributeError):
            installation.id = "other"  # type: ignore[misc]
