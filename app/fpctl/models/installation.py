"""Installation model.

An installation is a directory holding deployed apps and runtimes. Each
one maps to a scope id that flatpak writes into the journal, which is how
history records are attributed to installations.
"""

from dataclasses import dataclass
from pathlib import Path

# Id flatpak gives to the default system-wide installation
DEFAULT_SYSTEM_ID = "default"


@dataclass(frozen=True, slots=True)
class Installation:
    """A configured Flatpak installation.

    Attributes:
        path: Installation base directory.
        is_user: True for the per-user installation.
        id: Installation id (None for the user installation, or a system
            installation whose id could not be discovered).
        display_name: Optional human-readable name from configuration.
    """

    path: Path
    is_user: bool = False
    id: str | None = None
    display_name: str | None = None

    @property
    def scope_id(self) -> str:
        """Scope id recorded in the journal for this installation.

        Returns:
            'user' for the user installation, 'system' for the default
            system installation, 'unknown' for a system installation
            without id, otherwise the installation id.
        """
        if self.is_user:
            return "user"
        if self.id is None:
            return "unknown"
        if self.id == DEFAULT_SYSTEM_ID:
            return "system"
        return self.id

    @property
    def label(self) -> str:
        """Human-readable name for messages."""
        return self.display_name or self.scope_id
