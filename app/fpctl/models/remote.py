"""Remote ref models for ls-remote."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RemoteRef:
    """A ref offered by a remote repository.

    Attributes:
        ref: Full ref string (e.g., 'app/org.gnome.Calculator/x86_64/stable').
        commit: Commit checksum the remote currently points the ref at.
        installed_size: Installed size in bytes (if known).
        download_size: Download size in bytes (if known).
    """

    ref: str
    commit: str
    installed_size: int | None = None
    download_size: int | None = None

    def __post_init__(self) -> None:
        """Validate remote ref data after initialization."""
        if not self.ref:
            msg = "Ref cannot be empty"
            raise ValueError(msg)
