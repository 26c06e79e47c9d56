"""Abstract base class for remote metadata stores.

A remote store answers two questions for ls-remote: which refs does a
remote offer, and which commits are deployed locally.
"""

from abc import ABC, abstractmethod

from fpctl.models.installation import Installation
from fpctl.models.remote import RemoteRef


class RemoteStoreError(Exception):
    """Raised when remote or deployment metadata cannot be read."""


class RemoteStore(ABC):
    """Abstract base class for remote metadata stores.

    Example:
        >>> store = FlatpakRemoteStore()
        >>> for remote_ref in store.list_remote_refs("flathub", get_system_default()):
        ...     print(remote_ref.ref, remote_ref.commit)
    """

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the store can be queried on this system."""

    @abstractmethod
    def list_remote_refs(self, remote: str, installation: Installation) -> list[RemoteRef]:
        """List every ref a remote offers.

        Args:
            remote: Remote name as configured in the installation.
            installation: Installation the remote is configured in.

        Returns:
            Refs with their current commits (and sizes when known).

        Raises:
            RemoteStoreError: If the remote cannot be listed.
        """

    @abstractmethod
    def list_deployed_commits(self, installation: Installation) -> dict[str, str]:
        """Map each deployed ref to its active commit.

        Raises:
            RemoteStoreError: If the installation cannot be listed.
        """
