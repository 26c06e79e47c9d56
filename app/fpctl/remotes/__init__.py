"""Remote metadata stores for ls-remote.

This module exports the store interface and its flatpak CLI implementation.
"""

from fpctl.remotes.base import RemoteStore, RemoteStoreError
from fpctl.remotes.flatpak import FlatpakRemoteStore

__all__ = ["FlatpakRemoteStore", "RemoteStore", "RemoteStoreError"]
