"""Data models for fpctl.

This module exports the core data structures used throughout the application.
"""

from fpctl.models.history import ColumnSpec, HistoryQuery, TimeWindow
from fpctl.models.installation import DEFAULT_SYSTEM_ID, Installation
from fpctl.models.ref import DecomposedRef, RefKind, decompose_ref
from fpctl.models.remote import RemoteRef

__all__ = [
    "DEFAULT_SYSTEM_ID",
    "ColumnSpec",
    "DecomposedRef",
    "HistoryQuery",
    "Installation",
    "RefKind",
    "RemoteRef",
    "TimeWindow",
    "decompose_ref",
]
