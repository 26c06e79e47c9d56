"""Flatpak ref model.

A ref identifies an installable unit and has the form
``kind/name/arch/branch``, e.g. ``app/org.gnome.Calculator/x86_64/stable``.
"""

from dataclasses import dataclass
from enum import Enum


class RefKind(str, Enum):
    """Kind of installable unit encoded in a ref."""

    APP = "app"
    RUNTIME = "runtime"


@dataclass(frozen=True, slots=True)
class DecomposedRef:
    """A ref split into its four components.

    Attributes:
        kind: Whether the ref names an application or a runtime.
        name: Application or runtime ID (e.g., 'org.gnome.Calculator').
        arch: Architecture (e.g., 'x86_64').
        branch: Branch (e.g., 'stable').
    """

    kind: RefKind
    name: str
    arch: str
    branch: str

    def __str__(self) -> str:
        return f"{self.kind.value}/{self.name}/{self.arch}/{self.branch}"


def decompose_ref(ref: str) -> DecomposedRef | None:
    """Split a ref string into its components.

    Malformed refs are not an error: callers render them as empty fields.

    Args:
        ref: Ref string of the form ``kind/name/arch/branch``.

    Returns:
        DecomposedRef, or None if the string is not a valid ref.
    """
    parts = ref.split("/")
    if len(parts) != 4:
        return None

    kind, name, arch, branch = parts
    if not name or not arch or not branch:
        return None

    try:
        ref_kind = RefKind(kind)
    except ValueError:
        return None

    return DecomposedRef(kind=ref_kind, name=name, arch=arch, branch=branch)
