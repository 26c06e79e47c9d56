"""Filtering and naming of remote refs for ls-remote."""

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from fpctl.models.ref import RefKind, decompose_ref
from fpctl.models.remote import RemoteRef

logger = logging.getLogger(__name__)

# --arch value that disables the arch filter
ANY_ARCH = "*"


@dataclass(frozen=True, slots=True)
class RemoteListingOptions:
    """Filters for a remote listing.

    Attributes:
        show_details: List full refs (with commit and sizes) instead of names.
        apps: Include applications.
        runtimes: Include runtimes.
        only_updates: Only refs deployed locally at a different commit.
        arches: Arches to keep, or None for every arch.
    """

    show_details: bool = False
    apps: bool = True
    runtimes: bool = True
    only_updates: bool = False
    arches: tuple[str, ...] | None = None


@dataclass(frozen=True, slots=True)
class RemoteListingEntry:
    """One line of ls-remote output.

    Attributes:
        name: Application/runtime ID, or the full ref with details.
        remote_ref: The ref the entry was taken from.
    """

    name: str
    remote_ref: RemoteRef


def resolve_arch_filter(arch: str | None, supported: Sequence[str]) -> tuple[str, ...] | None:
    """Turn the --arch option into an arch filter.

    Args:
        arch: Value of --arch, or None if not given.
        supported: Arches this machine supports.

    Returns:
        None for '*', a single arch if one was given, else the supported arches.
    """
    if arch == ANY_ARCH:
        return None
    if arch is not None:
        return (arch,)
    return tuple(supported)


def list_remote(
    refs: Iterable[RemoteRef],
    options: RemoteListingOptions,
    deployed: Mapping[str, str] | None = None,
) -> list[RemoteListingEntry]:
    """Filter remote refs and name them for display.

    When several refs share a name (e.g. two branches without details),
    the first one seen wins.

    Args:
        refs: Refs offered by the remote.
        options: Listing filters.
        deployed: Deployed ref to active commit mapping; required for
            only_updates.

    Returns:
        Entries sorted by name.
    """
    deployed = deployed or {}
    entries: dict[str, RemoteListingEntry] = {}

    for remote_ref in refs:
        parts = decompose_ref(remote_ref.ref)
        if parts is None:
            logger.debug("Invalid remote ref %s", remote_ref.ref)
            continue

        if options.only_updates:
            active = deployed.get(remote_ref.ref)
            if active is None or active == remote_ref.commit:
                continue

        if options.arches is not None and parts.arch not in options.arches:
            continue
        if parts.kind == RefKind.RUNTIME and not options.runtimes:
            continue
        if parts.kind == RefKind.APP and not options.apps:
            continue

        name = remote_ref.ref if options.show_details else parts.name
        if name not in entries:
            entries[name] = RemoteListingEntry(name=name, remote_ref=remote_ref)

    return [entries[name] for name in sorted(entries)]
