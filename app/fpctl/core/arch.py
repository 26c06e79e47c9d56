"""Flatpak architecture names for the running machine."""

import platform

# platform.machine() values mapped to flatpak arch names
_MACHINE_TO_ARCH: dict[str, str] = {
    "x86_64": "x86_64",
    "amd64": "x86_64",
    "i386": "i386",
    "i486": "i386",
    "i586": "i386",
    "i686": "i386",
    "aarch64": "aarch64",
    "arm64": "aarch64",
    "armv6l": "arm",
    "armv7l": "arm",
    "armv8l": "arm",
    "arm": "arm",
}

# Additional arches a host can run
_COMPAT_ARCHES: dict[str, tuple[str, ...]] = {
    "x86_64": ("i386",),
    "aarch64": ("arm",),
}


def get_default_arch(machine: str | None = None) -> str:
    """Get the flatpak arch of this machine.

    Args:
        machine: Override for platform.machine().

    Returns:
        Flatpak arch name; unknown machines are returned lowercased.
    """
    machine = (machine if machine is not None else platform.machine()).lower()
    return _MACHINE_TO_ARCH.get(machine, machine)


def get_supported_arches(machine: str | None = None) -> list[str]:
    """Get all arches this machine can run, the default one first."""
    arch = get_default_arch(machine)
    return [arch, *_COMPAT_ARCHES.get(arch, ())]
