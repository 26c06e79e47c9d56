"""Installation discovery and selection.

Flatpak knows three kinds of installations:

- the default system-wide installation (id ``default``),
- the per-user installation,
- extra system-wide installations declared in
  ``/etc/flatpak/installations.d/*.conf`` key files::

      [Installation "extra"]
      Path=/opt/flatpak
      DisplayName=Extra Installation

This module finds them and turns the ``--user``, ``--system`` and
``--installation`` flags into a list of installations.
"""

import configparser
import logging
import re
from collections.abc import Iterable
from pathlib import Path

from fpctl.core.paths import (
    get_installations_config_dir,
    get_system_installation_dir,
    get_user_installation_dir,
)
from fpctl.models.installation import DEFAULT_SYSTEM_ID, Installation

logger = logging.getLogger(__name__)

_SECTION_PATTERN = re.compile(r'^Installation\s+"(?P<id>[^"]+)"$')


class InstallationNotFoundError(LookupError):
    """Raised when --installation names an unknown installation."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Could not find installation {name}")
        self.name = name


class InstallationConflictError(ValueError):
    """Raised when a single-installation command gets several."""

    def __init__(self) -> None:
        super().__init__(
            "Multiple installations specified for a command that works on one installation"
        )


def get_system_default() -> Installation:
    """Get the default system-wide installation."""
    return Installation(path=get_system_installation_dir(), id=DEFAULT_SYSTEM_ID)


def get_user_installation() -> Installation:
    """Get the per-user installation."""
    return Installation(path=get_user_installation_dir(), is_user=True)


def _parse_installation_file(path: Path) -> list[Installation]:
    parser = configparser.ConfigParser(interpolation=None, strict=False)
    parser.read(path, encoding="utf-8")

    installations: list[Installation] = []
    for section in parser.sections():
        match = _SECTION_PATTERN.match(section)
        if match is None:
            continue
        install_path = parser.get(section, "Path", fallback=None)
        if not install_path:
            logger.warning("No Path for installation %s in %s", match.group("id"), path)
            continue
        installations.append(
            Installation(
                path=Path(install_path),
                id=match.group("id"),
                display_name=parser.get(section, "DisplayName", fallback=None),
            )
        )
    return installations


def load_extra_installations(config_dir: Path | None = None) -> list[Installation]:
    """Read extra system installations from installations.d.

    Files are read in name order. Unreadable or malformed files are
    logged and skipped.

    Args:
        config_dir: Directory to scan. Defaults to /etc/flatpak/installations.d.

    Returns:
        Extra installations, in file and section order.
    """
    directory = config_dir or get_installations_config_dir()
    if not directory.is_dir():
        return []

    installations: list[Installation] = []
    for path in sorted(directory.glob("*.conf")):
        try:
            installations.extend(_parse_installation_file(path))
        except (configparser.Error, OSError, UnicodeDecodeError) as e:
            logger.warning("Skipping installation config %s: %s", path, e)
    return installations


def list_system_installations(config_dir: Path | None = None) -> list[Installation]:
    """List all system-wide installations, the default one first."""
    extras = [
        inst for inst in load_extra_installations(config_dir) if inst.id != DEFAULT_SYSTEM_ID
    ]
    return [get_system_default(), *extras]


def find_system_installation(name: str, config_dir: Path | None = None) -> Installation:
    """Find a system-wide installation by id.

    Args:
        name: Installation id ('default' for the default installation).
        config_dir: Override for the installations.d directory.

    Returns:
        The matching installation.

    Raises:
        InstallationNotFoundError: If no installation has this id.
    """
    for installation in list_system_installations(config_dir):
        if installation.id == name:
            return installation
    raise InstallationNotFoundError(name)


def select_installations(
    user: bool = False,
    system: bool = False,
    names: Iterable[str] | None = None,
    config_dir: Path | None = None,
) -> list[Installation] | None:
    """Resolve scope flags for commands that accept several installations.

    Args:
        user: --user was given.
        system: --system was given.
        names: Values of --installation.
        config_dir: Override for the installations.d directory.

    Returns:
        Selected installations, or None when no flag was given (meaning
        all installations).

    Raises:
        InstallationNotFoundError: If a named installation does not exist.
    """
    names = list(names or [])
    if not user and not system and not names:
        return None

    selected: list[Installation] = []
    if system:
        selected.append(get_system_default())
    if user:
        selected.append(get_user_installation())
    for name in names:
        if system and name == DEFAULT_SYSTEM_ID:
            continue
        selected.append(find_system_installation(name, config_dir))
    return selected


def select_single_installation(
    user: bool = False,
    system: bool = False,
    names: Iterable[str] | None = None,
    config_dir: Path | None = None,
) -> Installation:
    """Resolve scope flags for commands that work on one installation.

    Without flags the default system installation is used.

    Raises:
        InstallationConflictError: If more than one installation is selected.
        InstallationNotFoundError: If the named installation does not exist.
    """
    names = list(names or [])
    if (user and system) or (names and (user or system)) or len(names) > 1:
        raise InstallationConflictError

    if user:
        return get_user_installation()
    if names:
        return find_system_installation(names[0], config_dir)
    return get_system_default()


def scope_ids(installations: Iterable[Installation]) -> frozenset[str]:
    """Collect the journal scope ids of installations."""
    return frozenset(installation.scope_id for installation in installations)
