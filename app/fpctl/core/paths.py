"""Path management for fpctl.

This module provides the XDG Base Directory paths fpctl reads its own
configuration from, and the well-known Flatpak installation locations
(overridable through the same environment variables flatpak honours).

Defaults:
- fpctl config: ~/.config/fpctl/
- System installation: /var/lib/flatpak
- User installation: ~/.local/share/flatpak
- Flatpak configuration: /etc/flatpak
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "fpctl"

DEFAULT_SYSTEM_INSTALLATION_DIR = Path("/var/lib/flatpak")
DEFAULT_FLATPAK_CONFIG_DIR = Path("/etc/flatpak")


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get an XDG base directory respecting the environment override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the base directory (without the application name).
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base)
    return Path.home() / default_subdir


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/fpctl/ (or XDG_CONFIG_HOME/fpctl/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config") / APP_NAME


def get_config_path() -> Path:
    """Get the main configuration file path.

    Returns:
        Path to ~/.config/fpctl/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_user_theme_path() -> Path:
    """Get the user theme override path.

    Returns:
        Path to ~/.config/fpctl/theme.toml.
    """
    return get_config_dir() / "theme.toml"


def get_system_installation_dir() -> Path:
    """Get the default system-wide installation directory.

    Returns:
        Path from FLATPAK_SYSTEM_DIR, or /var/lib/flatpak.
    """
    override = os.environ.get("FLATPAK_SYSTEM_DIR")
    if override:
        return Path(override)
    return DEFAULT_SYSTEM_INSTALLATION_DIR


def get_user_installation_dir() -> Path:
    """Get the per-user installation directory.

    Returns:
        Path from FLATPAK_USER_DIR, or XDG_DATA_HOME/flatpak
        (~/.local/share/flatpak).
    """
    override = os.environ.get("FLATPAK_USER_DIR")
    if override:
        return Path(override)
    return _get_xdg_dir("XDG_DATA_HOME", ".local/share") / "flatpak"


def get_flatpak_config_dir() -> Path:
    """Get the system Flatpak configuration directory.

    Returns:
        Path from FLATPAK_CONFIG_DIR, or /etc/flatpak.
    """
    override = os.environ.get("FLATPAK_CONFIG_DIR")
    if override:
        return Path(override)
    return DEFAULT_FLATPAK_CONFIG_DIR


def get_installations_config_dir() -> Path:
    """Get the directory holding extra system installation definitions.

    Returns:
        Path to /etc/flatpak/installations.d.
    """
    return get_flatpak_config_dir() / "installations.d"
