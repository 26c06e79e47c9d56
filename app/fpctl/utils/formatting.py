"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import sys

from rich.console import Console
from rich.markup import escape

from fpctl.core.theme import get_theme

# Decimal size units, as used by flatpak's own output
_SIZE_UNITS = ("kB", "MB", "GB", "TB", "PB")


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals, None otherwise to let
    Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def format_size(size_bytes: int | None) -> str:
    """Format a byte count with decimal units.

    Args:
        size_bytes: Size in bytes, or None if unknown.

    Returns:
        Human-readable size (e.g., '1 byte', '512 bytes', '1.2 MB'), or an
        empty string for unknown sizes.
    """
    if size_bytes is None:
        return ""
    if size_bytes < 1000:
        return f"{size_bytes} byte" if size_bytes == 1 else f"{size_bytes} bytes"

    value = float(size_bytes)
    unit = _SIZE_UNITS[0]
    for unit in _SIZE_UNITS:
        value /= 1000
        if value < 1000:
            break
    return f"{value:.1f} {unit}"


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{escape(message)}[/]")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}")
