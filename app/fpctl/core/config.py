"""fpctl configuration.

Configuration is read from ~/.config/fpctl/config.toml. Every setting is
optional; a missing file means defaults. Example::

    log_backend = "journal"
    journalctl_command = "journalctl"

    [history]
    columns = ["time", "change", "application", "branch", "result"]
    limit = 50
"""

import tomllib
from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from fpctl.core.paths import get_config_path

# "unsupported" disables journal access (e.g. on systems without systemd)
LogBackendName = Literal["journal", "unsupported"]


class HistoryConfig(BaseModel):
    """Defaults for the history command.

    Attributes:
        columns: Column keys used when --columns is not given.
        limit: Maximum number of rows used when --limit is not given.
    """

    model_config = ConfigDict(extra="forbid")

    columns: Annotated[
        list[str] | None,
        Field(description="Default column keys (None = built-in defaults)"),
    ] = None
    limit: Annotated[
        int | None,
        Field(ge=1, description="Default row limit (None = unlimited)"),
    ] = None


class FpctlConfig(BaseModel):
    """Top-level fpctl configuration.

    Attributes:
        log_backend: Which log backend history reads from.
        journalctl_command: journalctl executable name or path.
        flatpak_command: flatpak executable name or path.
        history: History command defaults.
    """

    model_config = ConfigDict(extra="forbid")

    log_backend: Annotated[
        LogBackendName,
        Field(description="Log backend for history"),
    ] = "journal"
    journalctl_command: Annotated[
        str,
        Field(min_length=1, description="journalctl executable"),
    ] = "journalctl"
    flatpak_command: Annotated[
        str,
        Field(min_length=1, description="flatpak executable"),
    ] = "flatpak"
    history: HistoryConfig = Field(default_factory=HistoryConfig)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the config file is not valid TOML."""


def load_config(path: Path | None = None) -> FpctlConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default path.

    Returns:
        Validated configuration; defaults if the file does not exist.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or does not match the schema.
    """
    config_path = path or get_config_path()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return FpctlConfig()
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    try:
        return FpctlConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e
