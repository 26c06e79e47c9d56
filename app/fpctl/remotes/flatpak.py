"""Remote store backed by the flatpak CLI.

Uses ``flatpak remote-ls`` for remote contents and ``flatpak list`` for
deployed commits. Both are run once for apps and once for runtimes so
every ref can be given its kind prefix.
"""

import logging
import os
import re
import subprocess

from fpctl.models.installation import DEFAULT_SYSTEM_ID, Installation
from fpctl.models.ref import RefKind
from fpctl.models.remote import RemoteRef
from fpctl.remotes.base import RemoteStore, RemoteStoreError
from fpctl.utils.shell import CommandResult, command_exists, run_command

logger = logging.getLogger(__name__)


class FlatpakRemoteStore(RemoteStore):
    """Remote store that shells out to flatpak.

    Attributes:
        command: flatpak executable name or path.
    """

    # Regex for sizes like "1.2 GB", "512 bytes", "100 kB"
    _SIZE_PATTERN = re.compile(r"^\s*([\d.]+)\s*(bytes?|kB|MB|GB|TB|PB)\s*$", re.IGNORECASE)

    # flatpak prints decimal units
    _SIZE_MULTIPLIERS: dict[str, int] = {
        "BYTE": 1,
        "BYTES": 1,
        "KB": 1000,
        "MB": 1000**2,
        "GB": 1000**3,
        "TB": 1000**4,
        "PB": 1000**5,
    }

    # Remote listings can be slow on first summary download
    _FLATPAK_TIMEOUT: float = 300.0

    _KIND_FLAGS: tuple[tuple[RefKind, str], ...] = (
        (RefKind.APP, "--app"),
        (RefKind.RUNTIME, "--runtime"),
    )

    def __init__(self, command: str = "flatpak") -> None:
        self.command = command

    def is_available(self) -> bool:
        return command_exists(self.command)

    def list_remote_refs(self, remote: str, installation: Installation) -> list[RemoteRef]:
        logger.debug("Listing remote %s in installation %s", remote, installation.label)
        refs: list[RemoteRef] = []
        for kind, flag in self._KIND_FLAGS:
            result = self._run(
                [
                    "remote-ls",
                    *self._scope_args(installation),
                    flag,
                    "--all",
                    "--arch=*",
                    "--columns=ref,commit,installed-size,download-size",
                    remote,
                ]
            )
            for line in result.stdout.splitlines():
                remote_ref = self._parse_remote_line(line, kind)
                if remote_ref is not None:
                    refs.append(remote_ref)
        return refs

    def list_deployed_commits(self, installation: Installation) -> dict[str, str]:
        deployed: dict[str, str] = {}
        for kind, flag in self._KIND_FLAGS:
            result = self._run(
                ["list", *self._scope_args(installation), flag, "--all", "--columns=ref,active"]
            )
            for line in result.stdout.splitlines():
                parts = line.split("\t")
                if len(parts) < 2 or not parts[0].strip() or not parts[1].strip():
                    continue
                deployed[self._full_ref(parts[0].strip(), kind)] = parts[1].strip()
        return deployed

    def _run(self, args: list[str]) -> CommandResult:
        """Run a flatpak subcommand in the C locale."""
        full_args = [self.command, *args]
        logger.debug("Running: %s", " ".join(full_args))
        try:
            result = run_command(
                full_args,
                timeout=self._FLATPAK_TIMEOUT,
                env={**os.environ, "LC_ALL": "C"},
            )
        except FileNotFoundError as e:
            raise RemoteStoreError(f"{self.command} not found") from e
        except subprocess.TimeoutExpired as e:
            raise RemoteStoreError(f"flatpak {args[0]} timed out") from e

        if not result.success:
            detail = result.stderr.strip() or f"exit status {result.returncode}"
            raise RemoteStoreError(f"flatpak {args[0]} failed: {detail}")
        return result

    def _scope_args(self, installation: Installation) -> list[str]:
        if installation.is_user:
            return ["--user"]
        if installation.id is None or installation.id == DEFAULT_SYSTEM_ID:
            return ["--system"]
        return [f"--installation={installation.id}"]

    def _full_ref(self, ref: str, kind: RefKind) -> str:
        if ref.startswith(("app/", "runtime/")):
            return ref
        return f"{kind.value}/{ref}"

    def _parse_remote_line(self, line: str, kind: RefKind) -> RemoteRef | None:
        """Parse one tab-separated line of remote-ls output.

        Args:
            line: 'ref<TAB>commit[<TAB>installed<TAB>download]'.
            kind: Kind of the listing the line came from.

        Returns:
            RemoteRef, or None for blank or incomplete lines.
        """
        parts = line.split("\t")
        if len(parts) < 2:
            return None

        ref = parts[0].strip()
        commit = parts[1].strip()
        if not ref or not commit:
            return None

        installed_size = self._parse_size(parts[2]) if len(parts) >= 3 else None
        download_size = self._parse_size(parts[3]) if len(parts) >= 4 else None

        return RemoteRef(
            ref=self._full_ref(ref, kind),
            commit=commit,
            installed_size=installed_size,
            download_size=download_size,
        )

    def _parse_size(self, size_str: str) -> int | None:
        """Parse a human-readable size string to bytes.

        Args:
            size_str: Size string like "1.2 GB" or "512 bytes".

        Returns:
            Size in bytes, or None if parsing fails.
        """
        match = self._SIZE_PATTERN.match(size_str)
        if not match:
            return None

        try:
            value = float(match.group(1))
        except ValueError:
            return None
        multiplier = self._SIZE_MULTIPLIERS.get(match.group(2).upper(), 1)
        return round(value * multiplier)
