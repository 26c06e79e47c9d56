"""Subprocess helpers.

Wraps the external tools fpctl talks to (flatpak, journalctl) with
consistent result handling.
"""

import shutil
import subprocess
from dataclasses import dataclass
from typing import IO


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Outcome of a finished external command.

    Attributes:
        stdout: Captured standard output.
        stderr: Captured standard error.
        returncode: Exit status.
    """

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        """Check if the command exited with status 0."""
        return self.returncode == 0


def run_command(
    args: list[str],
    *,
    timeout: float | None = 60.0,
    env: dict[str, str] | None = None,
) -> CommandResult:
    """Run a command to completion and capture its output.

    Args:
        args: Command and arguments.
        timeout: Seconds to wait before giving up.
        env: Full environment for the child, or None to inherit.

    Returns:
        CommandResult with stdout, stderr and returncode.

    Raises:
        subprocess.TimeoutExpired: If the command exceeds the timeout.
        FileNotFoundError: If the executable does not exist.
    """
    completed = subprocess.run(
        args,
        capture_output=True,
        text=True,
        check=False,
        timeout=timeout,
        env=env,
    )
    return CommandResult(
        stdout=completed.stdout,
        stderr=completed.stderr,
        returncode=completed.returncode,
    )


def open_stream(
    args: list[str],
    *,
    stderr: IO[str] | int = subprocess.DEVNULL,
) -> subprocess.Popen[str]:
    """Start a command whose stdout is consumed line by line.

    The caller owns the returned process and must terminate and reap it.
    stderr is never piped; pass a file to keep error output.

    Args:
        args: Command and arguments.
        stderr: File receiving standard error, or a subprocess constant.

    Returns:
        Running process with a text-mode stdout pipe.

    Raises:
        FileNotFoundError: If the executable does not exist.
        OSError: If the process cannot be started.
    """
    return subprocess.Popen(
        args,
        stdout=subprocess.PIPE,
        stderr=stderr,
        text=True,
        encoding="utf-8",
        errors="replace",
    )


def command_exists(name: str) -> bool:
    """Check if a command is on PATH (or is an existing executable path).

    Args:
        name: Command name or path.

    Returns:
        True if the command can be executed.
    """
    return shutil.which(name) is not None
