"""Synchronous external command execution.

``run_command`` is the single primitive the engine uses to talk to git.
It returns a ``CommandResult`` value instead of raising on a non-zero exit
status: a failed signature check is an expected outcome. Only a command
that cannot run at all raises ``CommandExecutionError``.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
from dataclasses import dataclass
from typing import Callable, Sequence

from vcsverify.exceptions import CommandExecutionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one external command.

    Attributes:
        args: The argument vector that was executed.
        exit_code: Process exit status.
        output: Combined stdout and stderr, decoded as text.
    """

    args: tuple[str, ...]
    exit_code: int
    output: str

    @property
    def command(self) -> str:
        """Shell-quoted rendering of ``args`` for display."""
        return shlex.join(self.args)


def run_command(
    args: Sequence[str],
    *,
    timeout: float | None = None,
) -> CommandResult:
    """Run ``args`` to completion and capture its combined output.

    Args:
        args: Program and arguments. No shell is involved.
        timeout: Seconds to wait before giving up on the process.

    Returns:
        The exit status and combined stdout/stderr text.

    Raises:
        CommandExecutionError: If the program cannot be started, or does
            not finish within ``timeout``.
    """
    argv = tuple(str(arg) for arg in args)
    command = shlex.join(argv)
    logger.debug("Running: %s", command)
    try:
        completed = subprocess.run(
            argv,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            errors="replace",
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired:
        raise CommandExecutionError(command, f"timed out after {timeout}s")
    except OSError as exc:
        raise CommandExecutionError(command, str(exc)) from exc

    logger.debug("Exit code %d from: %s", completed.returncode, command)
    return CommandResult(argv, completed.returncode, completed.stdout or "")


# Anything shaped like ``run_command``; tests substitute a recording fake.
CommandRunner = Callable[..., CommandResult]
