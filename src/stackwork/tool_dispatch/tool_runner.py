"""Execution of external tool invocations."""

from __future__ import annotations

import logging
import shlex
import subprocess
from collections.abc import Callable
from pathlib import Path

from .dispatch_contracts import ToolInvocation

CommandRunner = Callable[[tuple[str, ...], Path], None]

logger = logging.getLogger(__name__)


class ToolDispatchError(Exception):
    """Raised when an external tool cannot be started or exits with an error."""


def run_tool_invocation(
    invocation: ToolInvocation, *, run_command: CommandRunner | None = None
) -> None:
    """Run the invocation inside its working directory."""
    command_runner = run_command or _run_checked_command
    if not invocation.working_dir.is_dir():
        raise ToolDispatchError(f"Component working directory not found: {invocation.working_dir}")
    logger.info("Running %s in %s", shlex.join(invocation.command), invocation.working_dir)
    command_runner(invocation.command, invocation.working_dir)


def _run_checked_command(command: tuple[str, ...], cwd: Path) -> None:
    """Run one tool command and wrap subprocess errors with domain-friendly messages."""
    try:
        subprocess.run(list(command), cwd=cwd, check=True)
    except FileNotFoundError as exc:
        raise ToolDispatchError(f"Tool command not found: {shlex.join(command)}") from exc
    except subprocess.CalledProcessError as exc:
        raise ToolDispatchError(
            f"Tool command failed with exit code {exc.returncode}: {shlex.join(command)}"
        ) from exc
