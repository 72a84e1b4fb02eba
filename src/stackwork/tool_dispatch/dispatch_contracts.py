"""Tool dispatch entities."""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ToolInvocation:
    """One external tool command and the directory it runs in."""

    command: tuple[str, ...]
    working_dir: Path

    def render(self) -> str:
        return f"cd {shlex.quote(str(self.working_dir))} && {shlex.join(self.command)}"
